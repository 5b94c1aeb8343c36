from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import datetime


@runtime_checkable
class IClock(Protocol):
    """
    Port for reading the current time and the local time zone.

    Injected into :class:`~spine_web_client.context.ContextBuilder` so that
    request timestamps can be made deterministic in tests.
    """

    def now(self) -> datetime:
        """Current instant as a timezone-aware datetime in the local zone."""
        ...

    def zone_id(self) -> str:
        """IANA-style identifier of the local zone, e.g. ``Europe/Kyiv``."""
        ...
