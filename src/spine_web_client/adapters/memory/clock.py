"""FixedClock — deterministic IClock for tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from ...ports.clock import IClock


class FixedClock(IClock):
    """Clock that returns a preset instant.

    With *step* set, every call to :meth:`now` advances the clock by that
    amount after reading it.
    """

    def __init__(
        self,
        now: datetime | None = None,
        *,
        zone_id: str = "UTC",
        step: timedelta | None = None,
    ) -> None:
        current = now or datetime(2024, 1, 1, tzinfo=timezone.utc)
        if current.tzinfo is None:
            raise ValueError("FixedClock requires a timezone-aware datetime")
        self._now = current
        self._zone_id = zone_id
        self._step = step

    def now(self) -> datetime:
        current = self._now
        if self._step is not None:
            self._now = current + self._step
        return current

    def zone_id(self) -> str:
        return self._zone_id

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward by *delta*."""
        self._now = self._now + delta
