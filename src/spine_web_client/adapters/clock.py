"""SystemClock — reads the host clock and local time zone."""

from __future__ import annotations

import os
from datetime import datetime

from ..ports.clock import IClock

_LOCALTIME = "/etc/localtime"
_ZONEINFO_MARKER = "zoneinfo/"


class SystemClock(IClock):
    """Clock backed by the host environment."""

    def __init__(self, localtime_path: str = _LOCALTIME) -> None:
        self._localtime_path = localtime_path

    def now(self) -> datetime:
        return datetime.now().astimezone()

    def zone_id(self) -> str:
        """Resolve the IANA name of the local zone.

        Checks ``TZ`` first, then the target of the ``/etc/localtime`` link,
        then falls back to the zone abbreviation reported by the C library.
        """
        tz = os.environ.get("TZ", "").lstrip(":")
        if tz and not os.path.isabs(tz):
            return tz

        resolved = os.path.realpath(tz or self._localtime_path)
        if _ZONEINFO_MARKER in resolved:
            return resolved.split(_ZONEINFO_MARKER, 1)[1]

        return self.now().tzname() or "UTC"
