"""ContextBuilder — actor, time and time-zone metadata for every request."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .adapters.clock import SystemClock
from .messages.actor_context import ActorContext, Timestamp, UserId, ZoneId, ZoneOffset

if TYPE_CHECKING:
    from datetime import datetime

    from .ports.clock import IClock


class ContextBuilder:
    """Builds a fresh :class:`ActorContext` for each request.

    Timestamps are whole seconds since the epoch; the sub-second part is
    dropped. Zone offsets are positive east of UTC (``+02:00`` -> ``7200``).
    """

    def __init__(self, clock: IClock | None = None) -> None:
        self._clock = clock or SystemClock()

    def build_actor_context(self, actor: UserId | str) -> ActorContext:
        """Snapshot the clock once and describe *actor* at that instant."""
        user = actor if isinstance(actor, UserId) else UserId(value=actor)
        now = self._local(self._clock.now())
        return ActorContext(
            actor=user,
            timestamp=Timestamp(seconds=int(now.timestamp())),
            zone_offset=self._zone_offset_at(now),
        )

    def zone_offset_seconds(self) -> int:
        """Seconds to add to UTC to get the current local time."""
        return self._offset_seconds(self._local(self._clock.now()))

    def zone_offset(self) -> ZoneOffset:
        return self._zone_offset_at(self._local(self._clock.now()))

    def _zone_offset_at(self, now: datetime) -> ZoneOffset:
        return ZoneOffset(
            amount_seconds=self._offset_seconds(now),
            id=ZoneId(value=self._clock.zone_id()),
        )

    @staticmethod
    def _local(now: datetime) -> datetime:
        return now if now.tzinfo is not None else now.astimezone()

    @staticmethod
    def _offset_seconds(now: datetime) -> int:
        offset = now.utcoffset()
        return int(offset.total_seconds()) if offset is not None else 0
