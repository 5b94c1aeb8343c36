"""Actor context — who issued a request, when, and from which time zone."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from ..domain.message import Message


class UserId(Message):
    TYPE_URL: ClassVar[str | None] = "type.spine.io/spine.core.UserId"

    value: str = Field(min_length=1)


class ZoneId(Message):
    TYPE_URL: ClassVar[str | None] = "type.spine.io/spine.time.ZoneId"

    value: str


class ZoneOffset(Message):
    """Offset of a time zone from UTC.

    ``amount_seconds`` is positive east of UTC: local time equals UTC plus
    the offset, so ``+02:00`` is ``7200``.
    """

    TYPE_URL: ClassVar[str | None] = "type.spine.io/spine.time.ZoneOffset"

    amount_seconds: int
    id: ZoneId


class Timestamp(Message):
    """A point in time with seconds resolution."""

    TYPE_URL: ClassVar[str | None] = "type.googleapis.com/google.protobuf.Timestamp"

    seconds: int
    nanos: int = 0


class ActorContext(Message):
    TYPE_URL: ClassVar[str | None] = "type.spine.io/spine.core.ActorContext"

    actor: UserId
    timestamp: Timestamp
    zone_offset: ZoneOffset
