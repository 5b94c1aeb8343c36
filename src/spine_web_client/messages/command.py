"""Command records — requests to change the state of the system."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from ..domain.message import Message, PackedAny
from .actor_context import ActorContext


class CommandId(Message):
    TYPE_URL: ClassVar[str | None] = "type.spine.io/spine.core.CommandId"

    uuid: str = Field(min_length=1)


class CommandContext(Message):
    TYPE_URL: ClassVar[str | None] = "type.spine.io/spine.core.CommandContext"

    actor_context: ActorContext


class Command(Message):
    """A command message together with its id and context."""

    TYPE_URL: ClassVar[str | None] = "type.spine.io/spine.core.Command"

    id: CommandId
    message: PackedAny
    context: CommandContext
