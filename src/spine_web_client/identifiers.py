"""IdentifierMinter — unique ids for queries and commands."""

from __future__ import annotations

from .messages.command import CommandId
from .messages.query import QueryId
from .primitives.id_generator import IIDGenerator, UUID4Generator

QUERY_ID_PREFIX = "q-"


class IdentifierMinter:
    """Mints identifiers for queries and commands.

    Query ids are prefixed textual UUIDs (``q-<uuid>``); command ids carry
    the raw UUID. Uniqueness is delegated to the underlying generator.
    """

    def __init__(self, generator: IIDGenerator | None = None) -> None:
        self._generator = generator or UUID4Generator()

    def new_query_id(self) -> QueryId:
        return QueryId(value=QUERY_ID_PREFIX + self._generator.next_id())

    def new_command_id(self) -> CommandId:
        return CommandId(uuid=self._generator.next_id())
