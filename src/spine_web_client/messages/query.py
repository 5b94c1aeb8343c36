"""Query records — requests for the current state of entities."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field, ValidationError, model_validator

from ..domain.message import Message, PackedAny
from ..primitives.exceptions import ConstructionError
from .actor_context import ActorContext


class QueryId(Message):
    TYPE_URL: ClassVar[str | None] = "type.spine.io/spine.client.QueryId"

    value: str = Field(min_length=1)


class EntityId(Message):
    TYPE_URL: ClassVar[str | None] = "type.spine.io/spine.client.EntityId"

    id: PackedAny


class EntityIdFilter(Message):
    TYPE_URL: ClassVar[str | None] = "type.spine.io/spine.client.EntityIdFilter"

    ids: list[EntityId] = Field(default_factory=list)


class EntityFilters(Message):
    TYPE_URL: ClassVar[str | None] = "type.spine.io/spine.client.EntityFilters"

    id_filter: EntityIdFilter


class Target(Message):
    """What a query addresses.

    Either every instance of ``type`` (``include_all``) or the instances
    matched by ``filters``; never both. Building a target in any other
    shape raises :class:`ConstructionError`.
    """

    TYPE_URL: ClassVar[str | None] = "type.spine.io/spine.client.Target"

    type: str = Field(min_length=1)
    include_all: bool = False
    filters: EntityFilters | None = None

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ConstructionError(f"Invalid query target: {e}") from e

    @model_validator(mode="after")
    def _check_mode(self) -> Target:
        if self.include_all == (self.filters is not None):
            raise ValueError("Target must either include all or carry filters")
        return self


class Query(Message):
    TYPE_URL: ClassVar[str | None] = "type.spine.io/spine.client.Query"

    id: QueryId
    target: Target
    context: ActorContext
