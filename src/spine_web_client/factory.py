"""ActorRequestFactory — builds the queries and commands an actor sends."""

from __future__ import annotations

import logging
from typing import Any

from .context import ContextBuilder
from .domain.message import TypedMessage
from .domain.type_url import TypeUrl
from .identifiers import IdentifierMinter
from .messages.actor_context import ActorContext, UserId
from .messages.command import Command, CommandContext
from .messages.query import EntityFilters, EntityId, EntityIdFilter, Query, Target
from .primitives.exceptions import ConstructionError

logger = logging.getLogger(__name__)


class ActorRequestFactory:
    """A factory for the requests fired from the client side by one actor.

    Every request gets its own id and its own :class:`ActorContext`, so two
    calls with equal arguments never produce equal envelopes.

    Parameters
    ----------
    actor:
        Non-empty identifier of the actor, e.g. a user id.
    context_builder:
        Optional :class:`~spine_web_client.context.ContextBuilder`; defaults
        to one reading the system clock.
    minter:
        Optional :class:`~spine_web_client.identifiers.IdentifierMinter`.
    """

    def __init__(
        self,
        actor: str,
        *,
        context_builder: ContextBuilder | None = None,
        minter: IdentifierMinter | None = None,
    ) -> None:
        if not isinstance(actor, str) or not actor.strip():
            raise ConstructionError("Actor must be a non-empty string")
        self._actor = UserId(value=actor)
        self._context_builder = context_builder or ContextBuilder()
        self._minter = minter or IdentifierMinter()

    @property
    def actor(self) -> UserId:
        return self._actor

    # ── Queries ──────────────────────────────────────────────────

    def query_all(self, type_url: TypeUrl | str) -> TypedMessage[Query]:
        """Create a query targeting all the instances of the given type."""
        target = Target(type=TypeUrl.parse(type_url).value, include_all=True)
        return self._query(target)

    def query_by_id(
        self,
        type_url: TypeUrl | str,
        id: TypedMessage[Any],
    ) -> TypedMessage[Query]:
        """Create a query targeting the single instance with the given *id*."""
        target_type = TypeUrl.parse(type_url)
        if not isinstance(id, TypedMessage):
            raise ConstructionError(
                f"Entity id must be a TypedMessage, got {type(id).__name__}"
            )
        filters = EntityFilters(
            id_filter=EntityIdFilter(ids=[EntityId(id=id.to_any())]),
        )
        target = Target(type=target_type.value, filters=filters)
        return self._query(target)

    # ── Commands ─────────────────────────────────────────────────

    def command(self, message: TypedMessage[Any]) -> TypedMessage[Command]:
        """Create a command from the given command message."""
        if not isinstance(message, TypedMessage):
            raise ConstructionError(
                f"Command message must be a TypedMessage, got {type(message).__name__}"
            )
        command = Command(
            id=self._minter.new_command_id(),
            message=message.to_any(),
            context=CommandContext(actor_context=self._actor_context()),
        )
        logger.debug("Built command %s (%s)", command.id.uuid, message.type_url)
        return TypedMessage.of(command)

    # ── Internals ────────────────────────────────────────────────

    def _query(self, target: Target) -> TypedMessage[Query]:
        query = Query(
            id=self._minter.new_query_id(),
            target=target,
            context=self._actor_context(),
        )
        logger.debug("Built query %s for %s", query.id.value, target.type)
        return TypedMessage.of(query)

    def _actor_context(self) -> ActorContext:
        return self._context_builder.build_actor_context(self._actor)
