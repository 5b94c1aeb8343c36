from .ack import Ack, Error, Ok, Outcome, Rejection, Status
from .actor_context import ActorContext, Timestamp, UserId, ZoneId, ZoneOffset
from .command import Command, CommandContext, CommandId
from .query import EntityFilters, EntityId, EntityIdFilter, Query, QueryId, Target

__all__ = [
    "Ack",
    "ActorContext",
    "Command",
    "CommandContext",
    "CommandId",
    "EntityFilters",
    "EntityId",
    "EntityIdFilter",
    "Error",
    "Ok",
    "Outcome",
    "Query",
    "QueryId",
    "Rejection",
    "Status",
    "Target",
    "Timestamp",
    "UserId",
    "ZoneId",
    "ZoneOffset",
]
