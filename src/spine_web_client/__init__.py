"""spine-web-client — builds actor requests and routes backend replies.

Queries are answered through a real-time subscription, commands through a
single acknowledgement.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters import (
    FixedClock,
    HttpxTransport,
    InMemoryResponse,
    InMemorySubscriptionClient,
    InMemoryTransport,
    LoggingTransport,
    StreamingSubscriptionClient,
    SystemClock,
)

# ── Client ──────────────────────────────────────────────────────
from .client import BackendClient
from .config import ClientSettings
from .context import ContextBuilder
from .correlation import (
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)

# ── Domain ──────────────────────────────────────────────────────
from .domain import Message, PackedAny, TypedMessage, TypeUrl
from .factory import ActorRequestFactory
from .identifiers import IdentifierMinter

# ── Messages ────────────────────────────────────────────────────
from .messages import (
    Ack,
    ActorContext,
    Command,
    CommandContext,
    CommandId,
    EntityFilters,
    EntityId,
    EntityIdFilter,
    Error,
    Ok,
    Query,
    QueryId,
    Rejection,
    Status,
    Target,
    Timestamp,
    UserId,
    ZoneId,
    ZoneOffset,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import IClock, ISubscriptionClient, ITransport, TransportResponse

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    ClientError,
    ConstructionError,
    IIDGenerator,
    MessageDecodingError,
    ProtocolViolationError,
    TransportError,
    UUID4Generator,
)
from .serialization import MessageSerializer

__all__: list[str] = [
    # Client
    "ActorRequestFactory",
    "BackendClient",
    "ClientSettings",
    "ContextBuilder",
    "IdentifierMinter",
    "MessageSerializer",
    "correlation_scope",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
    # Domain
    "Message",
    "PackedAny",
    "TypeUrl",
    "TypedMessage",
    # Messages
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
    "Query",
    "QueryId",
    "Rejection",
    "Status",
    "Target",
    "Timestamp",
    "UserId",
    "ZoneId",
    "ZoneOffset",
    # Ports
    "IClock",
    "ISubscriptionClient",
    "ITransport",
    "TransportResponse",
    # Primitives
    "ClientError",
    "ConstructionError",
    "IIDGenerator",
    "MessageDecodingError",
    "ProtocolViolationError",
    "TransportError",
    "UUID4Generator",
    # Adapters
    "FixedClock",
    "HttpxTransport",
    "InMemoryResponse",
    "InMemorySubscriptionClient",
    "InMemoryTransport",
    "LoggingTransport",
    "StreamingSubscriptionClient",
    "SystemClock",
]
