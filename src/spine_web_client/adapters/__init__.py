from .clock import SystemClock
from .decorators import LoggingTransport
from .http import HttpxResponse, HttpxTransport
from .memory import (
    FixedClock,
    InMemoryResponse,
    InMemorySubscriptionClient,
    InMemoryTransport,
)
from .streaming import StreamingSubscriptionClient

__all__ = [
    "FixedClock",
    "HttpxResponse",
    "HttpxTransport",
    "InMemoryResponse",
    "InMemorySubscriptionClient",
    "InMemoryTransport",
    "LoggingTransport",
    "StreamingSubscriptionClient",
    "SystemClock",
]
