from .clock import FixedClock
from .subscription import InMemorySubscriptionClient
from .transport import InMemoryResponse, InMemoryTransport

__all__ = [
    "FixedClock",
    "InMemoryResponse",
    "InMemorySubscriptionClient",
    "InMemoryTransport",
]
