from .clock import IClock
from .subscription import ISubscriptionClient, ItemCallback
from .transport import ITransport, TransportResponse

__all__ = [
    "IClock",
    "ISubscriptionClient",
    "ITransport",
    "ItemCallback",
    "TransportResponse",
]
