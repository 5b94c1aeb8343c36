from .subscription import StreamingSubscriptionClient

__all__ = ["StreamingSubscriptionClient"]
