from .message import Message, PackedAny, TypedMessage
from .type_url import TypeUrl

__all__ = [
    "Message",
    "PackedAny",
    "TypeUrl",
    "TypedMessage",
]
