from .exceptions import (
    ClientError,
    ConstructionError,
    MessageDecodingError,
    ProtocolViolationError,
    TransportError,
)
from .id_generator import IIDGenerator, UUID4Generator

__all__ = [
    "ClientError",
    "ConstructionError",
    "IIDGenerator",
    "MessageDecodingError",
    "ProtocolViolationError",
    "TransportError",
    "UUID4Generator",
]
