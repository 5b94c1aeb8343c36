import uuid
from typing import Protocol


class IIDGenerator(Protocol):
    """
    Source of the random part of query and command ids.
    Request ids are only as unique as the values returned here.
    """

    def next_id(self) -> str:
        """Return a fresh, never repeated string."""
        ...


class UUID4Generator(IIDGenerator):
    """Random UUIDv4 strings in canonical hyphenated form."""

    def next_id(self) -> str:
        return str(uuid.uuid4())
