"""MessageSerializer — JSON encoding of requests and decoding of replies."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from .messages.ack import Ack
from .primitives.exceptions import ConstructionError, MessageDecodingError

if TYPE_CHECKING:
    from .domain.message import TypedMessage


class MessageSerializer:
    """Serialize typed messages to JSON bytes and parse acknowledgements.

    Requests travel as ``{"typeUrl": ..., "value": {...}}`` with
    lowerCamelCase field names inside ``value``.
    """

    def serialize(self, message: TypedMessage[Any]) -> bytes:
        """Encode *message* to JSON bytes."""
        try:
            return json.dumps(message.to_wire(), separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise ConstructionError(f"Cannot serialize {message.type_url}: {e}") from e

    def decode_json(self, raw: bytes | str) -> Any:
        """Decode a reply body to plain JSON values."""
        try:
            text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
            return json.loads(text)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise MessageDecodingError(f"Reply is not valid JSON: {e}") from e

    def deserialize_ack(self, raw: bytes | str) -> Ack:
        """Decode an acknowledgement, failing closed on a malformed status.

        Raises:
            MessageDecodingError: the body is not an ``Ack`` record.
            ProtocolViolationError: the status has zero or several outcomes.
        """
        return self.ack_from_json(self.decode_json(raw))

    def ack_from_json(self, data: Any) -> Ack:
        """Validate already decoded JSON as an ``Ack``."""
        if not isinstance(data, dict):
            raise MessageDecodingError(
                f"Acknowledgement must be a JSON object, got {type(data).__name__}"
            )
        try:
            ack = Ack.model_validate(data)
        except ValidationError as e:
            raise MessageDecodingError(f"Malformed acknowledgement: {e}") from e
        ack.outcome()
        return ack
