"""Client-side exceptions for spine-web-client."""

from __future__ import annotations


class ClientError(Exception):
    """Root exception for the entire web client."""


class ConstructionError(ClientError, ValueError):
    """Raised when a request cannot be built from the given input.

    Usage: ``ActorRequestFactory`` and the typed-message primitives raise this
    synchronously for an empty actor, a missing type URL, or a payload whose
    declared type does not match its tag.
    """


class TransportError(ClientError):
    """Raised when the backend round-trip fails.

    Covers network failures, non-success HTTP statuses and unreadable
    replies. Never retried by the client itself.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        detail: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)


class MessageDecodingError(TransportError):
    """Raised when a reply body is not a well-formed record."""


class ProtocolViolationError(ClientError):
    """Raised when an acknowledgement does not carry exactly one outcome.

    Carries the names of the outcome fields that were present.
    """

    def __init__(self, present: list[str] | None = None) -> None:
        self.present = list(present or [])
        if self.present:
            detail = ", ".join(self.present)
            msg = f"Acknowledgement status has several outcomes set: {detail}"
        else:
            msg = "Acknowledgement status has no outcome set"
        super().__init__(msg)
