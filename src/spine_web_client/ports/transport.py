from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.message import TypedMessage


@runtime_checkable
class TransportResponse(Protocol):
    """Reply of the backend to a single POST."""

    @property
    def status_code(self) -> int: ...

    async def text(self) -> str:
        """Read the whole body as text."""
        ...

    async def json(self) -> Any:
        """Read the whole body and decode it as JSON."""
        ...


@runtime_checkable
class ITransport(Protocol):
    """
    Port for sending typed messages to the backend.

    Timeouts and any retry policy belong to the implementation.
    """

    async def post(self, path: str, message: TypedMessage[Any]) -> TransportResponse:
        """
        POST *message* to *path*.

        Args:
            path: Endpoint path relative to the backend root, e.g. ``/command``.
            message: The typed envelope to send.

        Raises:
            TransportError: when the request cannot be delivered.
        """
        ...

    async def aclose(self) -> None:
        """Release the underlying connections."""
        ...
