"""InMemoryTransport — ITransport with canned replies and assertion helpers."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ...ports.transport import ITransport
from ...primitives.exceptions import MessageDecodingError
from ...utils import invoke_callback

if TYPE_CHECKING:
    from collections.abc import Callable

    from ...domain.message import TypedMessage


@dataclass(frozen=True)
class InMemoryResponse:
    """A fully buffered reply."""

    status_code: int = 200
    body: str = ""

    async def text(self) -> str:
        return self.body

    async def json(self) -> Any:
        try:
            return json.loads(self.body)
        except ValueError as e:
            raise MessageDecodingError(f"Reply is not valid JSON: {e}") from e


Reply = InMemoryResponse | str | dict | list


class InMemoryTransport(ITransport):
    """In-memory transport that answers posts from registered routes.

    A route handler receives the posted message and returns an
    :class:`InMemoryResponse`, a text body or a JSON-compatible value.
    Exceptions raised by a handler propagate from :meth:`post`, which
    simulates a failed delivery. Unrouted paths answer ``404``.
    """

    def __init__(self) -> None:
        self._routes: dict[str, Callable[[TypedMessage[Any]], Any]] = {}
        self._sent: list[tuple[str, TypedMessage[Any]]] = []
        self.closed = False

    def route(self, path: str, handler: Callable[[TypedMessage[Any]], Any]) -> None:
        """Answer posts to *path* with *handler*."""
        self._routes[path] = handler

    def respond_with(self, path: str, body: Reply, status_code: int = 200) -> None:
        """Answer every post to *path* with the same reply."""
        response = self._to_response(body, status_code)
        self._routes[path] = lambda _message: response

    def fail_with(self, path: str, exc: BaseException) -> None:
        """Raise *exc* for every post to *path*."""

        def _raise(_message: TypedMessage[Any]) -> Any:
            raise exc

        self._routes[path] = _raise

    async def post(self, path: str, message: TypedMessage[Any]) -> InMemoryResponse:
        """Record *message* and produce the routed reply."""
        self._sent.append((path, message))
        handler = self._routes.get(path)
        if handler is None:
            return InMemoryResponse(status_code=404, body=f"No route for {path}")
        reply = await invoke_callback(handler, message)
        return self._to_response(reply)

    async def aclose(self) -> None:
        self.closed = True

    def get_sent(self) -> list[tuple[str, TypedMessage[Any]]]:
        """Return all (path, message) posted so far, in order."""
        return list(self._sent)

    def assert_sent(
        self,
        type_url: str,
        count: int = 1,
        path: str | None = None,
    ) -> None:
        """Assert that exactly `count` messages of *type_url* were posted.

        Optionally restrict to a specific path. Raises AssertionError if not met.
        """
        sent = self.get_sent()
        if path is not None:
            sent = [(p, m) for p, m in sent if p == path]
        matching = [m for _, m in sent if m.type_url.value == type_url]
        assert len(matching) == count, (
            f"Expected {count} message(s) of type {type_url!r}, "
            f"got {len(matching)}. Sent: {[m.type_url.value for _, m in sent]}"
        )

    def clear(self) -> None:
        """Forget sent messages and routes (for test teardown)."""
        self._sent.clear()
        self._routes.clear()

    @staticmethod
    def _to_response(reply: Any, status_code: int = 200) -> InMemoryResponse:
        if isinstance(reply, InMemoryResponse):
            return reply
        if isinstance(reply, str):
            return InMemoryResponse(status_code=status_code, body=reply)
        return InMemoryResponse(status_code=status_code, body=json.dumps(reply))
