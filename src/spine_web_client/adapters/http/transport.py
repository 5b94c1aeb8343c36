"""HttpxTransport — ITransport over HTTP using httpx.AsyncClient."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from ...correlation import get_correlation_id
from ...ports.transport import ITransport
from ...primitives.exceptions import MessageDecodingError, TransportError
from ...serialization import MessageSerializer

if TYPE_CHECKING:
    from types import TracebackType

    from ...domain.message import TypedMessage

logger = logging.getLogger(__name__)


class HttpxResponse:
    """TransportResponse over a fully read :class:`httpx.Response`."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    async def text(self) -> str:
        await self._response.aread()
        return self._response.text

    async def json(self) -> Any:
        await self._response.aread()
        try:
            return self._response.json()
        except ValueError as e:
            raise MessageDecodingError(f"Reply is not valid JSON: {e}") from e


class HttpxTransport(ITransport):
    """
    Posts JSON-encoded typed messages to the backend.

    Requests carry the current correlation ID in ``X-Correlation-ID``.
    Connection failures and timeouts surface as :class:`TransportError`;
    non-success statuses are returned to the caller untouched.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        client: httpx.AsyncClient | None = None,
        serializer: MessageSerializer | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._headers = dict(headers or {})
        self._serializer = serializer or MessageSerializer()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url, timeout=timeout
        )

    async def post(self, path: str, message: TypedMessage[Any]) -> HttpxResponse:
        body = self._serializer.serialize(message)
        headers = {
            "Content-Type": "application/json",
            **self._headers,
        }
        correlation_id = get_correlation_id()
        if correlation_id:
            headers["X-Correlation-ID"] = correlation_id

        try:
            response = await self._client.post(path, content=body, headers=headers)
        except httpx.HTTPError as e:
            logger.debug("POST %s failed: %s", path, e)
            raise TransportError(f"POST {path} failed: {e}") from e
        return HttpxResponse(response)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
