"""LoggingTransport — decorator for ITransport that logs every round-trip."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from ...correlation import get_correlation_id
from ...ports.transport import ITransport

if TYPE_CHECKING:
    from ...domain.message import TypedMessage
    from ...ports.transport import TransportResponse

logger = logging.getLogger("spine_web_client.transport")


class LoggingTransport(ITransport):
    """Logs path, message type, status, duration and correlation_id."""

    def __init__(self, inner: ITransport) -> None:
        self._inner = inner

    async def post(self, path: str, message: TypedMessage[Any]) -> TransportResponse:
        type_name = message.type_url.type_name
        logger.info(
            "POST %s %s (correlation_id=%s)",
            path,
            type_name,
            get_correlation_id(),
        )
        start = time.perf_counter()
        try:
            response = await self._inner.post(path, message)
        except Exception:
            elapsed = (time.perf_counter() - start) * 1000
            logger.exception("POST %s %s failed after %.2fms", path, type_name, elapsed)
            raise
        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "POST %s %s -> %s in %.2fms",
            path,
            type_name,
            response.status_code,
            elapsed,
        )
        return response

    async def aclose(self) -> None:
        await self._inner.aclose()
