"""StreamingSubscriptionClient — drives async item streams in background tasks."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from ...ports.subscription import ISubscriptionClient, ItemCallback
from ...utils import invoke_callback

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

logger = logging.getLogger(__name__)


class StreamingSubscriptionClient(ISubscriptionClient):
    """Adapts any async item source to :class:`ISubscriptionClient`.

    *open_stream* maps a subscription handle to an async iterator of decoded
    items, e.g. a server-sent-events reader or a real-time database listener.
    Each subscription runs in its own task until the stream ends or
    :meth:`aclose` cancels it.
    """

    def __init__(self, open_stream: Callable[[str], AsyncIterator[Any]]) -> None:
        self._open_stream = open_stream
        self._tasks: set[asyncio.Task[None]] = set()

    async def subscribe_to(self, handle: str, on_item: ItemCallback) -> None:
        stream = self._open_stream(handle)
        task = asyncio.get_running_loop().create_task(
            self._pump(handle, stream, on_item),
            name=f"subscription:{handle}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._on_done)

    @property
    def active(self) -> int:
        """Number of subscriptions still delivering items."""
        return len(self._tasks)

    async def aclose(self) -> None:
        """Cancel every running subscription and wait for the tasks to finish."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()

    async def _pump(
        self,
        handle: str,
        stream: AsyncIterator[Any],
        on_item: ItemCallback,
    ) -> None:
        async for item in stream:
            await invoke_callback(on_item, item)
        logger.debug("Subscription %s reached the end of its stream", handle)

    def _on_done(self, task: asyncio.Task[None]) -> None:
        """Forget the finished task; log its failure instead of dropping it."""
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.warning(
                "Subscription task %s failed: %s",
                task.get_name(),
                exc,
                exc_info=exc,
            )
