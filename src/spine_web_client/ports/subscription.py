from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, runtime_checkable

#: Receives one decoded data item; may be a plain function or a coroutine.
ItemCallback = Callable[[Any], Awaitable[None] | None]


@runtime_checkable
class ISubscriptionClient(Protocol):
    """
    Port for the real-time store that streams query results.

    The client owns the subscription once registered: items keep arriving
    for as long as the store pushes them and are never replayed.
    """

    async def subscribe_to(self, handle: str, on_item: ItemCallback) -> None:
        """
        Start delivering items published under *handle* to *on_item*.

        Args:
            handle: Subscription handle returned by the backend for a query,
                e.g. a path inside the store.
            on_item: Callback invoked once per item, in arrival order.
        """
        ...
