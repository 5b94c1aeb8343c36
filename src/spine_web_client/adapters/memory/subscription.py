"""InMemorySubscriptionClient — ISubscriptionClient backed by a dict of lists."""

from __future__ import annotations

from typing import Any

from ...ports.subscription import ISubscriptionClient, ItemCallback
from ...utils import invoke_callback


class InMemorySubscriptionClient(ISubscriptionClient):
    """In-memory stand-in for the real-time store.

    Items pushed under a handle are kept; a new subscriber first receives
    the items already stored, then every later push, in order.
    """

    def __init__(self) -> None:
        self._items: dict[str, list[Any]] = {}
        self._subscribers: dict[str, list[ItemCallback]] = {}

    async def subscribe_to(self, handle: str, on_item: ItemCallback) -> None:
        """Register *on_item* and replay the items stored under *handle*."""
        self._subscribers.setdefault(handle, []).append(on_item)
        for item in list(self._items.get(handle, [])):
            await invoke_callback(on_item, item)

    async def push(self, handle: str, item: Any) -> None:
        """Store *item* and deliver it to every subscriber of *handle*."""
        self._items.setdefault(handle, []).append(item)
        for callback in list(self._subscribers.get(handle, [])):
            await invoke_callback(callback, item)

    def get_handles(self) -> list[str]:
        """Return the handles that have at least one subscriber."""
        return list(self._subscribers)

    def subscriber_count(self, handle: str) -> int:
        return len(self._subscribers.get(handle, []))

    def clear(self) -> None:
        """Drop stored items and subscribers (for test teardown)."""
        self._items.clear()
        self._subscribers.clear()
