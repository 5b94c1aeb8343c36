"""Common utility functions and helpers."""

from __future__ import annotations

from inspect import isawaitable
from typing import Any


async def invoke_callback(callback: Any, *args: Any) -> Any:
    """Call *callback* with *args*, awaiting the result when it is awaitable.

    Lets callers pass plain functions and coroutine functions alike.
    """
    result = callback(*args)
    if isawaitable(result):
        return await result
    return result


def noop(*_args: Any) -> None:
    """Callback that ignores its arguments."""
    return None
