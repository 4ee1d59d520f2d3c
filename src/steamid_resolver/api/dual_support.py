"""Awaitable / callback dual calling convention.

Every public lookup is an awaitable. Passing `callback` additionally reports
the outcome as `callback(error_message, result)`; in that mode the awaitable
resolves to the result (or None) and never raises.
"""

from __future__ import annotations

from typing import Awaitable, Callable, Optional, TypeVar

T = TypeVar("T")

CallbackFunction = Callable[[Optional[str], Optional[T]], None]


async def with_callback(
    operation: Awaitable[T],
    callback: CallbackFunction[T] | None = None,
) -> T | None:
    if callback is None:
        return await operation

    try:
        result = await operation
    except Exception as exc:
        callback(str(exc) or exc.__class__.__name__, None)
        return None

    callback(None, result)
    return result
