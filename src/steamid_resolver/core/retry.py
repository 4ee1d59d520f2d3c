"""Bounded retry with linear backoff.

Attempt n (1-based) that fails waits `base_delay * n` before attempt n + 1.
After the last attempt the last error is re-raised as-is, so its type and
message reach the caller untouched.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    *,
    max_retries: int = 3,
    base_delay: float = 1.0,
    sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
) -> T:
    if max_retries < 1:
        raise ValueError("max_retries must be >= 1")

    attempt = 0
    while True:
        attempt += 1
        try:
            return await operation()
        except Exception as exc:
            if attempt >= max_retries:
                raise
            delay = base_delay * attempt
            logger.debug(
                "Attempt %d/%d failed (%s); retrying in %.2fs",
                attempt,
                max_retries,
                exc,
                delay,
            )
            await sleep(delay)

