"""Bounded retry for async operations whose result may not be ready yet.

An attempt is retried when it raises or when ``condition`` reports the
result as unsatisfactory. Both paths share the same ``retries >=
max_retry_count`` bound, so at most ``max_retry_count + 1`` attempts run.
Once the bound is reached a raised exception propagates, while an
unsatisfactory result is returned as-is.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_RETRY_COUNT = 3
DEFAULT_DELAY_SECONDS = 2.0

SleepFunc = Callable[[float], Awaitable[None]]


async def retry_on_condition(
    operation: Callable[[], Awaitable[T]],
    condition: Callable[[T], bool],
    max_retry_count: int = DEFAULT_MAX_RETRY_COUNT,
    delay: float | None = None,
    *,
    sleep: SleepFunc = asyncio.sleep,
) -> T:
    """Run ``operation`` until ``condition`` is false or retries run out.

    Args:
        operation: Zero-argument coroutine factory performing one attempt.
        condition: Returns ``True`` when a result should be retried.
        max_retry_count: Retries allowed after the first attempt.
        delay: Seconds to wait between attempts, 2 seconds when omitted.
        sleep: Awaitable used for the wait between attempts.

    Returns:
        The first satisfactory result, or the last result once the retry
        budget is spent.

    Raises:
        Exception: Whatever the final attempt raised.
    """
    wait_seconds = DEFAULT_DELAY_SECONDS if delay is None else delay
    retries = 0
    while True:
        try:
            result = await operation()
        except Exception as exc:
            if retries >= max_retry_count:
                logger.error("Operation failed after %d attempts.", max_retry_count, exc_info=exc)
                raise
            logger.warning(
                "Exception occurred during operation. Retrying... Attempt: %d of %d",
                retries + 1,
                max_retry_count,
                exc_info=exc,
            )
        else:
            if not condition(result) or retries >= max_retry_count:
                logger.info("Operation successful or max retries reached. Retries: %d", retries)
                return result
            logger.warning(
                "Condition not met for operation. Retrying... Attempt: %d of %d",
                retries + 1,
                max_retry_count,
            )
        retries += 1
        await sleep(wait_seconds)
