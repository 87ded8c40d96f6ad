import asyncio
import logging
from typing import Any, Awaitable, Callable, TypeVar

from poster.core.errors import GenerationTimeoutError, UpstreamError

logger = logging.getLogger("polling")

T = TypeVar("T")


async def poll_until(
    fetch: Callable[[], Awaitable[T]],
    *,
    interval: float,
    max_attempts: int,
    is_complete: Callable[[T], bool],
    is_failed: Callable[[T], bool],
    failure_message: str = "Image generation failed",
    timeout_message: str | None = None,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
) -> T:
    """
    Call `fetch` until it reports a terminal state.

    Returns the first result accepted by `is_complete`. Raises `UpstreamError`
    as soon as `is_failed` accepts a result and `GenerationTimeoutError` after
    `max_attempts` non-terminal results. Errors raised by `fetch` propagate
    unchanged. There is no sleep after the last attempt.
    """
    for attempt in range(1, max_attempts + 1):
        result = await fetch()

        if is_complete(result):
            logger.info("Job completed after %s attempt(s)", attempt)
            return result

        if is_failed(result):
            logger.error("Job failed on attempt %s", attempt)
            raise UpstreamError(failure_message)

        logger.debug("Job pending (attempt %s/%s)", attempt, max_attempts)
        if attempt < max_attempts:
            await sleep(interval)

    logger.error("Job did not finish after %s attempts", max_attempts)
    raise GenerationTimeoutError(timeout_message)
