"""Waiting out BookStack's rate limiter and retrying the throttled call.

BookStack limits API use per user per minute. When the quota is spent every
request fails with ``RateLimitedError`` until the window resets. ``try_call``
wraps any API call so that such failures are absorbed: it notifies an optional
hook, sleeps for the remaining cool-down, then tries again.

Other failures are never retried here.
"""

import asyncio
import inspect
from time import monotonic
from typing import TypeVar

import tenacity
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    stop_never,
    wait_none,
)

from .constants import RATE_LIMIT_SAFETY_MARGIN
from .exceptions import RateLimitedError
from .log_config import logger
from .types import Operation, RateLimitHook

T = TypeVar("T")


async def _run_hook(hook: RateLimitHook, error: RateLimitedError) -> None:
    try:
        result = hook(error)
        if inspect.isawaitable(result):
            await result
    except Exception as e:
        logger.exception(
            f"Error executing rate limit hook {getattr(hook, '__name__', str(hook))}: {e}"
        )


def _cool_down(on_rate_limited: RateLimitHook | None):
    async def before_sleep(retry_state: tenacity.RetryCallState) -> None:
        if retry_state.outcome is None:
            return
        error = retry_state.outcome.exception()
        if not isinstance(error, RateLimitedError):
            return

        started = monotonic()
        if on_rate_limited is not None:
            await _run_hook(on_rate_limited, error)
        elapsed = monotonic() - started

        remaining = error.retry_after - elapsed
        if remaining <= 0:
            logger.info(
                f"Rate limited after attempt {retry_state.attempt_number}; "
                f"cool-down of {error.retry_after}s already elapsed, retrying now"
            )
            return
        wait_seconds = remaining + RATE_LIMIT_SAFETY_MARGIN
        logger.warning(
            f"Rate limited ({error.limit_per_minute} requests/min) after attempt "
            f"{retry_state.attempt_number}; waiting {wait_seconds:.2f}s before retrying"
        )
        await asyncio.sleep(wait_seconds)

    return before_sleep


async def try_call(
    operation: Operation[T],
    *,
    max_attempts: int | None = None,
    on_rate_limited: RateLimitHook | None = None,
) -> T:
    """Run ``operation``, retrying it whenever it is rate limited.

    Before each retry ``on_rate_limited`` is called with the failure. Its
    running time is measured and only the rest of the server's cool-down is
    slept, plus a small safety margin. A failing hook is logged and does not
    stop the retry.

    Args:
        operation: Zero-argument callable returning a fresh awaitable per call.
        max_attempts: Total number of attempts, None for no limit.
        on_rate_limited: Optional sync or async observer of throttling events.

    Returns:
        The result of the first attempt that is not rate limited.

    Raises:
        RateLimitedError: If the last permitted attempt is still rate limited.
        ShelfloomError: Any other failure of ``operation``, unchanged.
        asyncio.CancelledError: If cancelled, including while waiting.
    """
    if max_attempts is not None and max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    retrying = AsyncRetrying(
        stop=stop_never if max_attempts is None else stop_after_attempt(max_attempts),
        wait=wait_none(),
        retry=retry_if_exception_type(RateLimitedError),
        reraise=True,
        before_sleep=_cool_down(on_rate_limited),
    )
    async for attempt in retrying:
        with attempt:
            return await operation()
    raise AssertionError("unreachable")  # pragma: no cover
