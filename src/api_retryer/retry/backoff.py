"""
Backoff calculation and retry decorators.
"""

import asyncio
import functools
import logging
import re
import threading
import time
from typing import Callable, TypeVar, ParamSpec, Awaitable

from .classifier import is_throttle, should_retry
from .config import RetryConfig
from .outcome import AttemptOutcome
from .rand import LockedRandom, seeded_rand
from ..exceptions import ServiceError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

# ASCII decimal seconds with an optional sign; HTTP-dates are not understood.
_RETRY_AFTER_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)

# Largest delay time.sleep and asyncio.sleep accept on every platform.
MAX_RETRY_AFTER_SECONDS = int(threading.TIMEOUT_MAX)


def retry_after_delay(
    outcome: AttemptOutcome, config: RetryConfig | None = None
) -> float | None:
    """
    Read the server's Retry-After hint (RFC 7231) for a throttled attempt.

    Only integer second counts are understood, and only for status codes
    where the hint applies.

    Returns:
        Delay in seconds, or None if there is no usable hint
    """
    config = config or RetryConfig()
    if outcome.status_code not in config.retry_after_status_codes:
        return None

    value = outcome.retry_after
    if not value:
        return None

    if not _RETRY_AFTER_PATTERN.fullmatch(value):
        logger.debug(f"Ignoring unparsable Retry-After value: {value!r}")
        return None

    delay = int(value)
    if delay > MAX_RETRY_AFTER_SECONDS:
        logger.debug(f"Ignoring out of range Retry-After value: {value!r}")
        return None

    # Negative hints mean "retry now".
    return float(max(delay, 0))


def retry_delay(
    outcome: AttemptOutcome,
    attempt: int | None = None,
    config: RetryConfig | None = None,
    rand: LockedRandom | None = None,
) -> float:
    """
    Calculate the delay before retrying an attempt.

    A usable Retry-After hint on a throttled attempt wins outright. Otherwise
    the delay is ``2**count * uniform[base, 2*base)`` milliseconds, where base
    is 30ms (500ms when throttled) and count is the attempt index clamped to
    13 (8 when throttled).

    Args:
        outcome: The attempt being retried
        attempt: Zero-based retry count (default: outcome.attempt)
        config: Retry configuration
        rand: Random source for jitter (default: the shared process-wide one)

    Returns:
        Delay in seconds
    """
    config = config or RetryConfig()
    rand = rand or seeded_rand
    if attempt is None:
        attempt = outcome.attempt

    base = config.min_delay_ms
    ceiling = config.max_retry_exponent
    if is_throttle(outcome, config):
        hinted = retry_after_delay(outcome, config)
        if hinted is not None:
            return hinted
        base = config.throttle_min_delay_ms
        ceiling = config.max_throttle_exponent

    count = min(max(attempt, 0), ceiling)
    delay_ms = (1 << count) * (rand.intn(base) + base)
    return delay_ms / 1000


def with_retry(
    config: RetryConfig | None = None,
    on_retry: Callable[[int, Exception, float], None] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Decorator for synchronous functions with retry logic.

    Args:
        config: Retry configuration (default: RetryConfig())
        on_retry: Optional callback(attempt, exception, delay) called before each retry

    Returns:
        Decorated function with retry behavior
    """
    if config is None:
        config = RetryConfig()

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            attempt = 0
            while True:
                try:
                    return func(*args, **kwargs)
                except ServiceError as e:
                    outcome = AttemptOutcome.from_error(e, attempt)
                    if not should_retry(outcome, config):
                        raise
                    if attempt >= config.max_retries:
                        logger.error(f"All {config.max_retries} retries exhausted: {e}")
                        raise
                    delay = retry_delay(outcome, attempt, config)
                    if on_retry:
                        on_retry(attempt, e, delay)
                    else:
                        logger.warning(
                            f"Retry {attempt + 1}/{config.max_retries}: {e}, "
                            f"waiting {delay:.1f}s"
                        )
                    time.sleep(delay)
                    attempt += 1

        return wrapper

    return decorator


def async_with_retry(
    config: RetryConfig | None = None,
    on_retry: Callable[[int, Exception, float], None] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Decorator for async functions with retry logic.

    Args:
        config: Retry configuration (default: RetryConfig())
        on_retry: Optional callback(attempt, exception, delay) called before each retry

    Returns:
        Decorated async function with retry behavior
    """
    if config is None:
        config = RetryConfig()

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            attempt = 0
            while True:
                try:
                    return await func(*args, **kwargs)
                except ServiceError as e:
                    outcome = AttemptOutcome.from_error(e, attempt)
                    if not should_retry(outcome, config):
                        raise
                    if attempt >= config.max_retries:
                        logger.error(f"All {config.max_retries} retries exhausted: {e}")
                        raise
                    delay = retry_delay(outcome, attempt, config)
                    if on_retry:
                        on_retry(attempt, e, delay)
                    else:
                        logger.warning(
                            f"Retry {attempt + 1}/{config.max_retries}: {e}, "
                            f"waiting {delay:.1f}s"
                        )
                    await asyncio.sleep(delay)
                    attempt += 1

        return wrapper

    return decorator
