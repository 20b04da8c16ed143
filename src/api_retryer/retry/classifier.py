"""
Retry classification: should an attempt be retried, and is it throttled.
"""

from .config import RetryConfig
from .outcome import AttemptOutcome


def is_throttle(outcome: AttemptOutcome, config: RetryConfig | None = None) -> bool:
    """
    Check whether an attempt was throttled by the service.

    Well-known throttle status codes are recognized directly. For any other
    status the externally supplied throttle signal decides.
    """
    config = config or RetryConfig()
    if outcome.status_code in config.throttle_status_codes:
        return True
    return outcome.error_throttle


def should_retry(outcome: AttemptOutcome, config: RetryConfig | None = None) -> bool:
    """
    Decide whether the request behind an attempt should be retried.

    Rules, first match wins:
        1. An explicit override from upstream is returned as is.
        2. 400 is retried (service-specific, see RetryConfig.retry_bad_request).
        3. Any 5xx is retried.
        4. Otherwise retry if the error is retryable or throttled.

    Does not check the retry ceiling.
    """
    config = config or RetryConfig()
    if outcome.retry_override is not None:
        return outcome.retry_override

    status = outcome.status_code
    if status is not None:
        if status == 400 and config.retry_bad_request:
            return True
        if status >= 500:
            return True

    return outcome.error_retryable or is_throttle(outcome, config)
