"""
API Retryer - Retry Logic.

Retry classification and jittered exponential backoff for service requests.
"""

from .config import RetryConfig
from .outcome import AttemptOutcome
from .classifier import is_throttle, should_retry
from .backoff import retry_after_delay, retry_delay, with_retry, async_with_retry
from .rand import LockedRandom, seeded_rand
from .retryer import ServiceRetryer

__all__ = [
    "RetryConfig",
    "AttemptOutcome",
    "is_throttle",
    "should_retry",
    "retry_after_delay",
    "retry_delay",
    "with_retry",
    "async_with_retry",
    "LockedRandom",
    "seeded_rand",
    "ServiceRetryer",
]
