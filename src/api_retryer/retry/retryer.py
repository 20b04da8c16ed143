"""
Retryer object bundling the retry ceiling with the two retry decisions.
"""

from .backoff import retry_delay
from .classifier import is_throttle, should_retry
from .config import RetryConfig
from .outcome import AttemptOutcome
from .rand import LockedRandom


class ServiceRetryer:
    """
    Retry policy for a service that also retries on 400s.

    Holds no state beyond its configuration, so one instance can be shared by
    any number of concurrent requests.
    """

    def __init__(
        self,
        config: RetryConfig | None = None,
        rand: LockedRandom | None = None,
    ):
        self.config = config or RetryConfig()
        self.rand = rand

    @property
    def max_retries(self) -> int:
        """Maximum number of retries the caller should allow."""
        return self.config.max_retries

    def should_retry(self, outcome: AttemptOutcome) -> bool:
        return should_retry(outcome, self.config)

    def is_throttle(self, outcome: AttemptOutcome) -> bool:
        return is_throttle(outcome, self.config)

    def retry_delay(self, outcome: AttemptOutcome, attempt: int | None = None) -> float:
        """Delay in seconds before retrying this attempt."""
        return retry_delay(outcome, attempt, self.config, self.rand)
