"""
Retry configuration for the service retry policy.
"""

from dataclasses import dataclass, field
from typing import FrozenSet


@dataclass
class RetryConfig:
    """
    Configuration for retry behavior.

    Only ``max_retries`` is normally tuned. The remaining fields default to the
    fixed service policy and exist so the status-code tables can be audited and
    extended per service.

    Attributes:
        max_retries: Maximum number of retry attempts (default: 3). Enforced by
            the retry loop, not by the delay calculation.
        min_delay_ms: Base jitter window in milliseconds for ordinary retries
        throttle_min_delay_ms: Base jitter window in milliseconds when throttled
        max_retry_exponent: Ceiling for the backoff exponent when not throttled
        max_throttle_exponent: Ceiling for the backoff exponent when throttled
        throttle_status_codes: Status codes always treated as throttling
        retry_after_status_codes: Status codes for which Retry-After is honored
        retry_bad_request: Retry 400 responses. This is a service-specific
            exception to generic HTTP semantics; disable it for services that
            return 400 only for genuinely malformed requests.
    """

    max_retries: int = 3
    min_delay_ms: int = 30
    throttle_min_delay_ms: int = 500
    max_retry_exponent: int = 13
    max_throttle_exponent: int = 8
    throttle_status_codes: FrozenSet[int] = field(
        default_factory=lambda: frozenset({429, 502, 503, 504})
    )
    retry_after_status_codes: FrozenSet[int] = field(
        default_factory=lambda: frozenset({429, 503})
    )
    retry_bad_request: bool = True

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        if self.min_delay_ms <= 0 or self.throttle_min_delay_ms <= 0:
            raise ValueError("delay windows must be positive")
        if self.max_retry_exponent < 0 or self.max_throttle_exponent < 0:
            raise ValueError("exponent ceilings must be >= 0")
        self.throttle_status_codes = frozenset(self.throttle_status_codes)
        self.retry_after_status_codes = frozenset(self.retry_after_status_codes)

    @classmethod
    def aggressive(cls) -> "RetryConfig":
        """Preset for aggressive retry (more attempts)."""
        return cls(max_retries=10)

    @classmethod
    def conservative(cls) -> "RetryConfig":
        """Preset for conservative retry (fewer attempts)."""
        return cls(max_retries=1)

    @classmethod
    def no_retry(cls) -> "RetryConfig":
        """Preset for no retry (single attempt only)."""
        return cls(max_retries=0)
