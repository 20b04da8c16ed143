"""
Per-attempt facts consumed by the retry policy.
"""

from dataclasses import dataclass

import httpx

from ..exceptions import ServiceError

RETRY_AFTER_HEADER = "Retry-After"


@dataclass(frozen=True)
class AttemptOutcome:
    """
    The result of one request attempt.

    Attributes:
        status_code: HTTP status, or None if no response was received
        retry_override: Decision already made upstream (None means unset)
        error_retryable: Whether the classified error is generically retryable
        error_throttle: Whether the classified error indicates throttling
        retry_after: Raw value of the Retry-After response header
        attempt: Zero-based attempt index (n = retried n times)
    """

    status_code: int | None = None
    retry_override: bool | None = None
    error_retryable: bool = False
    error_throttle: bool = False
    retry_after: str | None = None
    attempt: int = 0

    @classmethod
    def from_response(
        cls,
        response: httpx.Response,
        attempt: int = 0,
        *,
        error_retryable: bool = False,
        error_throttle: bool = False,
    ) -> "AttemptOutcome":
        """Build an outcome from a received response."""
        return cls(
            status_code=response.status_code,
            error_retryable=error_retryable,
            error_throttle=error_throttle,
            retry_after=response.headers.get(RETRY_AFTER_HEADER),
            attempt=attempt,
        )

    @classmethod
    def from_error(cls, error: ServiceError, attempt: int = 0) -> "AttemptOutcome":
        """Build an outcome from a classified service error."""
        return cls(
            status_code=error.status_code,
            retry_override=error.retry_override,
            error_retryable=error.retryable,
            error_throttle=error.throttle,
            retry_after=error.retry_after,
            attempt=attempt,
        )
