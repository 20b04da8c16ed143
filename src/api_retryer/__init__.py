"""
API Retryer - Retry policy for HTTP service clients.

Decides whether a failed request attempt should be retried and how long to
wait first, honoring server throttling hints.
"""

from .clients import RetryingClient
from .exceptions import (
    ServiceError,
    ThrottlingError,
    ConnectionError,
    TimeoutError,
    AuthenticationError,
    NotFoundError,
    InvalidRequestError,
    ServerError,
)
from .retry import (
    AttemptOutcome,
    RetryConfig,
    ServiceRetryer,
    is_throttle,
    should_retry,
    retry_delay,
    with_retry,
    async_with_retry,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Clients
    "RetryingClient",
    # Exceptions
    "ServiceError",
    "ThrottlingError",
    "ConnectionError",
    "TimeoutError",
    "AuthenticationError",
    "NotFoundError",
    "InvalidRequestError",
    "ServerError",
    # Retry
    "AttemptOutcome",
    "RetryConfig",
    "ServiceRetryer",
    "is_throttle",
    "should_retry",
    "retry_delay",
    "with_retry",
    "async_with_retry",
]
