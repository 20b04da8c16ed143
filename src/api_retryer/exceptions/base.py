"""
Base exception classes for service API requests.

Each exception carries the signals the retry policy consumes: a `retryable`
flag, a `throttle` flag for service-specific rate limiting, and an optional
`retry_override` for failures that happened before any response arrived.
"""


class ServiceError(Exception):
    """Base exception for all service request errors."""

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        throttle: bool = False,
        status_code: int | None = None,
        retry_after: str | None = None,
        retry_override: bool | None = None,
        service: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.retryable = retryable
        self.throttle = throttle
        self.status_code = status_code
        self.retry_after = retry_after
        self.retry_override = retry_override
        self.service = service

    def __str__(self) -> str:
        parts = [self.message]
        if self.service:
            parts.insert(0, f"[{self.service}]")
        if self.status_code:
            parts.append(f"(status: {self.status_code})")
        return " ".join(parts)


class ThrottlingError(ServiceError):
    """Raised when the service signals rate limiting. Always retryable."""

    def __init__(self, message: str = "Request throttled", **kwargs):
        super().__init__(message, retryable=True, throttle=True, **kwargs)


class ConnectionError(ServiceError):
    """Raised when no connection could be made. Retried unconditionally."""

    def __init__(self, message: str = "Connection failed", **kwargs):
        kwargs.setdefault("retry_override", True)
        super().__init__(message, retryable=True, **kwargs)


class TimeoutError(ServiceError):
    """Raised when the request times out. Retried unconditionally."""

    def __init__(self, message: str = "Request timed out", **kwargs):
        kwargs.setdefault("retry_override", True)
        super().__init__(message, retryable=True, **kwargs)


class AuthenticationError(ServiceError):
    """Raised when authentication fails. Not retryable."""

    def __init__(self, message: str = "Authentication failed", **kwargs):
        super().__init__(message, retryable=False, **kwargs)


class NotFoundError(ServiceError):
    """Raised when the requested resource does not exist. Not retryable."""

    def __init__(self, message: str = "Not found", **kwargs):
        super().__init__(message, retryable=False, **kwargs)


class InvalidRequestError(ServiceError):
    """Raised on 400. The retry policy still retries these by default."""

    def __init__(self, message: str = "Invalid request", **kwargs):
        super().__init__(message, retryable=False, **kwargs)


class ServerError(ServiceError):
    """Raised when the server returns a 5xx error. Usually retryable."""

    def __init__(self, message: str = "Server error", **kwargs):
        super().__init__(message, retryable=True, **kwargs)


def error_for_status(
    status_code: int,
    text: str = "",
    *,
    retry_after: str | None = None,
    service: str | None = None,
) -> ServiceError:
    """Convert an HTTP error status to the matching domain exception."""
    kwargs = {"status_code": status_code, "retry_after": retry_after, "service": service}
    if status_code in (401, 403):
        return AuthenticationError(**kwargs)
    elif status_code == 404:
        return NotFoundError(**kwargs)
    elif status_code == 400:
        return InvalidRequestError(f"Invalid request: {text}", **kwargs)
    elif status_code == 429:
        return ThrottlingError("Rate limit exceeded", **kwargs)
    elif status_code >= 500:
        return ServerError(f"Server error: {text}", **kwargs)
    return ServiceError(f"Unexpected status: {text}", **kwargs)
