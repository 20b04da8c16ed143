"""
API Retryer - Exception Hierarchy.

Custom exceptions for service requests with retry and throttle awareness.
"""

from .base import (
    ServiceError,
    ThrottlingError,
    ConnectionError,
    TimeoutError,
    AuthenticationError,
    NotFoundError,
    InvalidRequestError,
    ServerError,
    error_for_status,
)

__all__ = [
    "ServiceError",
    "ThrottlingError",
    "ConnectionError",
    "TimeoutError",
    "AuthenticationError",
    "NotFoundError",
    "InvalidRequestError",
    "ServerError",
    "error_for_status",
]
