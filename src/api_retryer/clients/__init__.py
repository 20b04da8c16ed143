"""
API Retryer - HTTP Clients.
"""

from .http import RetryingClient

__all__ = ["RetryingClient"]
