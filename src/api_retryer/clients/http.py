"""
Async HTTP client that retries requests using the service retry policy.
"""

import asyncio
import logging

import httpx

from ..exceptions import (
    ConnectionError,
    ServiceError,
    TimeoutError,
    error_for_status,
)
from ..retry import AttemptOutcome, RetryConfig, ServiceRetryer
from ..retry.outcome import RETRY_AFTER_HEADER

logger = logging.getLogger(__name__)


class RetryingClient:
    """
    Client for a remote HTTP API with automatic retry.

    Features:
    - Connection failures and timeouts are always retried
    - Throttling detection with Retry-After support
    - Exponential backoff with jitter
    - Error statuses mapped to domain exceptions
    """

    def __init__(
        self,
        base_url: str,
        retry_config: RetryConfig | None = None,
        timeout: float = 30.0,
        headers: dict | None = None,
        service_name: str = "service",
    ):
        """
        Initialize the client.

        Args:
            base_url: API base URL
            retry_config: Retry configuration for failed requests
            timeout: Request timeout in seconds
            headers: Headers sent with every request
            service_name: Service name for logging and errors
        """
        self.base_url = base_url.rstrip("/")
        self.retryer = ServiceRetryer(retry_config)
        self.timeout = timeout
        self.headers = headers or {}
        self.service_name = service_name

    @property
    def retry_config(self) -> RetryConfig:
        return self.retryer.config

    async def request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """
        Send a request, retrying failed attempts per the retry policy.

        Returns:
            The first response with a status below 400

        Raises:
            ServiceError: When the last attempt failed and no retry is allowed
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        headers = {**self.headers, **(kwargs.pop("headers", None) or {})}
        max_retries = self.retryer.max_retries
        attempt = 0

        while True:
            cause: Exception | None = None
            try:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.request(method, url, headers=headers, **kwargs)
            except httpx.ConnectError as e:
                cause = e
                error: ServiceError = ConnectionError(
                    f"Failed to connect to {self.base_url}",
                    service=self.service_name,
                )
                outcome = AttemptOutcome.from_error(error, attempt)
            except httpx.TimeoutException as e:
                cause = e
                error = TimeoutError(
                    f"Request timed out after {self.timeout}s",
                    service=self.service_name,
                )
                outcome = AttemptOutcome.from_error(error, attempt)
            else:
                if response.status_code < 400:
                    return response
                error = error_for_status(
                    response.status_code,
                    response.text,
                    retry_after=response.headers.get(RETRY_AFTER_HEADER),
                    service=self.service_name,
                )
                outcome = AttemptOutcome.from_response(
                    response,
                    attempt,
                    error_retryable=error.retryable,
                    error_throttle=error.throttle,
                )

            if not self.retryer.should_retry(outcome):
                raise error from cause
            if attempt >= max_retries:
                logger.error(f"[{self.service_name}] All {max_retries} retries exhausted")
                raise error from cause

            delay = self.retryer.retry_delay(outcome, attempt)
            logger.warning(
                f"[{self.service_name}] {method} {url} failed ({error}), "
                f"retrying in {delay:.1f}s ({attempt + 1}/{max_retries})"
            )
            await asyncio.sleep(delay)
            attempt += 1

    async def get(self, path: str, **kwargs) -> httpx.Response:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs) -> httpx.Response:
        return await self.request("POST", path, **kwargs)
