"""Tests for exceptions module - behavior focused."""

import pytest
from api_retryer.exceptions import (
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
from api_retryer.retry import AttemptOutcome, should_retry


class TestRetryableFlag:
    """Test that exceptions have correct retry signals."""

    def test_throttling_error_is_retryable_throttle(self):
        error = ThrottlingError()
        assert error.retryable is True
        assert error.throttle is True

    def test_connection_error_overrides_retry(self):
        """Connection errors carry an explicit retry override."""
        error = ConnectionError()
        assert error.retry_override is True

    def test_timeout_error_overrides_retry(self):
        error = TimeoutError()
        assert error.retry_override is True

    def test_server_error_is_retryable(self):
        assert ServerError().retryable is True

    def test_auth_error_not_retryable(self):
        assert AuthenticationError().retryable is False

    def test_not_found_not_retryable(self):
        assert NotFoundError().retryable is False

    def test_invalid_request_not_retryable_by_flag(self):
        """The flag is False; the 400 policy rule is what retries it."""
        assert InvalidRequestError().retryable is False

    def test_base_error_defaults(self):
        error = ServiceError("boom")
        assert error.retryable is False
        assert error.throttle is False
        assert error.retry_override is None


class TestExceptionHierarchy:
    """Test that all exceptions inherit from ServiceError."""

    @pytest.mark.parametrize(
        "exc_class",
        [
            ThrottlingError,
            ConnectionError,
            TimeoutError,
            AuthenticationError,
            NotFoundError,
            InvalidRequestError,
            ServerError,
        ],
    )
    def test_inherits_from_base(self, exc_class):
        assert isinstance(exc_class(), ServiceError)

    def test_catchable_as_base(self):
        with pytest.raises(ServiceError):
            raise ThrottlingError()


class TestErrorFormatting:
    """Test error message formatting."""

    def test_includes_service_and_status(self):
        error = ServerError("Internal error", service="billing", status_code=503)
        text = str(error)

        assert "[billing]" in text
        assert "Internal error" in text
        assert "503" in text

    def test_plain_message(self):
        assert str(ServiceError("Something went wrong")) == "Something went wrong"


class TestErrorForStatus:
    """Test status code to exception mapping."""

    @pytest.mark.parametrize(
        "status,exc_class",
        [
            (400, InvalidRequestError),
            (401, AuthenticationError),
            (403, AuthenticationError),
            (404, NotFoundError),
            (429, ThrottlingError),
            (500, ServerError),
            (503, ServerError),
            (418, ServiceError),
        ],
    )
    def test_maps_status(self, status, exc_class):
        error = error_for_status(status)
        assert type(error) is exc_class
        assert error.status_code == status

    def test_keeps_retry_after(self):
        error = error_for_status(429, retry_after="15")
        assert error.retry_after == "15"


class TestOutcomeFromError:
    """Test building attempt outcomes from exceptions."""

    def test_copies_signals(self):
        error = ThrottlingError(status_code=429, retry_after="5")
        outcome = AttemptOutcome.from_error(error, 3)

        assert outcome.status_code == 429
        assert outcome.error_retryable is True
        assert outcome.error_throttle is True
        assert outcome.retry_after == "5"
        assert outcome.attempt == 3

    def test_connection_error_is_retried(self):
        outcome = AttemptOutcome.from_error(ConnectionError())
        assert outcome.status_code is None
        assert should_retry(outcome) is True

    def test_auth_error_is_not_retried(self):
        outcome = AttemptOutcome.from_error(AuthenticationError(status_code=401))
        assert should_retry(outcome) is False
