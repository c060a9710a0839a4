r"""Unit tests for the built-in recover policies."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from aretry import RetryAttempt, RetryError
from aretry.recover import CallableRecover, NoRecover, RaiseRetryErrorRecover, ValueRecover

FAILURE = RetryAttempt(attempt=3, error=TimeoutError("timed out"))


def test_no_recover_reraises_original_error() -> None:
    """Test that NoRecover re-raises the exact terminal exception."""
    with pytest.raises(TimeoutError, match=r"timed out") as exc_info:
        NoRecover().recover(FAILURE)
    assert exc_info.value is FAILURE.error


@pytest.mark.parametrize("value", [None, 0, "fallback", {"status": "degraded"}])
def test_value_recover(value: object) -> None:
    assert ValueRecover(value).recover(FAILURE) == value


def test_callable_recover() -> None:
    """Test that CallableRecover returns the value computed from the attempt."""
    func = Mock(return_value="recovered")
    assert CallableRecover(func).recover(FAILURE) == "recovered"
    func.assert_called_once_with(FAILURE)


def test_callable_recover_can_raise() -> None:
    def recover(attempt: RetryAttempt) -> None:
        msg = f"gave up after {attempt.attempt}"
        raise LookupError(msg)

    with pytest.raises(LookupError, match=r"gave up after 3"):
        CallableRecover(recover).recover(FAILURE)


def test_raise_retry_error_recover() -> None:
    """Test that RaiseRetryErrorRecover raises a chained RetryError."""
    with pytest.raises(RetryError, match=r"Retry failed after 3 attempts: TimeoutError") as exc_info:
        RaiseRetryErrorRecover().recover(FAILURE)
    error = exc_info.value
    assert error.attempt is FAILURE
    assert error.cause is FAILURE.error
    assert error.__cause__ is FAILURE.error
