r"""Unit tests for RetryDecider."""

from __future__ import annotations

from unittest.mock import Mock

from aretry import RetryAttempt
from aretry.condition import AlwaysFalseCondition, AlwaysTrueCondition, BaseRetryCondition
from aretry.retry import RetryDecider
from aretry.stop import MaxAttemptStop, NeverStop

ATTEMPT = RetryAttempt(attempt=2, error=ValueError())


def test_should_retry_when_condition_true() -> None:
    assert RetryDecider(NeverStop(), AlwaysTrueCondition()).should_retry(ATTEMPT)


def test_should_not_retry_when_condition_false() -> None:
    assert not RetryDecider(NeverStop(), AlwaysFalseCondition()).should_retry(ATTEMPT)


def test_stop_takes_precedence() -> None:
    """Test that the condition is not consulted once the stop policy fires."""
    condition = Mock(spec=BaseRetryCondition)
    condition.condition.return_value = True
    assert not RetryDecider(MaxAttemptStop(2), condition).should_retry(ATTEMPT)
    condition.condition.assert_not_called()


def test_condition_called_with_attempt() -> None:
    condition = Mock(spec=BaseRetryCondition)
    condition.condition.return_value = False
    RetryDecider(MaxAttemptStop(3), condition).should_retry(ATTEMPT)
    condition.condition.assert_called_once_with(ATTEMPT)
