r"""Unit tests for RetryExecutor."""

from __future__ import annotations

from unittest.mock import Mock, call

import pytest

from aretry import RetryAttempt, RetryConfig, RetryContext
from aretry.condition import AlwaysTrueCondition, BaseRetryCondition, ExceptionCondition
from aretry.listener import BaseRetryListener
from aretry.recover import BaseRecover, ValueRecover
from aretry.retry import RetryExecutor
from aretry.stop import MaxAttemptStop
from aretry.wait import BaseRetryWait, FixedWait
from tests.helpers import ScriptedWork, always_fails


def _executor(func: ScriptedWork, **policies: object) -> RetryExecutor:
    return RetryExecutor(RetryContext.from_config(func, RetryConfig(**policies)))


def test_executor_success_first_attempt(mock_block: Mock) -> None:
    """Test that a successful first attempt returns immediately."""
    work = ScriptedWork("ok")
    assert _executor(work, condition=ExceptionCondition(), block=mock_block).execute() == "ok"
    assert work.call_count == 1
    mock_block.block.assert_not_called()


def test_executor_retries_until_success(mock_block: Mock) -> None:
    """Test that failures are retried until an attempt succeeds."""
    work = ScriptedWork(ValueError("a"), ValueError("b"), "ok")
    executor = _executor(
        work,
        condition=ExceptionCondition(),
        stop=MaxAttemptStop(5),
        wait=FixedWait(0.5),
        block=mock_block,
    )
    assert executor.execute() == "ok"
    assert work.call_count == 3
    assert mock_block.block.call_args_list == [call(0.5), call(0.5)]
    assert executor.context.attempt_count == 3


def test_executor_exhausts_attempts(mock_block: Mock) -> None:
    """Test that the last failure is re-raised once attempts are exhausted."""
    error = ConnectionError("refused")
    work = always_fails(error)
    with pytest.raises(ConnectionError, match=r"refused") as exc_info:
        _executor(work, condition=ExceptionCondition(), block=mock_block).execute()
    assert exc_info.value is error
    assert work.call_count == 3
    assert mock_block.block.call_count == 2


def test_executor_non_retryable_error(mock_block: Mock) -> None:
    """Test that an error rejected by the condition is not retried."""
    work = always_fails(KeyError("missing"))
    with pytest.raises(KeyError, match=r"missing"):
        _executor(work, condition=ExceptionCondition(ValueError), block=mock_block).execute()
    assert work.call_count == 1


def test_executor_retries_on_result(mock_block: Mock) -> None:
    """Test that a success matching the condition is retried and the last
    result is returned without going through the recover policy."""
    work = ScriptedWork(None)
    recover = Mock(spec=BaseRecover)
    result = _executor(
        work, condition=AlwaysTrueCondition(), recover=recover, block=mock_block
    ).execute()
    assert result is None
    assert work.call_count == 3
    recover.recover.assert_not_called()


def test_executor_recover_value(mock_block: Mock) -> None:
    work = always_fails()
    result = _executor(
        work, condition=ExceptionCondition(), recover=ValueRecover("fallback"), block=mock_block
    ).execute()
    assert result == "fallback"


def test_executor_event_order(mock_block: Mock) -> None:
    """Test the order of listener, condition, wait, block and recover
    calls."""
    manager = Mock()
    listener = Mock(spec=BaseRetryListener)
    condition = Mock(spec=BaseRetryCondition)
    condition.condition.return_value = True
    wait = Mock(spec=BaseRetryWait)
    wait.wait_time.return_value = 2.0
    recover = Mock(spec=BaseRecover)
    recover.recover.return_value = "recovered"
    for name, mock in [
        ("listener", listener),
        ("condition", condition),
        ("wait", wait),
        ("block", mock_block),
        ("recover", recover),
    ]:
        manager.attach_mock(mock, name)

    result = _executor(
        always_fails(),
        condition=condition,
        wait=wait,
        stop=MaxAttemptStop(2),
        block=mock_block,
        listener=listener,
        recover=recover,
    ).execute()

    assert result == "recovered"
    assert [name for name, _, _ in manager.mock_calls] == [
        "listener.listen",
        "condition.condition",
        "wait.wait_time",
        "block.block",
        "listener.listen",
        "recover.recover",
    ]


def test_executor_attempts_passed_to_listener(mock_block: Mock) -> None:
    """Test that the listener receives every attempt with its history."""
    attempts: list[RetryAttempt] = []
    listener = Mock(spec=BaseRetryListener)
    listener.listen.side_effect = attempts.append
    clock = Mock(side_effect=[10.0, 11.0, 13.5])
    _executor(
        ScriptedWork(ValueError("a"), "ok"),
        condition=ExceptionCondition(),
        block=mock_block,
        listener=listener,
        clock=clock,
    ).execute()

    assert [attempt.attempt for attempt in attempts] == [1, 2]
    assert attempts[0].failed
    assert attempts[0].elapsed_time == 1.0
    assert attempts[1].result == "ok"
    assert attempts[1].elapsed_time == 3.5
    assert attempts[1].history == (attempts[0],)


def test_executor_negative_wait_time(mock_block: Mock) -> None:
    """Test that a negative wait time is rejected before blocking."""
    wait = Mock(spec=BaseRetryWait)
    wait.wait_time.return_value = -1.0
    with pytest.raises(ValueError, match=r"wait time must be non-negative, got -1.0"):
        _executor(
            always_fails(), condition=ExceptionCondition(), wait=wait, block=mock_block
        ).execute()
    mock_block.block.assert_not_called()


def test_executor_policy_error_propagates(mock_block: Mock) -> None:
    """Test that an exception raised by a policy aborts the sequence."""
    condition = Mock(spec=BaseRetryCondition)
    condition.condition.side_effect = RuntimeError("bad condition")
    work = always_fails()
    with pytest.raises(RuntimeError, match=r"bad condition"):
        _executor(work, condition=condition, block=mock_block).execute()
    assert work.call_count == 1


def test_executor_base_exception_not_captured(mock_block: Mock) -> None:
    """Test that exceptions outside ``Exception`` are not treated as
    failed attempts."""
    listener = Mock(spec=BaseRetryListener)
    work = ScriptedWork(KeyboardInterrupt())
    with pytest.raises(KeyboardInterrupt):
        _executor(
            work, condition=AlwaysTrueCondition(), listener=listener, block=mock_block
        ).execute()
    assert work.call_count == 1
    listener.listen.assert_not_called()
