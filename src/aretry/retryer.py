r"""Fluent builder running a work unit with automatic retry logic.

This module provides the ``Retryer`` entry point for synchronous work
units, and the ``BaseRetryer`` class holding the configuration methods
shared with ``AsyncRetryer``.
"""

from __future__ import annotations

__all__ = ["BaseRetryer", "Retryer"]

import functools
from typing import TYPE_CHECKING, Any

from aretry.block import BaseRetryBlock
from aretry.condition import AnyCondition, BaseRetryCondition, PredicateCondition
from aretry.context import RetryContext
from aretry.core.config import RetryConfig
from aretry.listener import BaseRetryListener, CallbackListener, CompositeListener
from aretry.recover import BaseRecover, CallableRecover
from aretry.retry import RetryExecutor
from aretry.stop import BaseRetryStop, MaxAttemptStop
from aretry.wait import BaseRetryWait, SumWait

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.attempt import RetryAttempt


class BaseRetryer:
    """Configuration methods shared by ``Retryer`` and ``AsyncRetryer``.

    Every configuration method validates its argument immediately,
    replaces the current ``RetryConfig`` with an updated copy, and returns
    the retryer so calls can be chained.

    Note:
        A retryer is not safe for concurrent use while it is being
        configured. Once configured, ``retry`` may be called concurrently:
        each call builds its own context from the immutable ``config``.

    Args:
        config: The initial configuration. Defaults to ``RetryConfig()``.
    """

    def __init__(self, config: RetryConfig | None = None) -> None:
        self.config: RetryConfig = config if config is not None else RetryConfig()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(config={self.config!r})"

    def condition(
        self, *conditions: BaseRetryCondition | Callable[[RetryAttempt], bool]
    ) -> BaseRetryer:
        """Set the retry condition.

        Args:
            *conditions: One or more conditions. Plain callables are wrapped
                in a ``PredicateCondition``. Several conditions are combined
                with ``AnyCondition``: any one satisfied means retry.

        Returns:
            This retryer.
        """
        resolved = [_as_condition(condition) for condition in conditions]
        if not resolved:
            msg = "condition requires at least one condition"
            raise ValueError(msg)
        combined = resolved[0] if len(resolved) == 1 else AnyCondition(*resolved)
        self.config = self.config.merge(condition=combined)
        return self

    def waits(self, *waits: BaseRetryWait) -> BaseRetryer:
        """Set the wait policy.

        Args:
            *waits: Zero or more wait policies. Their delays are summed;
                with none, the delay is zero.

        Returns:
            This retryer.
        """
        for wait in waits:
            _check_type("wait", wait, BaseRetryWait)
        combined = waits[0] if len(waits) == 1 else SumWait(*waits)
        self.config = self.config.merge(wait=combined)
        return self

    def max_attempt(self, max_attempt: int) -> BaseRetryer:
        """Set the maximum number of attempts, including the first one.

        This replaces the stop policy with a ``MaxAttemptStop``.

        Args:
            max_attempt: Maximum number of attempts. Must be >= 1.

        Returns:
            This retryer.

        Raises:
            ValueError: If max_attempt is lower than 1.
        """
        self.config = self.config.merge(stop=MaxAttemptStop(max_attempt))
        return self

    def stop(self, stop: BaseRetryStop) -> BaseRetryer:
        """Set a custom stop policy."""
        _check_type("stop", stop, BaseRetryStop)
        self.config = self.config.merge(stop=stop)
        return self

    def listen(
        self, *listeners: BaseRetryListener | Callable[[RetryAttempt], None]
    ) -> BaseRetryer:
        """Set the listener.

        Args:
            *listeners: One or more listeners. Plain callables are wrapped in
                a ``CallbackListener``. Several listeners are notified in
                order.

        Returns:
            This retryer.
        """
        resolved = [_as_listener(listener) for listener in listeners]
        if not resolved:
            msg = "listen requires at least one listener"
            raise ValueError(msg)
        combined = resolved[0] if len(resolved) == 1 else CompositeListener(*resolved)
        self.config = self.config.merge(listener=combined)
        return self

    def recover(self, recover: BaseRecover | Callable[[RetryAttempt], Any]) -> BaseRetryer:
        """Set the recover policy.

        Args:
            recover: A recover policy, or a callable receiving the terminal
                attempt, wrapped in a ``CallableRecover``.

        Returns:
            This retryer.
        """
        if not isinstance(recover, BaseRecover):
            if not callable(recover):
                msg = f"recover must be a BaseRecover or a callable, got {recover!r}"
                raise TypeError(msg)
            recover = CallableRecover(recover)
        self.config = self.config.merge(recover=recover)
        return self

    def clock(self, clock: Callable[[], float]) -> BaseRetryer:
        """Set the monotonic clock used to measure elapsed times."""
        if not callable(clock):
            msg = f"clock must be callable, got {clock!r}"
            raise TypeError(msg)
        self.config = self.config.merge(clock=clock)
        return self


class Retryer(BaseRetryer):
    """Runs synchronous work units with automatic retry logic.

    With the default configuration the work unit is invoked once and any
    exception propagates unchanged. Retrying is enabled by setting a
    retry condition.

    Args:
        config: The initial configuration. Defaults to ``RetryConfig()``.

    Raises:
        TypeError: If the block policy of ``config`` is asynchronous.

    Example:
        ```pycon
        >>> from aretry import Retryer
        >>> from aretry.block import NoBlock
        >>> from aretry.condition import ExceptionCondition
        >>> from aretry.wait import ExponentialWait
        >>> calls = []
        >>> def flaky():
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise ConnectionError("refused")
        ...     return "ok"
        ...
        >>> retryer = (
        ...     Retryer()
        ...     .condition(ExceptionCondition(ConnectionError))
        ...     .waits(ExponentialWait(base_delay=0.1))
        ...     .max_attempt(5)
        ...     .block(NoBlock())
        ... )
        >>> retryer.retry(flaky)
        'ok'
        >>> len(calls)
        3

        ```
    """

    def __init__(self, config: RetryConfig | None = None) -> None:
        super().__init__(config)
        _check_type("block", self.config.block, BaseRetryBlock)

    def block(self, block: BaseRetryBlock) -> Retryer:
        """Set the block policy pausing the thread between attempts."""
        _check_type("block", block, BaseRetryBlock)
        self.config = self.config.merge(block=block)
        return self

    def retry(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Run a work unit until it succeeds or the retry sequence ends.

        Args:
            func: The work unit.
            *args: Positional arguments passed to ``func`` on every attempt.
            **kwargs: Keyword arguments passed to ``func`` on every attempt.

        Returns:
            The result of the terminal attempt if it succeeded, otherwise the
            value returned by the recover policy.

        Raises:
            TypeError: If the configured block policy is asynchronous.
            Exception: The failure of the terminal attempt when the recover
                policy re-raises it, or any exception raised by a policy.
        """
        if not isinstance(self.config.block, BaseRetryBlock):
            msg = f"Retryer requires a BaseRetryBlock, got {self.config.block!r}"
            raise TypeError(msg)
        work = functools.partial(func, *args, **kwargs) if args or kwargs else func
        return RetryExecutor(RetryContext.from_config(work, self.config)).execute()


def _check_type(name: str, value: Any, expected: type) -> None:
    if not isinstance(value, expected):
        msg = f"{name} must be an instance of {expected.__name__}, got {value!r}"
        raise TypeError(msg)


def _as_condition(condition: Any) -> BaseRetryCondition:
    if isinstance(condition, BaseRetryCondition):
        return condition
    if callable(condition):
        return PredicateCondition(condition)
    msg = f"condition must be a BaseRetryCondition or a callable, got {condition!r}"
    raise TypeError(msg)


def _as_listener(listener: Any) -> BaseRetryListener:
    if isinstance(listener, BaseRetryListener):
        return listener
    if callable(listener):
        return CallbackListener(listener)
    msg = f"listener must be a BaseRetryListener or a callable, got {listener!r}"
    raise TypeError(msg)
