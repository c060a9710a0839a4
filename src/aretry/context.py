r"""Mutable state threaded through the policies of one retry sequence.

This module provides the RetryContext class. A context is created for
each call to ``retry`` and owned by the executor running that call, so
it is never shared between concurrent retry sequences.
"""

from __future__ import annotations

__all__ = ["RetryContext"]

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from aretry.attempt import RetryAttempt

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.block import BaseAsyncRetryBlock, BaseRetryBlock
    from aretry.condition import BaseRetryCondition
    from aretry.core.config import RetryConfig
    from aretry.listener import BaseRetryListener
    from aretry.recover import BaseRecover
    from aretry.stop import BaseRetryStop
    from aretry.wait import BaseRetryWait


@dataclass
class RetryContext:
    """State of one retry sequence.

    Attributes:
        func: The work unit, a zero-argument callable.
        condition: Decides whether an attempt warrants another attempt.
        wait: Computes the delay before the next attempt.
        stop: Decides when the retry sequence must end.
        block: Pauses execution between two attempts.
        listener: Observes every attempt.
        recover: Produces a fallback when the sequence ends on a failure.
        clock: Monotonic clock returning seconds.
        attempt_count: Number of attempts made so far.
        start_time: Clock value when the first attempt started, or None
            before the sequence starts.
        history: All the attempts made so far, oldest first.
    """

    func: Callable[[], Any]
    condition: BaseRetryCondition
    wait: BaseRetryWait
    stop: BaseRetryStop
    block: BaseRetryBlock | BaseAsyncRetryBlock
    listener: BaseRetryListener
    recover: BaseRecover
    clock: Callable[[], float] = time.monotonic
    attempt_count: int = 0
    start_time: float | None = None
    history: list[RetryAttempt] = field(default_factory=list)

    @classmethod
    def from_config(cls, func: Callable[[], Any], config: RetryConfig) -> RetryContext:
        """Create a fresh context for a work unit from a configuration.

        Args:
            func: The work unit.
            config: The policies to use.

        Returns:
            A context with no attempt recorded yet.
        """
        return cls(
            func=func,
            condition=config.condition,
            wait=config.wait,
            stop=config.stop,
            block=config.block,
            listener=config.listener,
            recover=config.recover,
            clock=config.clock,
        )

    @property
    def last_attempt(self) -> RetryAttempt | None:
        """The most recent attempt, or None before the first one."""
        return self.history[-1] if self.history else None

    def start(self) -> None:
        """Mark the start of the first attempt."""
        self.start_time = self.clock()

    def elapsed_time(self) -> float:
        """Return the seconds elapsed since the first attempt started."""
        if self.start_time is None:
            return 0.0
        return self.clock() - self.start_time

    def record(self, result: Any = None, error: Exception | None = None) -> RetryAttempt:
        """Record the outcome of the attempt that just finished.

        Args:
            result: The value returned by the work unit.
            error: The exception raised by the work unit, if any.

        Returns:
            The new attempt, also appended to ``history``.
        """
        if self.start_time is None:
            self.start()
        self.attempt_count += 1
        attempt = RetryAttempt(
            attempt=self.attempt_count,
            result=result,
            error=error,
            elapsed_time=self.elapsed_time(),
            previous=self.last_attempt,
        )
        self.history.append(attempt)
        return attempt

    def wait_time(self, attempt: RetryAttempt) -> float:
        """Compute the delay before the attempt following ``attempt``.

        Args:
            attempt: The attempt that was just made.

        Returns:
            The delay in seconds.

        Raises:
            ValueError: If the wait policy returns a negative delay.
        """
        wait_time = self.wait.wait_time(attempt)
        if wait_time < 0:
            msg = f"wait time must be non-negative, got {wait_time} from {self.wait!r}"
            raise ValueError(msg)
        return wait_time
