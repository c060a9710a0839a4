r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs the retry loop
on the caller's thread, blocking between attempts.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

from typing import TYPE_CHECKING, Any

from aretry.retry.decider import RetryDecider
from aretry.retry.executor_core import finish

if TYPE_CHECKING:
    from aretry.attempt import RetryAttempt
    from aretry.context import RetryContext


class RetryExecutor:
    """Executes a work unit with automatic retry logic.

    Each iteration of the loop:
    1. invokes the work unit and records its outcome as a new attempt
    2. notifies the listener
    3. asks the decider (stop policy first, then retry condition) whether
       to continue
    4. if so, computes the wait time and blocks before the next attempt

    When the loop ends, a successful terminal attempt returns its result
    and a failed one goes through the recover policy. Exceptions raised
    by the policies themselves are not caught.

    Args:
        context: The context of the retry sequence. It must not be shared
            with another executor.

    Attributes:
        context: The context of the retry sequence.
        decider: Logic for deciding whether to retry.

    Example:
        ```pycon
        >>> from aretry.block import NoBlock
        >>> from aretry.condition import ExceptionCondition
        >>> from aretry.context import RetryContext
        >>> from aretry.core import RetryConfig
        >>> from aretry.retry import RetryExecutor
        >>> calls = []
        >>> def flaky():
        ...     calls.append(1)
        ...     if len(calls) < 2:
        ...         raise ConnectionError("refused")
        ...     return "ok"
        ...
        >>> config = RetryConfig(condition=ExceptionCondition(), block=NoBlock())
        >>> RetryExecutor(RetryContext.from_config(flaky, config)).execute()
        'ok'
        >>> len(calls)
        2

        ```
    """

    def __init__(self, context: RetryContext) -> None:
        self.context = context
        self.decider: RetryDecider = RetryDecider(context.stop, context.condition)

    def execute(self) -> Any:
        """Run the retry loop until the decider ends it.

        Returns:
            The result of the terminal attempt if it succeeded, otherwise the
            value returned by the recover policy.

        Raises:
            Exception: The failure of the terminal attempt when the recover
                policy re-raises it (default), or any exception raised by a
                policy.
        """
        context = self.context
        context.start()
        while True:
            attempt = self._invoke()
            context.listener.listen(attempt)
            if not self.decider.should_retry(attempt):
                return finish(context, attempt)
            context.block.block(context.wait_time(attempt))

    def _invoke(self) -> RetryAttempt:
        try:
            result = self.context.func()
        except Exception as exc:  # noqa: BLE001
            return self.context.record(error=exc)
        return self.context.record(result=result)
