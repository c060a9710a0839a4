r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that runs the retry
loop in a coroutine, suspending the task between attempts.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import inspect
from typing import TYPE_CHECKING, Any

from aretry.retry.decider import RetryDecider
from aretry.retry.executor_core import finish

if TYPE_CHECKING:
    from aretry.attempt import RetryAttempt
    from aretry.context import RetryContext


class AsyncRetryExecutor:
    """Executes an asynchronous work unit with automatic retry logic.

    The loop is the same as ``RetryExecutor``; the work unit is awaited
    and the block policy must be a ``BaseAsyncRetryBlock`` so the wait
    between attempts suspends the task instead of blocking the event
    loop. Policies other than the block policy are called synchronously.

    Cancelling the task (``asyncio.CancelledError``) while the work unit
    runs or while waiting aborts the retry sequence immediately: the
    cancellation is not recorded as a failed attempt.

    Args:
        context: The context of the retry sequence. ``context.func`` must
            return an awaitable.

    Attributes:
        context: The context of the retry sequence.
        decider: Logic for deciding whether to retry.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.block import AsyncNoBlock
        >>> from aretry.context import RetryContext
        >>> from aretry.core import RetryConfig
        >>> from aretry.retry import AsyncRetryExecutor
        >>> async def fetch():
        ...     return "data"
        ...
        >>> config = RetryConfig(block=AsyncNoBlock())
        >>> asyncio.run(AsyncRetryExecutor(RetryContext.from_config(fetch, config)).execute())
        'data'

        ```
    """

    def __init__(self, context: RetryContext) -> None:
        self.context = context
        self.decider: RetryDecider = RetryDecider(context.stop, context.condition)

    async def execute(self) -> Any:
        """Run the retry loop until the decider ends it.

        Returns:
            The result of the terminal attempt if it succeeded, otherwise the
            value returned by the recover policy.

        Raises:
            TypeError: If the work unit does not return an awaitable.
            Exception: The failure of the terminal attempt when the recover
                policy re-raises it (default), or any exception raised by a
                policy.
        """
        context = self.context
        context.start()
        while True:
            attempt = await self._invoke()
            context.listener.listen(attempt)
            if not self.decider.should_retry(attempt):
                return finish(context, attempt)
            await context.block.block(context.wait_time(attempt))

    async def _invoke(self) -> RetryAttempt:
        try:
            awaitable = self.context.func()
        except Exception as exc:  # noqa: BLE001
            return self.context.record(error=exc)
        if not inspect.isawaitable(awaitable):
            msg = f"work unit must return an awaitable, got {awaitable!r}"
            raise TypeError(msg)
        try:
            result = await awaitable
        except Exception as exc:  # noqa: BLE001
            return self.context.record(error=exc)
        return self.context.record(result=result)
