r"""Fluent builder running asynchronous work units with automatic retry
logic."""

from __future__ import annotations

__all__ = ["AsyncRetryer"]

import functools
from typing import TYPE_CHECKING, Any

from aretry.block import BaseAsyncRetryBlock
from aretry.context import RetryContext
from aretry.core.config import DEFAULT_ASYNC_BLOCK, RetryConfig
from aretry.retry import AsyncRetryExecutor
from aretry.retryer import BaseRetryer, _check_type

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


class AsyncRetryer(BaseRetryer):
    """Runs asynchronous work units with automatic retry logic.

    Same configuration as ``Retryer``, but the block policy is a
    ``BaseAsyncRetryBlock`` (``AsyncSleepBlock`` by default) so waiting
    between attempts does not block other tasks of the event loop.

    Args:
        config: The initial configuration. Defaults to ``RetryConfig`` with
            an ``AsyncSleepBlock`` block policy.

    Raises:
        TypeError: If the block policy of ``config`` is synchronous.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import AsyncRetryer
        >>> from aretry.condition import ResultCondition
        >>> results = iter([None, None, 42])
        >>> async def poll():
        ...     return next(results)
        ...
        >>> retryer = AsyncRetryer().condition(ResultCondition(lambda r: r is None))
        >>> asyncio.run(retryer.retry(poll))
        42

        ```
    """

    def __init__(self, config: RetryConfig | None = None) -> None:
        super().__init__(config if config is not None else RetryConfig(block=DEFAULT_ASYNC_BLOCK))
        _check_type("block", self.config.block, BaseAsyncRetryBlock)

    def block(self, block: BaseAsyncRetryBlock) -> AsyncRetryer:
        """Set the block policy suspending the task between attempts."""
        _check_type("block", block, BaseAsyncRetryBlock)
        self.config = self.config.merge(block=block)
        return self

    async def retry(self, func: Callable[..., Awaitable[Any]], *args: Any, **kwargs: Any) -> Any:
        """Run an asynchronous work unit until it succeeds or the retry
        sequence ends.

        Args:
            func: The work unit, returning an awaitable.
            *args: Positional arguments passed to ``func`` on every attempt.
            **kwargs: Keyword arguments passed to ``func`` on every attempt.

        Returns:
            The result of the terminal attempt if it succeeded, otherwise the
            value returned by the recover policy.

        Raises:
            TypeError: If the configured block policy is synchronous.
            Exception: The failure of the terminal attempt when the recover
                policy re-raises it, or any exception raised by a policy.
        """
        if not isinstance(self.config.block, BaseAsyncRetryBlock):
            msg = f"AsyncRetryer requires a BaseAsyncRetryBlock, got {self.config.block!r}"
            raise TypeError(msg)
        work = functools.partial(func, *args, **kwargs) if args or kwargs else func
        return await AsyncRetryExecutor(RetryContext.from_config(work, self.config)).execute()
