r"""Decorator adding automatic retry logic to a function.

This module provides the ``retryable`` decorator, which works on both
regular functions and coroutine functions.
"""

from __future__ import annotations

__all__ = ["retryable"]

import functools
import inspect
from typing import TYPE_CHECKING, Any

from aretry.retryer import Retryer
from aretry.retryer_async import AsyncRetryer

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from aretry.block import BaseAsyncRetryBlock, BaseRetryBlock
    from aretry.condition import BaseRetryCondition
    from aretry.listener import BaseRetryListener
    from aretry.recover import BaseRecover
    from aretry.retryer import BaseRetryer
    from aretry.stop import BaseRetryStop
    from aretry.wait import BaseRetryWait


def retryable(
    *,
    condition: BaseRetryCondition | Callable[..., bool] | None = None,
    waits: BaseRetryWait | Sequence[BaseRetryWait] | None = None,
    max_attempt: int | None = None,
    stop: BaseRetryStop | None = None,
    listener: BaseRetryListener | Callable[..., None] | None = None,
    recover: BaseRecover | Callable[..., Any] | None = None,
    block: BaseRetryBlock | BaseAsyncRetryBlock | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Wrap a function so every call runs as a retry sequence.

    The retryer is configured once, when the function is decorated, so
    configuration errors surface at import time. Coroutine functions get
    an ``AsyncRetryer``, other functions a ``Retryer``. Unset options keep
    their default.

    Args:
        condition: The retry condition.
        waits: A wait policy, or a sequence of wait policies to sum.
        max_attempt: Maximum number of attempts. Ignored if ``stop`` is set.
        stop: A custom stop policy.
        listener: The listener.
        recover: The recover policy.
        block: The block policy, asynchronous for coroutine functions.

    Returns:
        The decorator.

    Example:
        ```pycon
        >>> from aretry import retryable
        >>> from aretry.block import NoBlock
        >>> from aretry.condition import ExceptionCondition
        >>> calls = []
        >>> @retryable(condition=ExceptionCondition(KeyError), max_attempt=4, block=NoBlock())
        ... def lookup(key):
        ...     calls.append(key)
        ...     if len(calls) < 2:
        ...         raise KeyError(key)
        ...     return key.upper()
        ...
        >>> lookup("a")
        'A'
        >>> calls
        ['a', 'a']

        ```
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):
            retryer = _configure(AsyncRetryer())

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await retryer.retry(func, *args, **kwargs)

            async_wrapper.retryer = retryer
            return async_wrapper

        retryer = _configure(Retryer())

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return retryer.retry(func, *args, **kwargs)

        wrapper.retryer = retryer
        return wrapper

    def _configure(retryer: BaseRetryer) -> Any:
        if condition is not None:
            retryer.condition(condition)
        if isinstance(waits, (list, tuple)):
            retryer.waits(*waits)
        elif waits is not None:
            retryer.waits(waits)
        if stop is not None:
            retryer.stop(stop)
        elif max_attempt is not None:
            retryer.max_attempt(max_attempt)
        if listener is not None:
            retryer.listen(listener)
        if recover is not None:
            retryer.recover(recover)
        if block is not None:
            retryer.block(block)
        return retryer

    return decorator
