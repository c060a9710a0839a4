r"""aretry - Configurable retry executor with pluggable policies.

This package re-invokes a unit of work according to independent,
composable policies:

    - Condition: whether an outcome warrants another attempt
    - Wait: how long to wait before the next attempt
    - Stop: when to stop retrying, regardless of the condition
    - Block: how to pause between attempts (thread sleep or asyncio)
    - Listener: how to observe every attempt
    - Recover: what to return when the sequence ends on a failure

Retrying is opt-in: with the default configuration the work unit is
invoked once and any exception propagates unchanged.

Example:
    ```pycon
    >>> from aretry import Retryer
    >>> from aretry.block import NoBlock
    >>> from aretry.condition import ExceptionCondition
    >>> from aretry.recover import ValueRecover
    >>> from aretry.wait import FixedWait
    >>> def always_fails():
    ...     raise ConnectionError("refused")
    ...
    >>> retryer = (
    ...     Retryer()
    ...     .condition(ExceptionCondition(ConnectionError))
    ...     .waits(FixedWait(0.5))
    ...     .max_attempt(3)
    ...     .recover(ValueRecover("fallback"))
    ...     .block(NoBlock())
    ... )
    >>> retryer.retry(always_fails)
    'fallback'

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryer",
    "RetryAttempt",
    "RetryConfig",
    "RetryContext",
    "RetryError",
    "Retryer",
    "__version__",
    "retryable",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.attempt import RetryAttempt
from aretry.context import RetryContext
from aretry.core.config import RetryConfig
from aretry.decorator import retryable
from aretry.exceptions import RetryError
from aretry.retryer import Retryer
from aretry.retryer_async import AsyncRetryer

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
