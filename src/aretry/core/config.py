r"""Default policies and the immutable retry configuration.

This module provides the default policy instances shared by every retry
sequence and the ``RetryConfig`` dataclass that the builders produce.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_ASYNC_BLOCK",
    "DEFAULT_BLOCK",
    "DEFAULT_CONDITION",
    "DEFAULT_LISTENER",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_RECOVER",
    "DEFAULT_STOP",
    "DEFAULT_WAIT",
    "RetryConfig",
]

import time
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from aretry.block import AsyncSleepBlock, BaseAsyncRetryBlock, BaseRetryBlock, SleepBlock
from aretry.condition import AlwaysFalseCondition, BaseRetryCondition
from aretry.listener import BaseRetryListener, NoListener
from aretry.recover import BaseRecover, NoRecover
from aretry.stop import BaseRetryStop, MaxAttemptStop
from aretry.wait import BaseRetryWait, NoWait

if TYPE_CHECKING:
    from collections.abc import Callable

# Default maximum number of attempts, including the first one
DEFAULT_MAX_ATTEMPTS = 3

# Policies are stateless, so a single instance of each default is shared
# by every retry sequence
DEFAULT_CONDITION = AlwaysFalseCondition()
DEFAULT_WAIT = NoWait()
DEFAULT_STOP = MaxAttemptStop(DEFAULT_MAX_ATTEMPTS)
DEFAULT_BLOCK = SleepBlock()
DEFAULT_ASYNC_BLOCK = AsyncSleepBlock()
DEFAULT_LISTENER = NoListener()
DEFAULT_RECOVER = NoRecover()

_POLICY_TYPES: dict[str, type | tuple[type, ...]] = {
    "condition": BaseRetryCondition,
    "wait": BaseRetryWait,
    "stop": BaseRetryStop,
    "block": (BaseRetryBlock, BaseAsyncRetryBlock),
    "listener": BaseRetryListener,
    "recover": BaseRecover,
}


@dataclass(frozen=True)
class RetryConfig:
    """Immutable set of policies used by a retry sequence.

    With the defaults, the work unit is invoked exactly once and any
    exception it raises propagates unchanged, since the default condition
    never retries.

    Args:
        condition: Decides whether an attempt warrants another attempt.
        wait: Computes the delay before the next attempt.
        stop: Decides when the retry sequence must end.
        block: Pauses execution between two attempts.
        listener: Observes every attempt.
        recover: Produces a fallback when the sequence ends on a failure.
        clock: Monotonic clock returning seconds, used for elapsed times.

    Raises:
        TypeError: If a policy is not an instance of the matching base class.

    Example:
        ```pycon
        >>> from aretry.core import RetryConfig
        >>> from aretry.stop import MaxAttemptStop
        >>> config = RetryConfig()
        >>> config.stop
        MaxAttemptStop(max_attempt=3)
        >>> merged = config.merge(stop=MaxAttemptStop(5))
        >>> merged.stop
        MaxAttemptStop(max_attempt=5)
        >>> config.stop  # Original unchanged
        MaxAttemptStop(max_attempt=3)

        ```
    """

    condition: BaseRetryCondition = DEFAULT_CONDITION
    wait: BaseRetryWait = DEFAULT_WAIT
    stop: BaseRetryStop = DEFAULT_STOP
    block: BaseRetryBlock | BaseAsyncRetryBlock = DEFAULT_BLOCK
    listener: BaseRetryListener = DEFAULT_LISTENER
    recover: BaseRecover = DEFAULT_RECOVER
    clock: Callable[[], float] = time.monotonic

    def __post_init__(self) -> None:
        for name, expected in _POLICY_TYPES.items():
            value = getattr(self, name)
            if not isinstance(value, expected):
                msg = f"{name} must be an instance of {_type_names(expected)}, got {value!r}"
                raise TypeError(msg)
        if not callable(self.clock):
            msg = f"clock must be callable, got {self.clock!r}"
            raise TypeError(msg)

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with specified policies overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for the fields to override.

        Returns:
            A new RetryConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)


def _type_names(expected: type | tuple[type, ...]) -> str:
    if isinstance(expected, tuple):
        return " or ".join(cls.__name__ for cls in expected)
    return expected.__name__
