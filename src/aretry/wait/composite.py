r"""Wait policies built on top of other wait policies.

This module provides the sum of several wait policies, a ceiling on a
wait policy, and random jitter added to a wait policy.
"""

from __future__ import annotations

__all__ = ["CappedWait", "JitterWait", "SumWait"]

import logging
import random
from typing import TYPE_CHECKING

from aretry.utils.validation import validate_non_negative, validate_positive
from aretry.wait.base import BaseRetryWait

if TYPE_CHECKING:
    from aretry.attempt import RetryAttempt

logger: logging.Logger = logging.getLogger(__name__)


class SumWait(BaseRetryWait):
    """Wait policy returning the sum of its children's delays.

    This is how several wait policies are combined: for example a fixed
    delay plus an exponential backoff.

    Args:
        *waits: The child wait policies. With no child the delay is zero.

    Example:
        ```pycon
        >>> from aretry import RetryAttempt
        >>> from aretry.wait import ExponentialWait, FixedWait, SumWait
        >>> wait = SumWait(FixedWait(1.0), ExponentialWait(base_delay=0.5))
        >>> wait.wait_time(RetryAttempt(attempt=1))
        1.5
        >>> wait.wait_time(RetryAttempt(attempt=3))
        3.0

        ```
    """

    def __init__(self, *waits: BaseRetryWait) -> None:
        self.waits = waits

    def wait_time(self, attempt: RetryAttempt) -> float:
        return sum((wait.wait_time(attempt) for wait in self.waits), 0.0)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}{self.waits!r}"


class CappedWait(BaseRetryWait):
    """Wait policy that caps the delay of another wait policy.

    Args:
        wait: The wrapped wait policy.
        max_wait: The maximum delay in seconds. Must be > 0.

    Example:
        ```pycon
        >>> from aretry import RetryAttempt
        >>> from aretry.wait import CappedWait, ExponentialWait
        >>> wait = CappedWait(ExponentialWait(base_delay=1.0), max_wait=5.0)
        >>> wait.wait_time(RetryAttempt(attempt=2))
        2.0
        >>> wait.wait_time(RetryAttempt(attempt=10))
        5.0

        ```
    """

    def __init__(self, wait: BaseRetryWait, max_wait: float) -> None:
        validate_positive("max_wait", max_wait)
        self.wait = wait
        self.max_wait = max_wait

    def wait_time(self, attempt: RetryAttempt) -> float:
        wait_time = self.wait.wait_time(attempt)
        if wait_time > self.max_wait:
            logger.debug(
                f"Capping wait time from {wait_time:.2f}s to {self.max_wait:.2f}s "
                f"(max_wait={self.max_wait:.2f}s)"
            )
            return self.max_wait
        return wait_time

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(wait={self.wait!r}, max_wait={self.max_wait})"


class JitterWait(BaseRetryWait):
    """Wait policy that adds random jitter to another wait policy.

    The jitter is calculated as ``random.uniform(0, jitter_factor) * delay``
    and ADDED to the delay of the wrapped policy, which spreads the
    attempts of many callers failing at the same time.

    Args:
        wait: The wrapped wait policy.
        jitter_factor: Factor for the random jitter. Must be >= 0.
            Recommended value is 0.1 to add up to 10% additional delay.
    """

    def __init__(self, wait: BaseRetryWait, jitter_factor: float = 0.1) -> None:
        validate_non_negative("jitter_factor", jitter_factor)
        self.wait = wait
        self.jitter_factor = jitter_factor

    def wait_time(self, attempt: RetryAttempt) -> float:
        wait_time = self.wait.wait_time(attempt)
        if self.jitter_factor <= 0:
            return wait_time
        jitter = random.uniform(0, self.jitter_factor) * wait_time  # noqa: S311
        logger.debug(
            f"Adding jitter to wait time (base={wait_time:.2f}s, jitter={jitter:.2f}s)"
        )
        return wait_time + jitter

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(wait={self.wait!r}, "
            f"jitter_factor={self.jitter_factor})"
        )
