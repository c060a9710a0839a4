r"""Constant wait policies."""

from __future__ import annotations

__all__ = ["FixedWait", "NoWait"]

from aretry.utils.validation import validate_non_negative
from aretry.wait.base import BaseBackoffWait


class NoWait(BaseBackoffWait):
    """Wait policy that never waits.

    This is the default wait policy.
    """

    def calculate(self, retry: int) -> float:  # noqa: ARG002
        return 0.0

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"


class FixedWait(BaseBackoffWait):
    """Constant/fixed wait policy.

    Returns the same delay for every retry, regardless of the attempt number.

    Args:
        delay: The fixed delay in seconds to use for all retries (default: 1.0).

    Example:
        ```pycon
        >>> from aretry.wait import FixedWait
        >>> wait = FixedWait(delay=2.5)
        >>> wait.calculate(0)  # First retry
        2.5
        >>> wait.calculate(10)  # Eleventh retry
        2.5

        ```
    """

    def __init__(self, delay: float = 1.0) -> None:
        validate_non_negative("delay", delay)
        self.delay = delay

    def calculate(self, retry: int) -> float:  # noqa: ARG002
        return self.delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"
