r"""Fibonacci wait policy."""

from __future__ import annotations

__all__ = ["FibonacciWait"]

import math

from aretry.utils.validation import validate_non_negative, validate_positive
from aretry.wait.base import BaseBackoffWait


class FibonacciWait(BaseBackoffWait):
    """Fibonacci wait policy.

    Calculates delay as: base_delay * fibonacci(retry + 1), with optional
    max_delay cap. The sequence (1, 1, 2, 3, 5, 8, ...) grows more gently
    than exponential backoff. A delay beyond the float range becomes
    ``math.inf`` before the cap is applied.

    Args:
        base_delay: The base delay in seconds (default: 1.0).
        max_delay: Optional maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from aretry.wait import FibonacciWait
        >>> wait = FibonacciWait(base_delay=1.0)
        >>> [wait.calculate(retry) for retry in range(6)]
        [1.0, 1.0, 2.0, 3.0, 5.0, 8.0]
        >>> FibonacciWait(base_delay=1.0, max_delay=10.0).calculate(10)
        10.0

        ```
    """

    def __init__(self, base_delay: float = 1.0, max_delay: float | None = None) -> None:
        validate_non_negative("base_delay", base_delay)
        if max_delay is not None:
            validate_positive("max_delay", max_delay)
        self.base_delay = base_delay
        self.max_delay = max_delay

    @staticmethod
    def _fibonacci(n: int) -> int:
        """Return the nth Fibonacci number (1-indexed)."""
        if n <= 0:
            return 0
        a, b = 0, 1
        for _ in range(n - 1):
            a, b = b, a + b
        return b

    def calculate(self, retry: int) -> float:
        try:
            delay = self.base_delay * self._fibonacci(retry + 1)
        except OverflowError:
            # The Fibonacci number no longer fits in a float
            delay = math.inf if self.base_delay > 0 else 0.0
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )
