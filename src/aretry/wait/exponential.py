r"""Exponential wait policy."""

from __future__ import annotations

__all__ = ["ExponentialWait"]

import math

from aretry.utils.validation import validate_non_negative, validate_positive
from aretry.wait.base import BaseBackoffWait


class ExponentialWait(BaseBackoffWait):
    """Exponential wait policy.

    Calculates delay as: base_delay * (2 ** retry), with optional max_delay cap.

    Works well for most scenarios where progressively longer delays
    between attempts give the failing dependency time to recover. A delay
    beyond the float range becomes ``math.inf`` before the cap is applied,
    so a capped policy keeps returning ``max_delay`` on long sequences.

    Args:
        base_delay: The base delay factor (default: 0.3). The actual delay
            is calculated as base_delay * (2 ** retry).
        max_delay: Optional maximum delay cap in seconds. If specified,
            delays will not exceed this value.

    Example:
        ```pycon
        >>> from aretry.wait import ExponentialWait
        >>> wait = ExponentialWait(base_delay=0.3)
        >>> wait.calculate(0)  # First retry
        0.3
        >>> wait.calculate(1)  # Second retry
        0.6
        >>> wait.calculate(2)  # Third retry
        1.2
        >>> wait = ExponentialWait(base_delay=1.0, max_delay=5.0)
        >>> wait.calculate(10)  # Would be 1024.0, but capped
        5.0

        ```
    """

    def __init__(self, base_delay: float = 0.3, max_delay: float | None = None) -> None:
        validate_non_negative("base_delay", base_delay)
        if max_delay is not None:
            validate_positive("max_delay", max_delay)
        self.base_delay = base_delay
        self.max_delay = max_delay

    def calculate(self, retry: int) -> float:
        try:
            delay = math.ldexp(self.base_delay, retry)
        except OverflowError:
            # base_delay * 2**retry is beyond the float range
            delay = math.inf
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )
