r"""Linear wait policy."""

from __future__ import annotations

__all__ = ["LinearWait"]

from aretry.utils.validation import validate_non_negative, validate_positive
from aretry.wait.base import BaseBackoffWait


class LinearWait(BaseBackoffWait):
    """Linear wait policy.

    Calculates delay as: base_delay * (retry + 1), with optional max_delay cap.

    Args:
        base_delay: The base delay in seconds (default: 1.0).
        max_delay: Optional maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from aretry.wait import LinearWait
        >>> wait = LinearWait(base_delay=1.0)
        >>> wait.calculate(0)
        1.0
        >>> wait.calculate(2)
        3.0
        >>> LinearWait(base_delay=2.0, max_delay=5.0).calculate(5)
        5.0

        ```
    """

    def __init__(self, base_delay: float = 1.0, max_delay: float | None = None) -> None:
        validate_non_negative("base_delay", base_delay)
        if max_delay is not None:
            validate_positive("max_delay", max_delay)
        self.base_delay = base_delay
        self.max_delay = max_delay

    def calculate(self, retry: int) -> float:
        delay = self.base_delay * (retry + 1)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )
