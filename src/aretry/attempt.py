r"""Immutable snapshot of a single retry attempt.

This module provides the RetryAttempt value object that every retry
policy receives to make its decision.
"""

from __future__ import annotations

__all__ = ["RetryAttempt"]

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RetryAttempt:
    """Outcome of one invocation of the work unit.

    Attributes:
        attempt: The attempt number (1-indexed). First attempt is 1.
        result: The value returned by the work unit, or None if it failed.
        error: The exception raised by the work unit, or None if it succeeded.
        elapsed_time: Seconds elapsed between the start of the first attempt
            and the end of this one.
        previous: The attempt made just before this one in the same retry
            sequence, or None for the first attempt. Attempts are linked, so
            the history of a sequence is shared instead of copied.

    Example:
        ```pycon
        >>> from aretry import RetryAttempt
        >>> attempt = RetryAttempt(attempt=1, result=42, elapsed_time=0.5)
        >>> attempt.succeeded
        True
        >>> attempt = RetryAttempt(attempt=2, error=ValueError("boom"))
        >>> attempt.failed
        True

        ```
    """

    attempt: int
    result: Any = None
    error: Exception | None = None
    elapsed_time: float = 0.0
    previous: RetryAttempt | None = field(default=None, repr=False, compare=False)

    @property
    def failed(self) -> bool:
        """Whether the work unit raised an exception."""
        return self.error is not None

    @property
    def succeeded(self) -> bool:
        """Whether the work unit returned without raising."""
        return self.error is None

    @property
    def history(self) -> tuple[RetryAttempt, ...]:
        """The previous attempts of the same retry sequence, oldest first.

        Example:
            ```pycon
            >>> from aretry import RetryAttempt
            >>> first = RetryAttempt(attempt=1, error=ValueError("boom"))
            >>> second = RetryAttempt(attempt=2, result="ok", previous=first)
            >>> [attempt.attempt for attempt in second.history]
            [1]

            ```
        """
        attempts = []
        attempt = self.previous
        while attempt is not None:
            attempts.append(attempt)
            attempt = attempt.previous
        return tuple(reversed(attempts))
