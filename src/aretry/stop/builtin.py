r"""Built-in stop policies.

This module provides stop policies based on the number of attempts or
on the elapsed time, plus a policy that never stops and a composite.
"""

from __future__ import annotations

__all__ = ["AnyStop", "MaxAttemptStop", "MaxElapsedTimeStop", "NeverStop"]

from typing import TYPE_CHECKING

from aretry.utils.validation import validate_max_attempt, validate_positive
from aretry.stop.base import BaseRetryStop

if TYPE_CHECKING:
    from aretry.attempt import RetryAttempt


class MaxAttemptStop(BaseRetryStop):
    """Stop policy ending the retry sequence after a number of attempts.

    Args:
        max_attempt: Maximum number of attempts, including the first one
            (default: 3). Must be >= 1.

    Raises:
        ValueError: If max_attempt is lower than 1.

    Example:
        ```pycon
        >>> from aretry import RetryAttempt
        >>> from aretry.stop import MaxAttemptStop
        >>> stop = MaxAttemptStop(3)
        >>> stop.stop(RetryAttempt(attempt=2))
        False
        >>> stop.stop(RetryAttempt(attempt=3))
        True

        ```
    """

    def __init__(self, max_attempt: int = 3) -> None:
        validate_max_attempt(max_attempt)
        self.max_attempt = max_attempt

    def stop(self, attempt: RetryAttempt) -> bool:
        return attempt.attempt >= self.max_attempt

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(max_attempt={self.max_attempt})"


class MaxElapsedTimeStop(BaseRetryStop):
    """Stop policy ending the retry sequence once a time budget is spent.

    The elapsed time is measured from the start of the first attempt to
    the end of the latest one, so a single slow attempt can overshoot the
    budget; no attempt is interrupted.

    Args:
        max_total_time: Maximum total time budget in seconds. Must be > 0.

    Raises:
        ValueError: If max_total_time is not positive.
    """

    def __init__(self, max_total_time: float) -> None:
        validate_positive("max_total_time", max_total_time)
        self.max_total_time = max_total_time

    def stop(self, attempt: RetryAttempt) -> bool:
        return attempt.elapsed_time >= self.max_total_time

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(max_total_time={self.max_total_time})"


class NeverStop(BaseRetryStop):
    """Stop policy that never stops.

    Combined with a condition that keeps retrying, the work unit is
    invoked until it produces an outcome the condition accepts.
    """

    def stop(self, attempt: RetryAttempt) -> bool:  # noqa: ARG002
        return False

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"


class AnyStop(BaseRetryStop):
    """Stop policy that stops as soon as any of its children stops.

    Args:
        *stops: The child stop policies. At least one is required.

    Raises:
        ValueError: If no stop policy is given.

    Example:
        ```pycon
        >>> from aretry import RetryAttempt
        >>> from aretry.stop import AnyStop, MaxAttemptStop, MaxElapsedTimeStop
        >>> stop = AnyStop(MaxAttemptStop(5), MaxElapsedTimeStop(10.0))
        >>> stop.stop(RetryAttempt(attempt=2, elapsed_time=1.0))
        False
        >>> stop.stop(RetryAttempt(attempt=2, elapsed_time=12.0))
        True

        ```
    """

    def __init__(self, *stops: BaseRetryStop) -> None:
        if not stops:
            msg = "AnyStop requires at least one stop policy"
            raise ValueError(msg)
        self.stops = stops

    def stop(self, attempt: RetryAttempt) -> bool:
        return any(child.stop(attempt) for child in self.stops)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}{self.stops!r}"
