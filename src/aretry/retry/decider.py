r"""Decision logic for ending or continuing a retry sequence.

This module provides the RetryDecider class that applies the stop policy
and the retry condition, in that order, to the latest attempt.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.attempt import RetryAttempt
    from aretry.condition import BaseRetryCondition
    from aretry.stop import BaseRetryStop


class RetryDecider:
    """Decides whether a retry sequence continues after an attempt.

    The stop policy takes precedence: when it says stop, the retry
    condition is not consulted. Otherwise the sequence continues only if
    the retry condition says so.

    Args:
        stop: The stop policy.
        condition: The retry condition.

    Example:
        ```pycon
        >>> from aretry import RetryAttempt
        >>> from aretry.condition import ExceptionCondition
        >>> from aretry.retry import RetryDecider
        >>> from aretry.stop import MaxAttemptStop
        >>> decider = RetryDecider(MaxAttemptStop(3), ExceptionCondition())
        >>> decider.should_retry(RetryAttempt(attempt=1, error=ValueError()))
        True
        >>> decider.should_retry(RetryAttempt(attempt=3, error=ValueError()))
        False
        >>> decider.should_retry(RetryAttempt(attempt=1, result="ok"))
        False

        ```
    """

    def __init__(self, stop: BaseRetryStop, condition: BaseRetryCondition) -> None:
        self.stop = stop
        self.condition = condition

    def should_retry(self, attempt: RetryAttempt) -> bool:
        """Determine if another attempt should be made.

        Args:
            attempt: The latest attempt.

        Returns:
            ``True`` to make another attempt, ``False`` to end the sequence.
        """
        if self.stop.stop(attempt):
            return False
        return self.condition.condition(attempt)
