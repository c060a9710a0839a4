r"""Abstract base classes for wait policies."""

from __future__ import annotations

__all__ = ["BaseBackoffWait", "BaseRetryWait"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.attempt import RetryAttempt


class BaseRetryWait(ABC):
    """Abstract base class for wait policies.

    A wait policy computes how long to wait before the next attempt
    based on the latest attempt (attempt number, elapsed time, outcome).
    """

    @abstractmethod
    def wait_time(self, attempt: RetryAttempt) -> float:
        """Compute the delay before the next attempt.

        Args:
            attempt: The attempt that was just made.

        Returns:
            The delay in seconds. Must be non-negative.
        """


class BaseBackoffWait(BaseRetryWait):
    """Abstract base class for wait policies that only depend on the retry
    number.

    Subclasses implement ``calculate`` with the 0-indexed retry number:
    the wait after attempt 1 is ``calculate(0)``, the wait after attempt 2
    is ``calculate(1)``, etc.
    """

    def wait_time(self, attempt: RetryAttempt) -> float:
        return self.calculate(attempt.attempt - 1)

    @abstractmethod
    def calculate(self, retry: int) -> float:
        """Calculate the backoff delay for a given retry.

        Args:
            retry: The retry number (0-indexed). For example, retry=0 is
                the wait before the first retry, retry=1 before the second
                retry, etc.

        Returns:
            The calculated delay in seconds.
        """
