r"""Abstract base class for retry conditions."""

from __future__ import annotations

__all__ = ["BaseRetryCondition"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.attempt import RetryAttempt


class BaseRetryCondition(ABC):
    """Abstract base class for retry conditions.

    A retry condition decides whether the outcome of an attempt warrants
    another attempt. It is only consulted when the stop policy has not
    already ended the retry sequence.
    """

    @abstractmethod
    def condition(self, attempt: RetryAttempt) -> bool:
        """Return whether another attempt should be made.

        Args:
            attempt: The latest attempt.

        Returns:
            ``True`` to retry, ``False`` to end the retry sequence.
        """
