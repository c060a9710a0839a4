r"""Abstract base class for retry listeners."""

from __future__ import annotations

__all__ = ["BaseRetryListener"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.attempt import RetryAttempt


class BaseRetryListener(ABC):
    """Abstract base class for retry listeners.

    A listener is notified once after every attempt, successful or not,
    before the retry sequence decides whether to continue. Exceptions
    raised by a listener are not caught: they abort the retry sequence.
    """

    @abstractmethod
    def listen(self, attempt: RetryAttempt) -> None:
        """Observe an attempt.

        Args:
            attempt: The attempt that was just made.
        """
