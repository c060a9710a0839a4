r"""Abstract base class for stop policies."""

from __future__ import annotations

__all__ = ["BaseRetryStop"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.attempt import RetryAttempt


class BaseRetryStop(ABC):
    """Abstract base class for stop policies.

    A stop policy ends the retry sequence regardless of what the retry
    condition says. It is evaluated before the retry condition.
    """

    @abstractmethod
    def stop(self, attempt: RetryAttempt) -> bool:
        """Return whether the retry sequence must end after this attempt.

        Args:
            attempt: The latest attempt.

        Returns:
            ``True`` to stop retrying.
        """
