r"""Abstract base class for recover policies."""

from __future__ import annotations

__all__ = ["BaseRecover"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from aretry.attempt import RetryAttempt


class BaseRecover(ABC):
    """Abstract base class for recover policies.

    A recover policy is invoked exactly once when a retry sequence ends
    on a failed attempt. Its return value replaces the failure; it may
    also raise.
    """

    @abstractmethod
    def recover(self, attempt: RetryAttempt) -> Any:
        """Produce a fallback result for a failed terminal attempt.

        Args:
            attempt: The terminal attempt. ``attempt.error`` is not None.

        Returns:
            The value returned to the caller of the retry sequence.
        """
