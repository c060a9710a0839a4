r"""Abstract base classes for block policies.

A block policy pauses execution between two attempts. It is the only
suspension point of a retry sequence.
"""

from __future__ import annotations

__all__ = ["BaseAsyncRetryBlock", "BaseRetryBlock"]

from abc import ABC, abstractmethod


class BaseRetryBlock(ABC):
    """Abstract base class for blocking pauses used by ``Retryer``."""

    @abstractmethod
    def block(self, wait_time: float) -> None:
        """Pause the current thread.

        Args:
            wait_time: The duration of the pause in seconds.
        """


class BaseAsyncRetryBlock(ABC):
    """Abstract base class for non-blocking pauses used by
    ``AsyncRetryer``."""

    @abstractmethod
    async def block(self, wait_time: float) -> None:
        """Suspend the current task without blocking the event loop.

        Args:
            wait_time: The duration of the pause in seconds.
        """
