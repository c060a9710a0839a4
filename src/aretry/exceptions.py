r"""Exceptions raised by the retry package."""

from __future__ import annotations

__all__ = ["RetryError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.attempt import RetryAttempt


class RetryError(Exception):
    """Raised when a retry sequence ends on a failure that is reported
    explicitly instead of re-raising the original exception.

    Args:
        message: A human readable description of the failure.
        attempt: The terminal attempt, if available.
        cause: The exception raised by the terminal attempt, if any.

    Attributes:
        attempt: The terminal attempt, if available.
        cause: The exception raised by the terminal attempt, if any.

    Example:
        ```pycon
        >>> from aretry import RetryAttempt, RetryError
        >>> attempt = RetryAttempt(attempt=3, error=ValueError("boom"))
        >>> error = RetryError("gave up", attempt=attempt, cause=attempt.error)
        >>> error.attempt.attempt
        3

        ```
    """

    def __init__(
        self,
        message: str,
        attempt: RetryAttempt | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.attempt = attempt
        self.cause = cause
