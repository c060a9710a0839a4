r"""Shared core logic for retry executors.

This module provides helper functions used by both synchronous and
asynchronous retry executors.
"""

from __future__ import annotations

__all__ = ["finish"]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from aretry.attempt import RetryAttempt
    from aretry.context import RetryContext


def finish(context: RetryContext, attempt: RetryAttempt) -> Any:
    """Produce the outcome of a retry sequence from its terminal attempt.

    A successful terminal attempt returns its result directly. A failed
    terminal attempt is handed to the recover policy, whose return value
    (or exception) becomes the outcome.

    Args:
        context: The context of the retry sequence.
        attempt: The terminal attempt.

    Returns:
        The result of the work unit or the recovered value.
    """
    if attempt.succeeded:
        return attempt.result
    return context.recover.recover(attempt)
