r"""Shared test helpers for retry tests.

This module contains work units with a scripted sequence of outcomes,
used across the unit and integration tests.
"""

from __future__ import annotations

__all__ = ["AsyncScriptedWork", "ScriptedWork", "always_fails"]

from typing import Any


class ScriptedWork:
    """Work unit replaying a script of outcomes.

    Each call consumes the next item: exceptions are raised, other values
    are returned. The last item is repeated once the script is exhausted.

    Args:
        *outcomes: The outcomes, in order.

    Attributes:
        call_count: Number of calls so far.
    """

    def __init__(self, *outcomes: Any) -> None:
        self.outcomes = outcomes
        self.call_count = 0

    def next_outcome(self) -> Any:
        outcome = self.outcomes[min(self.call_count, len(self.outcomes) - 1)]
        self.call_count += 1
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def __call__(self) -> Any:
        return self.next_outcome()


class AsyncScriptedWork(ScriptedWork):
    """Asynchronous version of ``ScriptedWork``."""

    async def __call__(self) -> Any:
        return self.next_outcome()


def always_fails(error: Exception | None = None) -> ScriptedWork:
    """Create a work unit that raises the same exception on every call."""
    return ScriptedWork(error if error is not None else RuntimeError("boom"))
