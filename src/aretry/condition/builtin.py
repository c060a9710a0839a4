r"""Built-in retry conditions.

This module provides the default condition (never retry) and the
conditions to retry on exceptions, on results, or on a custom predicate,
plus the composites to combine several conditions.
"""

from __future__ import annotations

__all__ = [
    "AllCondition",
    "AlwaysFalseCondition",
    "AlwaysTrueCondition",
    "AnyCondition",
    "ExceptionCondition",
    "PredicateCondition",
    "ResultCondition",
]

from typing import TYPE_CHECKING, Any

from aretry.condition.base import BaseRetryCondition

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.attempt import RetryAttempt


class AlwaysFalseCondition(BaseRetryCondition):
    """Condition that never retries.

    This is the default condition: retrying is opt-in per failure mode.
    """

    def condition(self, attempt: RetryAttempt) -> bool:  # noqa: ARG002
        return False

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"


class AlwaysTrueCondition(BaseRetryCondition):
    """Condition that always retries, including successful attempts."""

    def condition(self, attempt: RetryAttempt) -> bool:  # noqa: ARG002
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"


class ExceptionCondition(BaseRetryCondition):
    """Condition that retries attempts that failed with given exception
    types.

    Args:
        *exception_types: The exception types that trigger a retry.
            Defaults to ``Exception``, i.e. retry on any failure.

    Example:
        ```pycon
        >>> from aretry import RetryAttempt
        >>> from aretry.condition import ExceptionCondition
        >>> condition = ExceptionCondition(TimeoutError, ConnectionError)
        >>> condition.condition(RetryAttempt(attempt=1, error=TimeoutError()))
        True
        >>> condition.condition(RetryAttempt(attempt=1, error=KeyError("x")))
        False
        >>> condition.condition(RetryAttempt(attempt=1, result="ok"))
        False

        ```
    """

    def __init__(self, *exception_types: type[Exception]) -> None:
        self.exception_types: tuple[type[Exception], ...] = exception_types or (Exception,)

    def condition(self, attempt: RetryAttempt) -> bool:
        return attempt.failed and isinstance(attempt.error, self.exception_types)

    def __repr__(self) -> str:
        names = ", ".join(exc.__name__ for exc in self.exception_types)
        return f"{self.__class__.__qualname__}({names})"


class ResultCondition(BaseRetryCondition):
    """Condition that retries successful attempts whose result matches a
    predicate.

    Failed attempts never match.

    Args:
        predicate: Function called with the result of the attempt.

    Example:
        ```pycon
        >>> from aretry import RetryAttempt
        >>> from aretry.condition import ResultCondition
        >>> condition = ResultCondition(lambda result: result is None)
        >>> condition.condition(RetryAttempt(attempt=1, result=None))
        True
        >>> condition.condition(RetryAttempt(attempt=1, result=1))
        False

        ```
    """

    def __init__(self, predicate: Callable[[Any], bool]) -> None:
        self.predicate = predicate

    def condition(self, attempt: RetryAttempt) -> bool:
        return attempt.succeeded and bool(self.predicate(attempt.result))

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(predicate={self.predicate!r})"


class PredicateCondition(BaseRetryCondition):
    """Condition backed by a function of the whole attempt.

    Args:
        predicate: Function called with the attempt, returning whether to
            retry.
    """

    def __init__(self, predicate: Callable[[RetryAttempt], bool]) -> None:
        self.predicate = predicate

    def condition(self, attempt: RetryAttempt) -> bool:
        return bool(self.predicate(attempt))

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(predicate={self.predicate!r})"


class AnyCondition(BaseRetryCondition):
    """Condition that retries if any of its children retries.

    Children are evaluated in order and evaluation stops at the first
    child that returns ``True``.

    Args:
        *conditions: The child conditions. At least one is required.

    Raises:
        ValueError: If no condition is given.

    Example:
        ```pycon
        >>> from aretry import RetryAttempt
        >>> from aretry.condition import AnyCondition, ExceptionCondition, ResultCondition
        >>> condition = AnyCondition(
        ...     ExceptionCondition(TimeoutError), ResultCondition(lambda r: r is None)
        ... )
        >>> condition.condition(RetryAttempt(attempt=1, result=None))
        True
        >>> condition.condition(RetryAttempt(attempt=1, error=TimeoutError()))
        True
        >>> condition.condition(RetryAttempt(attempt=1, result=0))
        False

        ```
    """

    def __init__(self, *conditions: BaseRetryCondition) -> None:
        if not conditions:
            msg = "AnyCondition requires at least one condition"
            raise ValueError(msg)
        self.conditions = conditions

    def condition(self, attempt: RetryAttempt) -> bool:
        return any(child.condition(attempt) for child in self.conditions)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}{self.conditions!r}"


class AllCondition(BaseRetryCondition):
    """Condition that retries only if all of its children retry.

    Args:
        *conditions: The child conditions. At least one is required.

    Raises:
        ValueError: If no condition is given.
    """

    def __init__(self, *conditions: BaseRetryCondition) -> None:
        if not conditions:
            msg = "AllCondition requires at least one condition"
            raise ValueError(msg)
        self.conditions = conditions

    def condition(self, attempt: RetryAttempt) -> bool:
        return all(child.condition(attempt) for child in self.conditions)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}{self.conditions!r}"
