r"""Built-in recover policies."""

from __future__ import annotations

__all__ = ["CallableRecover", "NoRecover", "RaiseRetryErrorRecover", "ValueRecover"]

from typing import TYPE_CHECKING, Any, NoReturn

from aretry.exceptions import RetryError
from aretry.recover.base import BaseRecover

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.attempt import RetryAttempt


class NoRecover(BaseRecover):
    """Recover policy that re-raises the failure of the terminal attempt
    unchanged.

    This is the default recover policy: once retries are exhausted the
    original exception surfaces to the caller.
    """

    def recover(self, attempt: RetryAttempt) -> NoReturn:
        raise attempt.error

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"


class ValueRecover(BaseRecover):
    """Recover policy returning a fixed fallback value.

    Args:
        value: The value returned in place of the failure.

    Example:
        ```pycon
        >>> from aretry import RetryAttempt
        >>> from aretry.recover import ValueRecover
        >>> ValueRecover("default").recover(RetryAttempt(attempt=3, error=ValueError()))
        'default'

        ```
    """

    def __init__(self, value: Any) -> None:
        self.value = value

    def recover(self, attempt: RetryAttempt) -> Any:  # noqa: ARG002
        return self.value

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(value={self.value!r})"


class CallableRecover(BaseRecover):
    """Recover policy computing the fallback value from the terminal
    attempt.

    Args:
        func: Function called with the terminal attempt.
    """

    def __init__(self, func: Callable[[RetryAttempt], Any]) -> None:
        self.func = func

    def recover(self, attempt: RetryAttempt) -> Any:
        return self.func(attempt)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(func={self.func!r})"


class RaiseRetryErrorRecover(BaseRecover):
    """Recover policy raising a ``RetryError`` chained to the failure of
    the terminal attempt.

    Example:
        ```pycon
        >>> from aretry import RetryAttempt, RetryError
        >>> from aretry.recover import RaiseRetryErrorRecover
        >>> try:
        ...     RaiseRetryErrorRecover().recover(RetryAttempt(attempt=3, error=ValueError("boom")))
        ... except RetryError as exc:
        ...     print(exc)
        ...
        Retry failed after 3 attempts: ValueError: boom

        ```
    """

    def recover(self, attempt: RetryAttempt) -> NoReturn:
        error = attempt.error
        msg = f"Retry failed after {attempt.attempt} attempts: {type(error).__name__}: {error}"
        raise RetryError(msg, attempt=attempt, cause=error) from error

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"
