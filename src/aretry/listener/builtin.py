r"""Built-in retry listeners.

This module provides the no-op default listener, a listener wrapping a
callback, a listener notifying several listeners, and a listener that
logs every attempt.
"""

from __future__ import annotations

__all__ = ["CallbackListener", "CompositeListener", "LoggingListener", "NoListener"]

import logging
from typing import TYPE_CHECKING

from aretry.listener.base import BaseRetryListener

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.attempt import RetryAttempt


class NoListener(BaseRetryListener):
    """Listener that does nothing.

    This is the default listener.
    """

    def listen(self, attempt: RetryAttempt) -> None:
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"


class CallbackListener(BaseRetryListener):
    """Listener that forwards every attempt to a callback.

    Args:
        callback: Function called with each attempt.

    Example:
        ```pycon
        >>> from aretry import Retryer
        >>> from aretry.listener import CallbackListener
        >>> seen = []
        >>> Retryer().listen(CallbackListener(lambda attempt: seen.append(attempt.attempt))).retry(
        ...     lambda: "ok"
        ... )
        'ok'
        >>> seen
        [1]

        ```
    """

    def __init__(self, callback: Callable[[RetryAttempt], None]) -> None:
        self.callback = callback

    def listen(self, attempt: RetryAttempt) -> None:
        self.callback(attempt)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(callback={self.callback!r})"


class CompositeListener(BaseRetryListener):
    """Listener that notifies several listeners in order.

    Args:
        *listeners: The child listeners.
    """

    def __init__(self, *listeners: BaseRetryListener) -> None:
        self.listeners = listeners

    def listen(self, attempt: RetryAttempt) -> None:
        for listener in self.listeners:
            listener.listen(attempt)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}{self.listeners!r}"


class LoggingListener(BaseRetryListener):
    """Listener that logs every attempt with the ``logging`` module.

    The attempt number, the elapsed time and whether the attempt failed
    are also attached to the log record as extra fields, so they show up
    as separate keys when the handler uses
    ``aretry.utils.structured_logging.StructuredFormatter``.

    Args:
        logger: The logger to use. Defaults to the logger of this module.
        level: The level of the log records (default: ``logging.DEBUG``).
    """

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.DEBUG) -> None:
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.level = level

    def listen(self, attempt: RetryAttempt) -> None:
        extra = {
            "attempt": attempt.attempt,
            "elapsed_time": attempt.elapsed_time,
            "failed": attempt.failed,
        }
        if attempt.failed:
            error_type = type(attempt.error).__name__
            self.logger.log(
                self.level,
                f"Attempt {attempt.attempt} failed after {attempt.elapsed_time:.2f}s "
                f"with {error_type}: {attempt.error}",
                extra=extra,
            )
        else:
            self.logger.log(
                self.level,
                f"Attempt {attempt.attempt} succeeded after {attempt.elapsed_time:.2f}s",
                extra=extra,
            )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(logger={self.logger.name!r}, "
            f"level={logging.getLevelName(self.level)})"
        )
