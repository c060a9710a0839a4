r"""Wait policy honoring the HTTP Retry-After header."""

from __future__ import annotations

__all__ = ["RetryAfterWait"]

import logging
from typing import TYPE_CHECKING

import httpx

from aretry.utils.retry_after import parse_retry_after
from aretry.wait.base import BaseRetryWait
from aretry.wait.constant import NoWait

if TYPE_CHECKING:
    from aretry.attempt import RetryAttempt

logger: logging.Logger = logging.getLogger(__name__)


class RetryAfterWait(BaseRetryWait):
    """Wait policy that uses the Retry-After header of an HTTP response.

    The response is taken from the attempt result when it is an
    ``httpx.Response``, or from the ``httpx.HTTPStatusError`` raised by the
    attempt. When no parsable header is present, the fallback wait policy
    is used.

    Args:
        fallback: Wait policy used when there is no Retry-After header.
            Defaults to ``NoWait()``.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry import RetryAttempt
        >>> from aretry.wait import FixedWait, RetryAfterWait
        >>> wait = RetryAfterWait(fallback=FixedWait(1.0))
        >>> response = httpx.Response(429, headers={"Retry-After": "5"})
        >>> wait.wait_time(RetryAttempt(attempt=1, result=response))
        5.0
        >>> wait.wait_time(RetryAttempt(attempt=1, result=httpx.Response(503)))
        1.0

        ```
    """

    def __init__(self, fallback: BaseRetryWait | None = None) -> None:
        self.fallback: BaseRetryWait = fallback if fallback is not None else NoWait()

    def wait_time(self, attempt: RetryAttempt) -> float:
        response = _extract_response(attempt)
        if response is not None:
            retry_after = parse_retry_after(response.headers.get("Retry-After"))
            if retry_after is not None:
                logger.debug(f"Using Retry-After header value: {retry_after:.2f}s")
                return retry_after
        return self.fallback.wait_time(attempt)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(fallback={self.fallback!r})"


def _extract_response(attempt: RetryAttempt) -> httpx.Response | None:
    if isinstance(attempt.error, httpx.HTTPStatusError):
        return attempt.error.response
    if isinstance(attempt.result, httpx.Response):
        return attempt.result
    return None
