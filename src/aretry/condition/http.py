r"""Retry condition for HTTP work units built on httpx.

This module provides a condition that recognizes transient HTTP
failures, either returned as an ``httpx.Response`` or raised as an
httpx exception.
"""

from __future__ import annotations

__all__ = ["RETRY_STATUS_CODES", "HttpStatusCondition"]

from typing import TYPE_CHECKING

import httpx

from aretry.condition.base import BaseRetryCondition

if TYPE_CHECKING:
    from aretry.attempt import RetryAttempt

# HTTP status codes that should trigger automatic retry
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


class HttpStatusCondition(BaseRetryCondition):
    """Condition that retries transient HTTP failures.

    An attempt is retried when:
    - it returned an ``httpx.Response`` whose status code is in the forcelist
    - it raised an ``httpx.HTTPStatusError`` whose response status code is in
      the forcelist (e.g. after ``response.raise_for_status()``)
    - it raised an ``httpx.TimeoutException`` or an ``httpx.TransportError``

    Args:
        status_forcelist: Tuple of HTTP status codes that trigger a retry.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry import RetryAttempt
        >>> from aretry.condition import HttpStatusCondition
        >>> condition = HttpStatusCondition()
        >>> condition.condition(RetryAttempt(attempt=1, result=httpx.Response(503)))
        True
        >>> condition.condition(RetryAttempt(attempt=1, result=httpx.Response(404)))
        False
        >>> condition.condition(RetryAttempt(attempt=1, error=httpx.ConnectError("refused")))
        True

        ```
    """

    def __init__(self, status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES) -> None:
        self.status_forcelist = status_forcelist

    def condition(self, attempt: RetryAttempt) -> bool:
        error = attempt.error
        if error is None:
            return (
                isinstance(attempt.result, httpx.Response)
                and attempt.result.status_code in self.status_forcelist
            )
        if isinstance(error, httpx.HTTPStatusError):
            return error.response.status_code in self.status_forcelist
        return isinstance(error, (httpx.TimeoutException, httpx.TransportError))

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(status_forcelist={self.status_forcelist})"
