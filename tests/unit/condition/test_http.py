r"""Unit tests for HttpStatusCondition."""

from __future__ import annotations

import httpx
import pytest

from aretry import RetryAttempt
from aretry.condition import RETRY_STATUS_CODES, HttpStatusCondition

REQUEST = httpx.Request("GET", "https://api.example.com/data")


def _status_error(status_code: int) -> httpx.HTTPStatusError:
    response = httpx.Response(status_code, request=REQUEST)
    return httpx.HTTPStatusError("error", request=REQUEST, response=response)


def test_retry_status_codes() -> None:
    assert RETRY_STATUS_CODES == (429, 500, 502, 503, 504)


def test_http_status_condition_default_forcelist() -> None:
    assert HttpStatusCondition().status_forcelist == RETRY_STATUS_CODES


@pytest.mark.parametrize("status_code", RETRY_STATUS_CODES)
def test_http_status_condition_retryable_response(status_code: int) -> None:
    """Test that responses with a retryable status are retried."""
    attempt = RetryAttempt(attempt=1, result=httpx.Response(status_code))
    assert HttpStatusCondition().condition(attempt)


@pytest.mark.parametrize("status_code", [200, 201, 301, 400, 404])
def test_http_status_condition_non_retryable_response(status_code: int) -> None:
    """Test that other responses are not retried."""
    attempt = RetryAttempt(attempt=1, result=httpx.Response(status_code))
    assert not HttpStatusCondition().condition(attempt)


def test_http_status_condition_custom_forcelist() -> None:
    condition = HttpStatusCondition(status_forcelist=(404,))
    assert condition.condition(RetryAttempt(attempt=1, result=httpx.Response(404)))
    assert not condition.condition(RetryAttempt(attempt=1, result=httpx.Response(503)))


def test_http_status_condition_non_response_result() -> None:
    """Test that results other than responses are not retried."""
    assert not HttpStatusCondition().condition(RetryAttempt(attempt=1, result=503))


def test_http_status_condition_status_error() -> None:
    """Test that HTTPStatusError is retried based on its response status."""
    condition = HttpStatusCondition()
    assert condition.condition(RetryAttempt(attempt=1, error=_status_error(503)))
    assert not condition.condition(RetryAttempt(attempt=1, error=_status_error(404)))


@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectError("refused"),
        httpx.ReadTimeout("timeout"),
        httpx.NetworkError("unreachable"),
        httpx.RemoteProtocolError("closed"),
    ],
)
def test_http_status_condition_transport_errors(error: Exception) -> None:
    """Test that timeouts and transport errors are retried."""
    assert HttpStatusCondition().condition(RetryAttempt(attempt=1, error=error))


def test_http_status_condition_other_errors() -> None:
    """Test that unrelated exceptions are not retried."""
    assert not HttpStatusCondition().condition(RetryAttempt(attempt=1, error=ValueError()))
