r"""Unit tests for the structured logging utilities."""

from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING

import pytest

from aretry.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def _reset_correlation_id() -> Generator[None, None, None]:
    clear_correlation_id()
    yield
    clear_correlation_id()


def _record(msg: str = "Attempt 1 failed", **kwargs: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="aretry.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=42,
        msg=msg,
        args=(),
        exc_info=kwargs.pop("exc_info", None),
        func="run",
    )
    for key, value in kwargs.items():
        setattr(record, key, value)
    return record


def test_correlation_id_lifecycle() -> None:
    assert get_correlation_id() is None
    set_correlation_id("job-1")
    assert get_correlation_id() == "job-1"
    clear_correlation_id()
    assert get_correlation_id() is None


def test_structured_formatter_fields() -> None:
    """Test that the formatter outputs the standard fields as JSON."""
    data = json.loads(StructuredFormatter().format(_record()))
    assert data["level"] == "WARNING"
    assert data["logger"] == "aretry.test"
    assert data["message"] == "Attempt 1 failed"
    assert data["function"] == "run"
    assert data["line"] == 42
    assert data["timestamp"].endswith("Z")
    assert "correlation_id" not in data
    assert "exception" not in data


def test_structured_formatter_extras() -> None:
    """Test that extra fields are output as separate keys."""
    data = json.loads(
        StructuredFormatter().format(_record(attempt=2, elapsed_time=0.5, failed=True))
    )
    assert data["attempt"] == 2
    assert data["elapsed_time"] == 0.5
    assert data["failed"] is True


def test_structured_formatter_non_serializable_extra() -> None:
    data = json.loads(StructuredFormatter().format(_record(error=ValueError("boom"))))
    assert data["error"] == "boom"


def test_structured_formatter_correlation_id() -> None:
    set_correlation_id("req-123")
    data = json.loads(StructuredFormatter().format(_record()))
    assert data["correlation_id"] == "req-123"


def test_structured_formatter_exception() -> None:
    try:
        msg = "boom"
        raise RuntimeError(msg)
    except RuntimeError:
        exc_info = sys.exc_info()
    data = json.loads(StructuredFormatter().format(_record(exc_info=exc_info)))
    assert "RuntimeError: boom" in data["exception"]


def test_log_structured(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("aretry.test")
    with caplog.at_level(logging.INFO, logger="aretry.test"):
        log_structured(logger, logging.INFO, "Retry succeeded", attempt=3)
    assert caplog.messages == ["Retry succeeded"]
    assert caplog.records[0].attempt == 3
