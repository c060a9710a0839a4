r"""Utility functions shared by the retry policies.

This package provides Retry-After header parsing, parameter validation
and structured logging helpers.
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_structured",
    "parse_retry_after",
    "set_correlation_id",
    "validate_max_attempt",
    "validate_non_negative",
    "validate_positive",
]

from aretry.utils.retry_after import parse_retry_after
from aretry.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)
from aretry.utils.validation import (
    validate_max_attempt,
    validate_non_negative,
    validate_positive,
)
