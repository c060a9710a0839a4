r"""Retry conditions deciding whether an attempt warrants another
attempt."""

from __future__ import annotations

__all__ = [
    "RETRY_STATUS_CODES",
    "AllCondition",
    "AlwaysFalseCondition",
    "AlwaysTrueCondition",
    "AnyCondition",
    "BaseRetryCondition",
    "ExceptionCondition",
    "HttpStatusCondition",
    "PredicateCondition",
    "ResultCondition",
]

from aretry.condition.base import BaseRetryCondition
from aretry.condition.builtin import (
    AllCondition,
    AlwaysFalseCondition,
    AlwaysTrueCondition,
    AnyCondition,
    ExceptionCondition,
    PredicateCondition,
    ResultCondition,
)
from aretry.condition.http import RETRY_STATUS_CODES, HttpStatusCondition
