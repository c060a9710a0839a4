r"""Recover policies producing a fallback when a retry sequence ends on
a failure."""

from __future__ import annotations

__all__ = ["BaseRecover", "CallableRecover", "NoRecover", "RaiseRetryErrorRecover", "ValueRecover"]

from aretry.recover.base import BaseRecover
from aretry.recover.builtin import (
    CallableRecover,
    NoRecover,
    RaiseRetryErrorRecover,
    ValueRecover,
)
