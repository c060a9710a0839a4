r"""Listeners observing every attempt of a retry sequence."""

from __future__ import annotations

__all__ = [
    "BaseRetryListener",
    "CallbackListener",
    "CompositeListener",
    "LoggingListener",
    "NoListener",
]

from aretry.listener.base import BaseRetryListener
from aretry.listener.builtin import (
    CallbackListener,
    CompositeListener,
    LoggingListener,
    NoListener,
)
