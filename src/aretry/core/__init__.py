r"""Configuration defaults for retry sequences."""

from __future__ import annotations

__all__ = [
    "DEFAULT_ASYNC_BLOCK",
    "DEFAULT_BLOCK",
    "DEFAULT_CONDITION",
    "DEFAULT_LISTENER",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_RECOVER",
    "DEFAULT_STOP",
    "DEFAULT_WAIT",
    "RetryConfig",
]

from aretry.core.config import (
    DEFAULT_ASYNC_BLOCK,
    DEFAULT_BLOCK,
    DEFAULT_CONDITION,
    DEFAULT_LISTENER,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_RECOVER,
    DEFAULT_STOP,
    DEFAULT_WAIT,
    RetryConfig,
)
