r"""Block policies pausing execution between two attempts."""

from __future__ import annotations

__all__ = [
    "AsyncNoBlock",
    "AsyncSleepBlock",
    "BaseAsyncRetryBlock",
    "BaseRetryBlock",
    "NoBlock",
    "SleepBlock",
]

from aretry.block.base import BaseAsyncRetryBlock, BaseRetryBlock
from aretry.block.sleep import AsyncNoBlock, AsyncSleepBlock, NoBlock, SleepBlock
