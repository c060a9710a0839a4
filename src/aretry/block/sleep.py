r"""Sleep based block policies."""

from __future__ import annotations

__all__ = ["AsyncNoBlock", "AsyncSleepBlock", "NoBlock", "SleepBlock"]

import asyncio
import time

from aretry.block.base import BaseAsyncRetryBlock, BaseRetryBlock


class SleepBlock(BaseRetryBlock):
    """Block policy that sleeps with ``time.sleep``.

    This is the default block policy of ``Retryer``.
    """

    def block(self, wait_time: float) -> None:
        time.sleep(wait_time)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"


class NoBlock(BaseRetryBlock):
    """Block policy that returns immediately, whatever the wait time."""

    def block(self, wait_time: float) -> None:
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"


class AsyncSleepBlock(BaseAsyncRetryBlock):
    """Block policy that suspends with ``asyncio.sleep``.

    This is the default block policy of ``AsyncRetryer``. Other tasks
    keep running on the event loop while the retry sequence waits.
    """

    async def block(self, wait_time: float) -> None:
        await asyncio.sleep(wait_time)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"


class AsyncNoBlock(BaseAsyncRetryBlock):
    """Asynchronous block policy that returns immediately."""

    async def block(self, wait_time: float) -> None:
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"
