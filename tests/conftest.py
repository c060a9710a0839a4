from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from aretry.block import BaseAsyncRetryBlock, BaseRetryBlock

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_block() -> Mock:
    """Create a mock block policy recording the wait times."""
    return Mock(spec=BaseRetryBlock)


@pytest.fixture
def mock_async_block() -> Mock:
    """Create a mock async block policy recording the wait times.

    ``block`` is an AsyncMock since ``BaseAsyncRetryBlock.block`` is a coroutine.
    """
    return Mock(spec=BaseAsyncRetryBlock)
