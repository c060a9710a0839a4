r"""Wait policies computing the delay between two attempts.

This package provides constant, exponential, linear and Fibonacci
backoff, the composites to sum, cap and jitter wait policies, and a
Retry-After aware wait policy for HTTP work units.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffWait",
    "BaseRetryWait",
    "CappedWait",
    "ExponentialWait",
    "FibonacciWait",
    "FixedWait",
    "JitterWait",
    "LinearWait",
    "NoWait",
    "RetryAfterWait",
    "SumWait",
]

from aretry.wait.base import BaseBackoffWait, BaseRetryWait
from aretry.wait.composite import CappedWait, JitterWait, SumWait
from aretry.wait.constant import FixedWait, NoWait
from aretry.wait.exponential import ExponentialWait
from aretry.wait.fibonacci import FibonacciWait
from aretry.wait.linear import LinearWait
from aretry.wait.retry_after import RetryAfterWait
