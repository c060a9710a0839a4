r"""Parameter validation utilities for retry policies.

This module provides validation functions used by the policy
constructors and the builder to reject invalid configuration eagerly,
before any work unit is invoked.
"""

from __future__ import annotations

__all__ = ["validate_max_attempt", "validate_non_negative", "validate_positive"]


def validate_max_attempt(max_attempt: int) -> None:
    """Validate the maximum number of attempts.

    Args:
        max_attempt: Maximum number of attempts, including the first one.
            Must be >= 1 so the work unit is invoked at least once.

    Raises:
        TypeError: If max_attempt is not an int, or is a bool.
        ValueError: If max_attempt is lower than 1.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_max_attempt
        >>> validate_max_attempt(3)
        >>> validate_max_attempt(0)
        Traceback (most recent call last):
        ...
        ValueError: max_attempt must be >= 1, got 0

        ```
    """
    if isinstance(max_attempt, bool) or not isinstance(max_attempt, int):
        msg = f"max_attempt must be an int, got {max_attempt!r}"
        raise TypeError(msg)
    if max_attempt < 1:
        msg = f"max_attempt must be >= 1, got {max_attempt}"
        raise ValueError(msg)


def validate_non_negative(name: str, value: float) -> None:
    """Validate that a numeric parameter is >= 0.

    Args:
        name: The parameter name, used in the error message.
        value: The value to validate.

    Raises:
        ValueError: If value is negative.
    """
    if value < 0:
        msg = f"{name} must be non-negative, got {value}"
        raise ValueError(msg)


def validate_positive(name: str, value: float) -> None:
    """Validate that a numeric parameter is > 0.

    Args:
        name: The parameter name, used in the error message.
        value: The value to validate.

    Raises:
        ValueError: If value is zero or negative.
    """
    if value <= 0:
        msg = f"{name} must be > 0, got {value}"
        raise ValueError(msg)
