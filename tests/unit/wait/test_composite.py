r"""Unit tests for SumWait, CappedWait and JitterWait."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from aretry import RetryAttempt
from aretry.wait import CappedWait, ExponentialWait, FixedWait, JitterWait, NoWait, SumWait

ATTEMPT = RetryAttempt(attempt=3)


##############################
#     Tests for SumWait      #
##############################


def test_sum_wait_adds_children() -> None:
    """Test that SumWait returns the sum of its children's delays."""
    wait = SumWait(FixedWait(1.0), FixedWait(0.5), ExponentialWait(base_delay=1.0))
    assert wait.wait_time(ATTEMPT) == 5.5  # 1.0 + 0.5 + 1.0 * 2^2


def test_sum_wait_no_children() -> None:
    """Test that SumWait without children returns zero."""
    assert SumWait().wait_time(ATTEMPT) == 0.0


def test_sum_wait_single_child() -> None:
    assert SumWait(FixedWait(2.0)).wait_time(ATTEMPT) == 2.0


def test_sum_wait_repr() -> None:
    assert repr(SumWait(NoWait(), FixedWait(1.0))) == "SumWait(NoWait(), FixedWait(delay=1.0))"


#################################
#     Tests for CappedWait      #
#################################


def test_capped_wait_below_cap() -> None:
    wait = CappedWait(FixedWait(2.0), max_wait=5.0)
    assert wait.wait_time(ATTEMPT) == 2.0


def test_capped_wait_above_cap(caplog: pytest.LogCaptureFixture) -> None:
    """Test that CappedWait caps the delay and logs it."""
    wait = CappedWait(FixedWait(8.0), max_wait=5.0)
    with caplog.at_level(logging.DEBUG, logger="aretry.wait.composite"):
        assert wait.wait_time(ATTEMPT) == 5.0
    assert "Capping wait time from 8.00s to 5.00s" in caplog.text


@pytest.mark.parametrize("max_wait", [0, -1.0])
def test_capped_wait_invalid_max_wait(max_wait: float) -> None:
    with pytest.raises(ValueError, match=r"max_wait must be > 0"):
        CappedWait(FixedWait(1.0), max_wait=max_wait)


#################################
#     Tests for JitterWait      #
#################################


def test_jitter_wait_adds_jitter() -> None:
    """Test that jitter is added to the wrapped delay."""
    wait = JitterWait(FixedWait(2.0), jitter_factor=0.5)
    with patch("aretry.wait.composite.random.uniform", return_value=0.25) as mock_uniform:
        assert wait.wait_time(ATTEMPT) == 2.5  # 2.0 + 0.25 * 2.0
    mock_uniform.assert_called_once_with(0, 0.5)


def test_jitter_wait_zero_factor() -> None:
    """Test that a zero jitter factor leaves the delay unchanged."""
    wait = JitterWait(FixedWait(2.0), jitter_factor=0.0)
    with patch("aretry.wait.composite.random.uniform") as mock_uniform:
        assert wait.wait_time(ATTEMPT) == 2.0
    mock_uniform.assert_not_called()


def test_jitter_wait_bounds() -> None:
    """Test that the jittered delay stays within its bounds."""
    wait = JitterWait(FixedWait(1.0), jitter_factor=0.1)
    for _ in range(50):
        assert 1.0 <= wait.wait_time(ATTEMPT) <= 1.1


def test_jitter_wait_default_factor() -> None:
    assert JitterWait(NoWait()).jitter_factor == 0.1


def test_jitter_wait_invalid_factor() -> None:
    with pytest.raises(ValueError, match=r"jitter_factor must be non-negative"):
        JitterWait(FixedWait(1.0), jitter_factor=-0.1)
