"""
Tests for the shared statistical helpers
"""

import math

import pytest
from chatsignal.stats import (
    linear_regression_slope,
    mean,
    median,
    percentile,
    round_half_up,
    safe_divide,
    std_dev,
)


# ============================================================================
# ROUNDING
# ============================================================================

@pytest.mark.parametrize("value, expected", [
    (2.5, 3),
    (12.5, 13),
    (0.5, 1),
    (-2.5, -2),
    (2.4, 2),
    (7.0, 7),
])
def test_round_half_up(value, expected):
    """Halves go up, unlike the built-in banker's rounding."""
    result = round_half_up(value)
    assert result == expected
    assert isinstance(result, int)


def test_round_half_up_digits():
    """Rounding to decimal places keeps a float."""
    assert round_half_up(0.125, 2) == pytest.approx(0.13)
    assert round_half_up(0.25, 1) == pytest.approx(0.3)
    assert round_half_up(3.14159, 2) == pytest.approx(3.14)


# ============================================================================
# AGGREGATES
# ============================================================================

def test_empty_inputs():
    """Empty input gives 0 instead of NaN."""
    assert mean([]) == 0.0
    assert median([]) == 0.0
    assert percentile([], 90) == 0.0
    assert std_dev([]) == 0.0


def test_median_even_length():
    assert median([1, 2, 3, 4]) == 2.5


def test_percentile_interpolates():
    """p90 of 1..10 sits between the 9th and 10th value."""
    assert percentile(list(range(1, 11)), 90) == pytest.approx(9.1)


def test_safe_divide():
    assert safe_divide(6, 3) == 2.0
    assert safe_divide(1, 0) == 0.0
    assert safe_divide(1, 0, default=-1.0) == -1.0
    assert safe_divide(float("nan"), 2) == 0.0


def test_slope():
    """Slope against index; non-finite values are dropped."""
    assert linear_regression_slope([1, 3, 5, 7]) == pytest.approx(2.0)
    assert linear_regression_slope([1, math.inf, 3]) == pytest.approx(2.0)
    assert linear_regression_slope([5]) == 0.0
    assert linear_regression_slope([]) == 0.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
