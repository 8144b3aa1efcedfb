"""
Statistical helpers for ChatSignal v1
Shared by the response-time, sentiment and trend modules
"""

import logging
import math
from typing import Iterable, Sequence

import numpy as np

logger = logging.getLogger(__name__)


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================

def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Safe division with default fallback."""
    if denominator == 0 or np.isnan(denominator) or np.isnan(numerator):
        return default
    return numerator / denominator


def round_half_up(value: float, digits: int = 0):
    """Halves round up (2.5 -> 3, -2.5 -> -2), unlike built-in round(). Int when digits is 0."""
    factor = 10 ** digits
    rounded = math.floor(value * factor + 0.5)
    if digits == 0:
        return int(rounded)
    return rounded / factor


def mean(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(values))


def median(values: Sequence[float]) -> float:
    """Median; even-length input averages the two middle values. 0 for empty input."""
    if len(values) == 0:
        return 0.0
    return float(np.median(values))


def percentile(values: Sequence[float], p: float) -> float:
    """Percentile with linear interpolation between closest ranks (idx = p/100 * (n-1))."""
    if len(values) == 0:
        return 0.0
    return float(np.percentile(np.asarray(values, dtype=float), p))


def std_dev(values: Sequence[float]) -> float:
    """Population standard deviation."""
    if len(values) == 0:
        return 0.0
    return float(np.std(values))


def linear_regression_slope(values: Iterable[float]) -> float:
    """
    Least-squares slope of values against their index.

    Non-finite values are dropped first. Returns 0 with fewer than two
    points or a degenerate denominator.
    """
    ys = np.asarray([v for v in values if v is not None], dtype=float)
    ys = ys[np.isfinite(ys)]
    n = len(ys)
    if n < 2:
        return 0.0

    xs = np.arange(n, dtype=float)
    denominator = n * float(np.sum(xs * xs)) - float(np.sum(xs)) ** 2
    if denominator == 0:
        return 0.0
    numerator = n * float(np.sum(xs * ys)) - float(np.sum(xs)) * float(np.sum(ys))
    return numerator / denominator
