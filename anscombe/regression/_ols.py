"""
Closed-form simple linear regression.

Each public function validates its own inputs and is a pure function of
them. The underscore-prefixed kernels assume already-validated float64
arrays; the CPU backend calls those directly after validating once in
RegressionDesign.
"""

from __future__ import annotations

from typing import Any, NamedTuple
import numpy as np
from numpy.typing import ArrayLike, NDArray

from anscombe.core.exceptions import DegenerateInputError, InsufficientSampleSizeError
from anscombe.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_consistent_length,
    check_min_samples,
    check_not_constant,
)

MIN_SAMPLES_FIT = 2
MIN_SAMPLES_RSE = 3


class LineFit(NamedTuple):
    """Least-squares line y = slope * x + intercept."""
    slope: float
    intercept: float


def _as_sample_pair(
    x: ArrayLike,
    y: ArrayLike,
    min_samples: int,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Convert and validate a paired sample; lengths are checked first."""
    x_arr = check_array(x, 'x')
    y_arr = check_array(y, 'y')
    check_1d(x_arr, 'x')
    check_1d(y_arr, 'y')
    check_consistent_length(x_arr, y_arr, names=('x', 'y'))
    check_min_samples(x_arr, min_samples, 'x')
    check_finite(x_arr, 'x')
    check_finite(y_arr, 'y')
    return x_arr, y_arr


# === Kernels (validated float64 input) ===

def _fit(x: NDArray[np.floating[Any]], y: NDArray[np.floating[Any]]) -> LineFit:
    check_not_constant(x, 'x')

    n = float(x.shape[0])
    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(x @ y)
    sum_x2 = float(x @ x)

    x_mean = sum_x / n
    y_mean = sum_y / n

    numerator = sum_xy - n * x_mean * y_mean
    denominator = sum_x2 - n * x_mean * x_mean

    # Cancellation can leave a non-positive denominator for nearly constant x
    if not denominator > 0.0:
        raise DegenerateInputError(
            f"x: variance term {denominator!r} is not positive; slope is undefined",
            variable='x',
        )

    slope = numerator / denominator
    if not np.isfinite(slope):
        raise DegenerateInputError(
            f"x: slope evaluated to {slope!r}", variable='x'
        )
    intercept = y_mean - slope * x_mean
    return LineFit(slope=slope, intercept=intercept)


def _residuals(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    slope: float,
    intercept: float,
) -> NDArray[np.floating[Any]]:
    return y - (slope * x + intercept)


def _r_squared(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    slope: float,
    intercept: float,
) -> float:
    check_not_constant(y, 'y')
    residuals = _residuals(x, y, slope, intercept)
    centered = y - np.mean(y)
    ss_tot = float(centered @ centered)
    ss_res = float(residuals @ residuals)
    if ss_tot == 0.0:
        raise DegenerateInputError("y: total sum of squares is zero", variable='y')
    return 1.0 - ss_res / ss_tot


def _residual_standard_error(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    slope: float,
    intercept: float,
) -> float:
    residuals = _residuals(x, y, slope, intercept)
    ss_res = float(residuals @ residuals)
    return float(np.sqrt(ss_res / (x.shape[0] - 2)))


def _f_statistic(r2: float, n: int) -> float:
    if r2 == 1.0:
        return float('inf')
    return (r2 / (1.0 - r2)) * (n - 2)


# === Public API ===

def fit(x: ArrayLike, y: ArrayLike) -> LineFit:
    """
    Least-squares slope and intercept of y on x.

    Uses the one-pass sums sumX, sumY, sumXY, sumX2:
        slope = (sumXY - n*xMean*yMean) / (sumX2 - n*xMean²)
        intercept = yMean - slope*xMean

    Args:
        x: Predictor values, n >= 2
        y: Response values, same length as x

    Returns:
        LineFit(slope, intercept); unpacks as a plain pair

    Raises:
        ShapeMismatchError: If len(x) != len(y)
        InsufficientSampleSizeError: If n < 2
        DegenerateInputError: If all x values are identical

    Example:
        >>> fit([1, 2, 3, 4, 5], [3, 5, 7, 9, 11])
        LineFit(slope=2.0, intercept=1.0)
    """
    x_arr, y_arr = _as_sample_pair(x, y, MIN_SAMPLES_FIT)
    return _fit(x_arr, y_arr)


def r_squared(x: ArrayLike, y: ArrayLike, slope: float, intercept: float) -> float:
    """
    Coefficient of determination, 1 - SSres/SStot.

    Can be negative for a line that is not the least-squares fit.

    Raises:
        ShapeMismatchError: If len(x) != len(y)
        InsufficientSampleSizeError: If n < 1
        DegenerateInputError: If all y values are identical (SStot = 0)
    """
    x_arr, y_arr = _as_sample_pair(x, y, 1)
    return _r_squared(x_arr, y_arr, float(slope), float(intercept))


def residual_standard_error(
    x: ArrayLike,
    y: ArrayLike,
    slope: float,
    intercept: float,
) -> float:
    """
    Residual standard error, sqrt(SSres / (n - 2)).

    Raises:
        ShapeMismatchError: If len(x) != len(y)
        InsufficientSampleSizeError: If n <= 2
    """
    x_arr, y_arr = _as_sample_pair(x, y, MIN_SAMPLES_RSE)
    return _residual_standard_error(x_arr, y_arr, float(slope), float(intercept))


def f_statistic(r2: float, n: int) -> float:
    """
    F-statistic of the regression on 1 and n - 2 degrees of freedom.

    Returns +inf when r2 is exactly 1.0 (zero residual variance).

    Raises:
        InsufficientSampleSizeError: If n <= 2
    """
    if n < MIN_SAMPLES_RSE:
        raise InsufficientSampleSizeError(
            f"n: requires at least {MIN_SAMPLES_RSE} samples, got {n}",
            n_samples=n,
            min_samples=MIN_SAMPLES_RSE,
        )
    return _f_statistic(float(r2), int(n))
