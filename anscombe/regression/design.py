"""
Regression Design.

Design holds the validated paired sample (x, y) that a backend solves.
Validation happens once here, at the boundary; backends trust the design.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from anscombe.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_consistent_length,
    check_min_samples,
)
from anscombe.regression._ols import MIN_SAMPLES_RSE


@dataclass(frozen=True)
class RegressionDesign:
    """
    Simple regression design: one predictor, one response.

    Immutable after construction. Build with RegressionDesign.build(x, y).
    Requires at least MIN_SAMPLES_RSE observations so every diagnostic
    (including the residual standard error) is defined.
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def build(cls, x: ArrayLike, y: ArrayLike) -> RegressionDesign:
        """
        Validate and build a design.

        Raises:
            ValidationError: If inputs are non-numeric or non-finite
            DimensionError: If inputs are not 1D
            ShapeMismatchError: If len(x) != len(y)
            InsufficientSampleSizeError: If n < 3
        """
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')

        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        check_min_samples(x_arr, MIN_SAMPLES_RSE, 'x')
        check_finite(x_arr, 'x')
        check_finite(y_arr, 'y')

        # Callers must not be able to mutate the design through their arrays
        x_arr = x_arr.copy()
        y_arr = y_arr.copy()
        x_arr.flags.writeable = False
        y_arr.flags.writeable = False

        return cls(_x=x_arr, _y=y_arr, _n=int(x_arr.shape[0]))

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor values (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response values (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n
