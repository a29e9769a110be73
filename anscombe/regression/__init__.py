"""
Simple linear regression.

Ordinary least squares of one response on one predictor, plus the
diagnostics reported for every Anscombe dataset.

Public API:
    fit(x, y) -> LineFit(slope, intercept)
    r_squared(x, y, slope, intercept) -> float
    residual_standard_error(x, y, slope, intercept) -> float
    f_statistic(r2, n) -> float
    analyze(x, y, ...) -> LinearSolution

The four statistic functions are pure and validate their own inputs.
analyze() validates once, runs a backend, and wraps everything with
timing and memory diagnostics.

Example:
    >>> from anscombe.regression import fit, analyze
    >>> slope, intercept = fit([1, 2, 3, 4, 5], [3, 5, 7, 9, 11])
    >>> result = analyze(x, y)
    >>> print(result.summary())
"""

from anscombe.regression._ols import (
    LineFit,
    fit,
    r_squared,
    residual_standard_error,
    f_statistic,
)
from anscombe.regression.design import RegressionDesign
from anscombe.regression.solution import LinearSolution, LinearParams
from anscombe.regression.solvers import analyze

__all__ = [
    "fit",
    "r_squared",
    "residual_standard_error",
    "f_statistic",
    "analyze",
    "LineFit",
    "RegressionDesign",
    "LinearSolution",
    "LinearParams",
]
