"""
Solver dispatch for regression.

This module provides the analyze() function (public API) and backend selection.
"""

from typing import Literal
from numpy.typing import ArrayLike

from anscombe.core.protocols import Backend
from anscombe.regression.design import RegressionDesign
from anscombe.regression.solution import LinearSolution, LinearParams
from anscombe.regression.backends.cpu import CPUClosedFormBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu']


def analyze(
    x: ArrayLike,
    y: ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> LinearSolution:
    """
    Fit a simple linear regression and compute all of its diagnostics.

    Solves the ordinary least squares problem:
        min_(a, b) Σ (y_i - a*x_i - b)²

    All input validation, backend selection, and result wrapping happens here.

    Args:
        x: Predictor values (n,). Can be any array-like.
        y: Response values (n,). Can be any array-like.
        backend: Computational backend to use:
            - 'auto': Best available (currently always the CPU backend)
            - 'cpu': Closed-form CPU backend

    Returns:
        LinearSolution with slope, intercept, R², residual standard error,
        F-statistic, timing, memory usage and summary()

    Raises:
        ValidationError: If inputs are invalid
        ShapeMismatchError: If x and y have different lengths
        InsufficientSampleSizeError: If n < 3
        DegenerateInputError: If x or y is constant

    Example:
        >>> from anscombe.regression import analyze
        >>> result = analyze([10, 8, 13, 9, 11], [8.04, 6.95, 7.58, 8.81, 8.33])
        >>> print(result.summary())
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    design = RegressionDesign.build(x, y)

    # === Select Backend ===
    backend_impl = _get_backend(backend)

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return LinearSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice) -> Backend[RegressionDesign, LinearParams]:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu'):
        return CPUClosedFormBackend()

    raise ValueError(f"Unknown backend: {choice!r}")
