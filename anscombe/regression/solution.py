"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats as sp_stats

from anscombe.core.result import Result
from anscombe.core.validation import check_array

if TYPE_CHECKING:
    from anscombe.regression.design import RegressionDesign


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for simple linear regression.

    This is the immutable data computed by backends.
    """
    slope: float
    intercept: float
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    rss: float
    tss: float
    r_squared: float
    residual_std_error: float
    f_statistic: float
    df_residual: int


@dataclass
class LinearSolution:
    """
    User-facing regression results.

    Wraps the backend Result and provides accessors for the fitted line,
    its diagnostics, and the timing/memory measured while computing them.
    """
    _result: Result[LinearParams]
    _design: 'RegressionDesign'

    # Cached computations
    _f_p_value: float | None = None

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        """Total sum of squares of y about its mean."""
        return self._result.params.tss

    @property
    def r_squared(self) -> float:
        return self._result.params.r_squared

    @property
    def residual_std_error(self) -> float:
        return self._result.params.residual_std_error

    @property
    def f_statistic(self) -> float:
        return self._result.params.f_statistic

    @property
    def f_p_value(self) -> float:
        """
        p-value of the overall F-test on (1, n - 2) degrees of freedom.

        A perfect fit (F = +inf) has p-value 0.
        """
        if self._f_p_value is None:
            f = self.f_statistic
            if np.isinf(f):
                self._f_p_value = 0.0
            else:
                self._f_p_value = float(sp_stats.f.sf(f, 1, self.df_residual))
        return self._f_p_value

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def elapsed_ms(self) -> float:
        """Total backend wall-clock time in milliseconds."""
        if not self.timing:
            return 0.0
        return self.timing.get('total_seconds', 0.0) * 1000.0

    @property
    def memory_bytes(self) -> int:
        """Bytes allocated while the backend computed the statistics."""
        return int(self._result.info.get('memory_bytes', 0))

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Evaluate the fitted line at x."""
        x_arr = check_array(x, 'x')
        return self.slope * x_arr + self.intercept

    def summary(self) -> str:
        """Generate R-style summary output."""
        lines = [
            "Simple Linear Regression Results",
            "=" * 60,
            f"Observations: {self.n}",
            "",
            f"{'':<12} {'Estimate':>14}",
            "-" * 60,
            f"{'(Intercept)':<12} {self.intercept:14.6f}",
            f"{'x':<12} {self.slope:14.6f}",
            "-" * 60,
            f"Residual Std. Error: {self.residual_std_error:.6f} on {self.df_residual} DF",
            f"R-squared: {self.r_squared:.6f}",
            f"F-statistic: {self.f_statistic:.4f} on 1 and {self.df_residual} DF, "
            f"p-value: {self.f_p_value:.4g}",
        ]

        for w in self.warnings:
            lines.append(f"Warning: {w}")

        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSolution(n={self.n}, slope={self.slope:.4f}, "
            f"intercept={self.intercept:.4f}, r_squared={self.r_squared:.4f})"
        )
