"""
CPU reference backend for simple linear regression.

Evaluates the closed-form least-squares formulas in double precision.
Every statistic comes from the same kernels the public functions in
anscombe.regression use, so the backend and the pure API cannot disagree.
"""

from typing import Any
import numpy as np

from anscombe.core.result import Result
from anscombe.core.compute.timing import Timer
from anscombe.core.compute.memory import tracked
from anscombe.regression._ols import (
    _fit,
    _r_squared,
    _residual_standard_error,
    _f_statistic,
)
from anscombe.regression.design import RegressionDesign
from anscombe.regression.solution import LinearParams


class CPUClosedFormBackend:
    """
    CPU backend using the closed-form normal equations for one predictor.

    Implements the Backend protocol for RegressionDesign -> LinearParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_closed_form'

    def solve(self, design: RegressionDesign) -> Result[LinearParams]:
        """
        Fit the line and compute its diagnostics.

        Algorithm:
            1. Slope and intercept from one pass of sums
            2. R² from total and residual sums of squares
            3. Residual standard error on n - 2 degrees of freedom
            4. F-statistic from R²

        The statistics are computed twice: once under the Timer with
        tracemalloc left as the caller had it, and once under the
        MemoryTracker with a throwaway Timer. Allocation tracing slows
        every allocation, so it never overlaps the timed pass.

        Args:
            design: Validated regression design

        Returns:
            Result containing LinearParams

        Raises:
            DegenerateInputError: If x or y is constant
        """
        timer = Timer()
        timer.start()
        try:
            params = self._compute(design, timer)
        finally:
            timer.stop()

        # Outputs are held until the tracker stops so they count as allocated
        with tracked() as tracker:
            retained = self._compute(design, Timer())
        del retained

        warnings: list[str] = []
        if np.isinf(params.f_statistic):
            warnings.append("perfect fit: residual variance is zero, F-statistic is infinite")

        info: dict[str, Any] = {
            'method': 'closed_form',
            'n': design.n,
        }
        info.update(tracker.result())

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings),
        )

    @staticmethod
    def _compute(design: RegressionDesign, timer: Timer) -> LinearParams:
        x = design.x
        y = design.y
        n = design.n

        with timer.section('fit'):
            slope, intercept = _fit(x, y)

        with timer.section('r_squared'):
            r2 = _r_squared(x, y, slope, intercept)

        with timer.section('residual_standard_error'):
            rse = _residual_standard_error(x, y, slope, intercept)

        with timer.section('f_statistic'):
            f = _f_statistic(r2, n)

        fitted_values = slope * x + intercept
        residuals = y - fitted_values
        centered = y - np.mean(y)

        return LinearParams(
            slope=slope,
            intercept=intercept,
            fitted_values=fitted_values,
            residuals=residuals,
            rss=float(residuals @ residuals),
            tss=float(centered @ centered),
            r_squared=r2,
            residual_std_error=rse,
            f_statistic=f,
            df_residual=n - 2,
        )
