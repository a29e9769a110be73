"""
anscombe: regression diagnostics for the Anscombe Quartet.

Computes ordinary least-squares fits and their diagnostics (R², residual
standard error, F-statistic) for the four Anscombe datasets and plots
each dataset with its regression line.

Submodules:
    regression: Closed-form simple linear regression
    datasets: The four Anscombe datasets
    visualization: Scatter plots with regression lines
    pipeline: Per-dataset batch analysis
    report: Console report
"""

__version__ = "0.1.0"

from anscombe import regression
from anscombe import datasets

__all__ = [
    "__version__",
    "regression",
    "datasets",
]
