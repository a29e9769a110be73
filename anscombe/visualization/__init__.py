"""Visualization for regression results."""

from .plots import (
    PlotStyle,
    DEFAULT_STYLE,
    plot_regression,
    regression_line,
)

__all__ = [
    'PlotStyle',
    'DEFAULT_STYLE',
    'plot_regression',
    'regression_line',
]
