"""Regression plots.

One figure per dataset: the raw points as a scatter and the fitted line
drawn across the observed x range, saved as a PNG.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt

from anscombe.core.exceptions import RenderError
from anscombe.datasets import Dataset


@dataclass(frozen=True)
class PlotStyle:
    """Figure configuration for regression plots."""
    figsize: tuple[float, float] = (5.0, 5.0)
    dpi: int = 100
    marker_radius: float = 3.0
    line_width: float = 1.0
    filename_pattern: str = "anscombe_{name}.png"

    def filename(self, dataset_name: str) -> str:
        return self.filename_pattern.format(name=dataset_name)


# 5 x 5 inch canvas, 3 pt markers, 1 pt line
DEFAULT_STYLE = PlotStyle()


def regression_line(x, slope, intercept):
    """
    Endpoints of the fitted line clipped to [min(x), max(x)].

    Returns
    -------
    tuple of ndarray
        (x_endpoints, y_endpoints), each of length 2
    """
    x = np.asarray(x, dtype=np.float64)
    x_ends = np.array([x.min(), x.max()])
    return x_ends, slope * x_ends + intercept


def plot_regression(dataset: Dataset, slope: float, intercept: float, *,
                    output_dir='.', style: PlotStyle | None = None) -> Path:
    """
    Save a scatter plot of the dataset with its regression line.

    Parameters
    ----------
    dataset : Dataset
        Points to plot; the name sets the title and file name
    slope, intercept : float
        Fitted line y = slope * x + intercept
    output_dir : str or Path
        Existing directory to write into (default: current directory)
    style : PlotStyle, optional
        Figure configuration (default: DEFAULT_STYLE)

    Returns
    -------
    Path
        Path of the written PNG, e.g. output_dir/anscombe_I.png

    Raises
    ------
    RenderError
        If the style is invalid or the figure cannot be drawn or written
    """
    style = style or DEFAULT_STYLE
    try:
        path = Path(output_dir) / style.filename(dataset.name)
    except (KeyError, IndexError, ValueError) as e:
        raise RenderError(
            f"bad filename pattern {style.filename_pattern!r} for dataset "
            f"{dataset.name!r}: {e!r}",
            dataset=dataset.name,
        ) from e

    fig = None
    try:
        fig, ax = plt.subplots(figsize=style.figsize)

        # Scatter sizes are areas in pt²
        ax.scatter(dataset.x, dataset.y, s=(2 * style.marker_radius) ** 2,
                   label='Data Points', zorder=3)

        line_x, line_y = regression_line(dataset.x, slope, intercept)
        ax.plot(line_x, line_y, color='red', linewidth=style.line_width,
                label='Regression Line')

        ax.set_title(f'Anscombe Dataset {dataset.name}')
        ax.set_xlabel('X')
        ax.set_ylabel('Y')
        ax.legend()

        fig.savefig(path, dpi=style.dpi)
    except (OSError, ValueError, TypeError, RuntimeError) as e:
        raise RenderError(
            f"failed to render plot for dataset {dataset.name!r} to {path}: {e}",
            dataset=dataset.name,
            path=str(path),
        ) from e
    finally:
        if fig is not None:
            plt.close(fig)

    return path
