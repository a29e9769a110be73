"""
Batch analysis of datasets.

Every dataset is analyzed and plotted independently. A failure in one
dataset, whether in the regression engine or while rendering its figure,
is recorded on that dataset's outcome and never stops the batch.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable
import warnings

from anscombe.core.exceptions import AnscombeError, RenderError
from anscombe.datasets import Dataset, load_quartet
from anscombe.regression import analyze, LinearSolution
from anscombe.visualization.plots import PlotStyle, plot_regression


@dataclass(frozen=True)
class DatasetOutcome:
    """
    Result of analyzing one dataset.

    Exactly one of solution / error is set. plot_path and render_error are
    both None when rendering was skipped.
    """
    name: str
    solution: LinearSolution | None = None
    error: AnscombeError | None = None
    plot_path: Path | None = None
    render_error: RenderError | None = None

    @property
    def ok(self) -> bool:
        """True if the statistics were computed."""
        return self.solution is not None


def analyze_dataset(
    dataset: Dataset,
    *,
    output_dir: str | Path = '.',
    render: bool = True,
    style: PlotStyle | None = None,
) -> DatasetOutcome:
    """
    Compute the regression statistics for one dataset and plot them.

    Args:
        dataset: The dataset to analyze
        output_dir: Directory for the figure
        render: If False, skip the figure
        style: Figure configuration (default: DEFAULT_STYLE)

    Returns:
        DatasetOutcome. Engine errors leave solution None and skip the plot;
        render errors keep the solution and are also emitted as warnings.
    """
    try:
        solution = analyze(dataset.x, dataset.y)
    except AnscombeError as e:
        return DatasetOutcome(name=dataset.name, error=e)

    if not render:
        return DatasetOutcome(name=dataset.name, solution=solution)

    try:
        path = plot_regression(
            dataset, solution.slope, solution.intercept,
            output_dir=output_dir, style=style,
        )
    except RenderError as e:
        warnings.warn(f"dataset {dataset.name}: {e}", RuntimeWarning, stacklevel=2)
        return DatasetOutcome(name=dataset.name, solution=solution, render_error=e)

    return DatasetOutcome(name=dataset.name, solution=solution, plot_path=path)


def run_quartet(
    datasets: Iterable[Dataset] | None = None,
    *,
    output_dir: str | Path = '.',
    render: bool = True,
    style: PlotStyle | None = None,
) -> list[DatasetOutcome]:
    """
    Analyze each dataset in order, isolating failures per dataset.

    Args:
        datasets: Datasets to analyze (default: the Anscombe Quartet)
        output_dir: Directory for figures, created if missing
        render: If False, skip all figures
        style: Figure configuration (default: DEFAULT_STYLE)

    Returns:
        One DatasetOutcome per dataset, in input order
    """
    if datasets is None:
        datasets = load_quartet()

    if render:
        Path(output_dir).mkdir(parents=True, exist_ok=True)

    return [
        analyze_dataset(ds, output_dir=output_dir, render=render, style=style)
        for ds in datasets
    ]
