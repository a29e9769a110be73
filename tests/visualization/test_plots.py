"""
Tests for regression plots.
"""

import matplotlib.image as mpimg
import matplotlib.pyplot as plt
import numpy as np
import pytest

from anscombe.core.exceptions import RenderError
from anscombe.datasets import Dataset, get_dataset
from anscombe.visualization import DEFAULT_STYLE, PlotStyle, plot_regression, regression_line
from anscombe.visualization import plots


class TestRegressionLine:

    def test_clipped_to_x_range(self):
        x_ends, y_ends = regression_line([4.0, 10.0, 14.0, 6.0], 0.5, 3.0)
        np.testing.assert_array_equal(x_ends, [4.0, 14.0])
        np.testing.assert_allclose(y_ends, [5.0, 10.0])

    def test_dataset_iv(self):
        x_ends, _ = regression_line(get_dataset("IV").x, 0.5, 3.0)
        np.testing.assert_array_equal(x_ends, [8.0, 19.0])


class TestPlotRegression:

    def test_writes_named_png(self, tmp_path):
        path = plot_regression(get_dataset("I"), 0.5, 3.0, output_dir=tmp_path)
        assert path == tmp_path / "anscombe_I.png"
        assert path.exists()
        assert path.stat().st_size > 0

    def test_five_inch_canvas(self, tmp_path):
        path = plot_regression(get_dataset("II"), 0.5, 3.0, output_dir=tmp_path)
        image = mpimg.imread(path)
        side = int(DEFAULT_STYLE.figsize[0] * DEFAULT_STYLE.dpi)
        assert image.shape[:2] == (side, side)

    def test_custom_style(self, tmp_path):
        style = PlotStyle(figsize=(2.0, 3.0), dpi=50, filename_pattern="fit_{name}.png")
        path = plot_regression(get_dataset("III"), 0.5, 3.0, output_dir=tmp_path, style=style)
        assert path.name == "fit_III.png"
        assert mpimg.imread(path).shape[:2] == (150, 100)

    def test_figure_contents(self, tmp_path, monkeypatch):
        closed = []
        real_close = plt.close
        monkeypatch.setattr(plots.plt, "close", closed.append)

        plot_regression(get_dataset("IV"), 0.5, 3.0, output_dir=tmp_path)

        fig = closed[0]
        try:
            ax = fig.axes[0]
            assert ax.get_title() == "Anscombe Dataset IV"
            assert ax.get_xlabel() == "X"
            assert ax.get_ylabel() == "Y"
            labels = {t.get_text() for t in ax.get_legend().get_texts()}
            assert labels == {"Data Points", "Regression Line"}
            line = ax.get_lines()[0]
            np.testing.assert_array_equal(line.get_xdata(), [8.0, 19.0])
            np.testing.assert_allclose(line.get_ydata(), [7.0, 12.5])
        finally:
            real_close(fig)

    def test_figure_closed(self, tmp_path):
        before = len(plt.get_fignums())
        plot_regression(get_dataset("I"), 0.5, 3.0, output_dir=tmp_path)
        assert len(plt.get_fignums()) == before


class TestRenderErrors:

    def test_missing_directory(self, tmp_path):
        target = tmp_path / "does_not_exist"
        with pytest.raises(RenderError) as excinfo:
            plot_regression(get_dataset("I"), 0.5, 3.0, output_dir=target)
        err = excinfo.value
        assert err.dataset == "I"
        assert err.path == str(target / "anscombe_I.png")
        assert isinstance(err.__cause__, OSError)

    def test_figure_closed_on_failure(self, tmp_path):
        before = len(plt.get_fignums())
        with pytest.raises(RenderError):
            plot_regression(get_dataset("I"), 0.5, 3.0, output_dir=tmp_path / "missing")
        assert len(plt.get_fignums()) == before

    def test_savefig_failure_wrapped(self, tmp_path, monkeypatch):
        def broken_savefig(self, *args, **kwargs):
            raise RuntimeError("renderer exploded")

        monkeypatch.setattr(plots.plt.Figure, "savefig", broken_savefig)
        ds = Dataset.from_values("tiny", [1, 2, 3], [1, 2, 4])
        with pytest.raises(RenderError, match="renderer exploded"):
            plot_regression(ds, 1.5, -0.67, output_dir=tmp_path)

    def test_negative_figsize(self, tmp_path):
        before = len(plt.get_fignums())
        style = PlotStyle(figsize=(-1.0, 5.0))
        with pytest.raises(RenderError) as excinfo:
            plot_regression(get_dataset("I"), 0.5, 3.0, output_dir=tmp_path, style=style)
        assert excinfo.value.dataset == "I"
        assert isinstance(excinfo.value.__cause__, ValueError)
        assert len(plt.get_fignums()) == before
        assert not (tmp_path / "anscombe_I.png").exists()

    def test_unknown_filename_field(self, tmp_path):
        style = PlotStyle(filename_pattern="anscombe_{dataset}.png")
        with pytest.raises(RenderError, match="bad filename pattern") as excinfo:
            plot_regression(get_dataset("II"), 0.5, 3.0, output_dir=tmp_path, style=style)
        assert excinfo.value.dataset == "II"
        assert excinfo.value.path is None
        assert isinstance(excinfo.value.__cause__, KeyError)
