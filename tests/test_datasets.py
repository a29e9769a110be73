"""
Tests for the Anscombe datasets.
"""

import numpy as np
import pytest

from anscombe.core.exceptions import ShapeMismatchError
from anscombe.datasets import Dataset, QUARTET, get_dataset, load_quartet


class TestQuartet:

    def test_order_and_names(self):
        assert [ds.name for ds in load_quartet()] == ["I", "II", "III", "IV"]

    def test_eleven_points_each(self):
        for ds in QUARTET:
            assert ds.n == 11
            assert ds.x.shape == ds.y.shape == (11,)
            assert ds.x.dtype == np.float64

    def test_first_three_share_x(self):
        np.testing.assert_array_equal(QUARTET[0].x, QUARTET[1].x)
        np.testing.assert_array_equal(QUARTET[0].x, QUARTET[2].x)

    def test_dataset_iv_x(self):
        x = get_dataset("IV").x
        assert np.count_nonzero(x == 8.0) == 10
        assert x[7] == 19.0

    def test_known_values(self):
        assert get_dataset("I").y[8] == 10.84
        assert get_dataset("III").y[2] == 12.74

    def test_arrays_read_only(self):
        with pytest.raises(ValueError):
            QUARTET[0].y[0] = 0.0


class TestGetDataset:

    def test_lookup(self):
        assert get_dataset("II") is QUARTET[1]

    def test_unknown_name(self):
        with pytest.raises(KeyError, match="'V'.*'I', 'II', 'III', 'IV'"):
            get_dataset("V")


class TestDatasetFromValues:

    def test_builds_float_arrays(self):
        ds = Dataset.from_values("small", [1, 2, 3], [2, 4, 6])
        assert ds.name == "small"
        assert ds.x.dtype == np.float64
        assert ds.n == 3

    def test_copies_input(self):
        x = np.array([1.0, 2.0, 3.0])
        ds = Dataset.from_values("copy", x, [1, 2, 3])
        x[0] = 99.0
        assert ds.x[0] == 1.0

    def test_length_mismatch_rejected(self):
        with pytest.raises(ShapeMismatchError):
            Dataset.from_values("bad", [1, 2, 3], [1, 2, 3, 4])
