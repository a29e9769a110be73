"""
pytest configuration and shared fixtures.
"""

import matplotlib
matplotlib.use('Agg')

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def exact_line_data():
    """Points exactly on y = 2x + 1; every sum is exact in float64."""
    x = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
    y = 2.0 * x + 1.0
    return x, y, 2.0, 1.0


@pytest.fixture
def noisy_line_data(rng):
    """y = 3x + 7 plus Gaussian noise."""
    n = 200
    x = rng.uniform(0.0, 10.0, n)
    y = 3.0 * x + 7.0 + rng.standard_normal(n) * 0.5
    return x, y
