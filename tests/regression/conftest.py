"""
Regression test configuration.

Reference statistics for the Anscombe Quartet, as reported by R's lm()
to six or more significant digits.
"""

import pytest


ANSCOMBE_REFERENCE = {
    # name: (slope, intercept, r_squared, residual_std_error)
    "I": (0.5000909, 3.0000909, 0.6665425, 1.2366033),
    "II": (0.5000000, 3.0009091, 0.6662420, 1.2372141),
    "III": (0.4997273, 3.0024545, 0.6663240, 1.2363110),
    "IV": (0.4999091, 3.0017273, 0.6667073, 1.2356951),
}


@pytest.fixture
def anscombe_reference():
    return ANSCOMBE_REFERENCE
