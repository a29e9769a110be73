"""
The Anscombe Quartet.

Four datasets with near-identical regression statistics (slope ≈ 0.5,
intercept ≈ 3, R² ≈ 0.67) but visually very different scatter plots.
EXACT values from Anscombe (1973), "Graphs in Statistical Analysis".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from anscombe.core.validation import check_array, check_1d, check_consistent_length


@dataclass(frozen=True)
class Dataset:
    """
    A named paired sample.

    Arrays are float64 and read-only. Use Dataset.from_values() to build
    one from plain sequences.
    """
    name: str
    x: NDArray[np.floating[Any]]
    y: NDArray[np.floating[Any]]

    @classmethod
    def from_values(cls, name: str, x: ArrayLike, y: ArrayLike) -> Dataset:
        """
        Build a Dataset, rejecting x and y of different lengths.

        Raises:
            ShapeMismatchError: If len(x) != len(y)
        """
        x_arr = check_array(x, 'x').copy()
        y_arr = check_array(y, 'y').copy()
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        x_arr.flags.writeable = False
        y_arr.flags.writeable = False
        return cls(name=name, x=x_arr, y=y_arr)

    @property
    def n(self) -> int:
        return int(self.x.shape[0])


# Datasets I-III share the same x values
_X_COMMON = [10.0, 8.0, 13.0, 9.0, 11.0, 14.0, 6.0, 4.0, 12.0, 7.0, 5.0]

DATASET_I = Dataset.from_values(
    "I",
    _X_COMMON,
    [8.04, 6.95, 7.58, 8.81, 8.33, 9.96, 7.24, 4.26, 10.84, 4.82, 5.68],
)

DATASET_II = Dataset.from_values(
    "II",
    _X_COMMON,
    [9.14, 8.14, 8.74, 8.77, 9.26, 8.1, 6.13, 3.1, 9.13, 7.26, 4.74],
)

DATASET_III = Dataset.from_values(
    "III",
    _X_COMMON,
    [7.46, 6.77, 12.74, 7.11, 7.81, 8.84, 6.08, 5.39, 8.15, 6.42, 5.73],
)

# x is constant except for one leverage point at 19
DATASET_IV = Dataset.from_values(
    "IV",
    [8.0, 8.0, 8.0, 8.0, 8.0, 8.0, 8.0, 19.0, 8.0, 8.0, 8.0],
    [6.58, 5.76, 7.71, 8.84, 8.47, 7.04, 5.25, 12.5, 5.56, 7.91, 6.89],
)

QUARTET: tuple[Dataset, ...] = (DATASET_I, DATASET_II, DATASET_III, DATASET_IV)


def load_quartet() -> tuple[Dataset, ...]:
    """Return the four datasets in order I, II, III, IV."""
    return QUARTET


def get_dataset(name: str) -> Dataset:
    """
    Look up one quartet member by name ('I', 'II', 'III' or 'IV').

    Raises:
        KeyError: If name is not a quartet member
    """
    for dataset in QUARTET:
        if dataset.name == name:
            return dataset
    valid = ", ".join(repr(d.name) for d in QUARTET)
    raise KeyError(f"Unknown Anscombe dataset {name!r}; expected one of {valid}")
