"""
Core infrastructure for anscombe.

This module provides shared abstractions and utilities used by the
regression engine and the batch driver.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and memory instrumentation
"""

from anscombe.core.protocols import Backend
from anscombe.core.result import Result
from anscombe.core.exceptions import (
    AnscombeError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    InsufficientSampleSizeError,
    NumericalError,
    DegenerateInputError,
    RenderError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "AnscombeError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "InsufficientSampleSizeError",
    "NumericalError",
    "DegenerateInputError",
    "RenderError",
]
