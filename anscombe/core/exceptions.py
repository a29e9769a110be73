"""
Exception hierarchy for anscombe.

All exceptions inherit from AnscombeError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class AnscombeError(Exception):
    """Base exception for all anscombe errors."""
    pass


class ValidationError(AnscombeError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when an array does not have the expected number of dimensions.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Paired arrays have different lengths.

    Raised before any arithmetic when x and y do not describe the same
    number of observations.

    Attributes:
        lengths: Mapping of parameter name to observed length
    """

    def __init__(self, message: str, lengths: dict[str, int] | None = None):
        super().__init__(message)
        self.lengths = lengths if lengths is not None else {}


class InsufficientSampleSizeError(ValidationError):
    """
    Too few observations for the requested statistic.

    Attributes:
        n_samples: Number of observations supplied
        min_samples: Number of observations required
    """

    def __init__(
        self,
        message: str,
        n_samples: int | None = None,
        min_samples: int | None = None
    ):
        super().__init__(message)
        self.n_samples = n_samples
        self.min_samples = min_samples


class NumericalError(AnscombeError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateInputError(NumericalError):
    """
    Input has zero variance where variance is required.

    Raised instead of returning NaN or Inf when all x values are identical
    (the regression slope is undefined) or all y values are identical
    (R² is undefined).

    Attributes:
        variable: Name of the constant variable ('x' or 'y')
    """

    def __init__(self, message: str, variable: str | None = None):
        super().__init__(message)
        self.variable = variable


class RenderError(AnscombeError):
    """
    Figure rendering or writing failed.

    Raised at the plotting boundary when matplotlib or the file system
    rejects the figure. The original exception is chained as __cause__.

    Attributes:
        dataset: Name of the dataset being plotted
        path: Target file path, if known
    """

    def __init__(
        self,
        message: str,
        dataset: str | None = None,
        path: str | None = None
    ):
        super().__init__(message)
        self.dataset = dataset
        self.path = path
