"""
Exception hierarchy for PyCook.

All exceptions inherit from PyCookError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyCookError(Exception):
    """Base exception for all PyCook errors."""
    pass


class ValidationError(PyCookError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks, including
    requesting a fit with no data.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.
    
    Raised when an array is not 1D or when x, y and weight have
    inconsistent lengths.
    """
    pass


class NumericalError(PyCookError):
    """
    Numerical computation failed.
    
    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateFitError(NumericalError):
    """
    Slope of the least squares line is undefined.
    
    Raised when the weighted sum of squared x deviations is exactly zero,
    i.e. all x values are equal.
    
    Attributes:
        sqdev_x: The weighted sum of squared x deviations
        n: Number of observations in the fit
    """
    
    def __init__(
        self,
        message: str,
        sqdev_x: float | None = None,
        n: int | None = None,
    ):
        super().__init__(message)
        self.sqdev_x = sqdev_x
        self.n = n


class PerfectFitError(NumericalError):
    """
    Residual sum of squares is exactly zero.
    
    Raised by Cook's distance, which scales by the residual sum of squares,
    when the line passes through every observation.
    
    Attributes:
        n: Number of observations in the fit
    """
    
    def __init__(self, message: str, n: int | None = None):
        super().__init__(message)
        self.n = n
