"""
Core infrastructure for PyCook.

This module provides shared abstractions and utilities used by the
regression and diagnostics submodules.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from pycook.core.result import Result
from pycook.core.exceptions import (
    PyCookError,
    ValidationError,
    DimensionError,
    NumericalError,
    DegenerateFitError,
    PerfectFitError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyCookError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "DegenerateFitError",
    "PerfectFitError",
]
