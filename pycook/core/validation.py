"""
Input validation utilities for PyCook.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pycook.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.
    
    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    An empty sequence becomes an empty float64 array.
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray with float64 dtype
        
    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # np.asarray([]) is float64, so empty input passes through here
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    # Sums are accumulated in double precision, including for float32 input
    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]], 
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).
    
    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)
        
    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )
    
    if len(arrays) < 2:
        return
    
    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_vector(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Convert and validate a finite 1D numeric vector (may be empty)."""
    result = check_array(array, name)
    check_1d(result, name)
    check_finite(result, name)
    return result
