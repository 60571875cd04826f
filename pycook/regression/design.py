"""
Regression Design.

Design is an immutable, validated snapshot of the (x, y, weight) vectors
a simple regression is fitted on. It also computes the weighted sums the
least squares solve is built from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycook.core.exceptions import ValidationError
from pycook.core.validation import check_vector, check_consistent_length


@dataclass(frozen=True)
class WeightedSums:
    """
    Weighted sums of a two-dimensional dataset.
    
    Every field is Σ w_i * (term), with w_i = 1 when no weights are given.
    """
    x: float
    y: float
    xx: float
    yy: float
    xy: float


def compute_sums(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    weight: NDArray[np.floating[Any]] | None = None,
) -> WeightedSums:
    """
    Compute Σwx, Σwy, Σwx², Σwy² and Σwxy.
    
    Not cached: always consistent with the arrays passed in.
    
    Args:
        x: Predictor values
        y: Response values, same length as x
        weight: Optional weights, same length as x
        
    Returns:
        WeightedSums record
        
    Raises:
        DimensionError: If y or weight length differs from x length
    """
    check_consistent_length(x, y, names=('x', 'y'))
    if weight is None:
        w = np.ones(x.shape[0], dtype=np.float64)
    else:
        check_consistent_length(x, weight, names=('x', 'weight'))
        w = weight
    
    return WeightedSums(
        x=float(np.sum(w * x)),
        y=float(np.sum(w * y)),
        xx=float(np.sum(w * x ** 2)),
        yy=float(np.sum(w * y ** 2)),
        xy=float(np.sum(w * x * y)),
    )


@dataclass(frozen=True)
class RegressionDesign:
    """
    Simple regression design specification.
    
    Holds x, y and optional weights for the model y = a + b * x.
    Immutable after construction.
    
    Construction:
        RegressionDesign.build(x, y)
        RegressionDesign.build(x, y, weight=w)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _weight: NDArray[np.floating[Any]] | None
    _n: int
    
    @classmethod
    def build(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        weight: ArrayLike | None = None,
    ) -> RegressionDesign:
        """
        Build a design with validation.
        
        Raises:
            ValidationError: If x or y is empty or not finite numeric data
            DimensionError: If x, y (or weight) are not 1D or lengths differ
        """
        x_arr = check_vector(x, 'x')
        y_arr = check_vector(y, 'y')
        
        if x_arr.shape[0] == 0 or y_arr.shape[0] == 0:
            raise ValidationError(
                f"no data: x has {x_arr.shape[0]} values, y has {y_arr.shape[0]}"
            )
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        
        w_arr = None
        if weight is not None:
            w_arr = check_vector(weight, 'weight')
            check_consistent_length(x_arr, w_arr, names=('x', 'weight'))
        
        return cls(_x=x_arr, _y=y_arr, _weight=w_arr, _n=x_arr.shape[0])
    
    # === Properties ===
    
    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor vector (n,)."""
        return self._x
    
    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._y
    
    @property
    def weight(self) -> NDArray[np.floating[Any]] | None:
        """Weight vector (n,), or None when unweighted."""
        return self._weight
    
    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n
    
    @property
    def is_weighted(self) -> bool:
        return self._weight is not None
    
    def compute_sums(self) -> WeightedSums:
        """Weighted sums of this design's data."""
        return compute_sums(self._x, self._y, self._weight)
