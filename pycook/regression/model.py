"""
Stateful least squares line fit with cached coefficients.

RegressionModel holds x, y and optional weights, fits y = a + b * x on
demand and caches the result. Methods can be called in any order or
repeatedly without redundant fitting.

Cache invalidation follows assignment: replacing x or y through the
setters clears the cached fit. Mutating a stored array in place is not
observed, and neither is replacing the weights.

Example:
    >>> model = RegressionModel(x=[1, 2, 3, 4, 5, 6], y=[1, 2.1, 3.2, 4, 7, 6])
    >>> intercept, slope = model.coefficients()
    >>> model.fitted()
    >>> model.residuals()
    >>> model.cooks_distance()
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycook.core.validation import check_consistent_length, check_vector
from pycook.diagnostics import cooks_distance, n_percentile
from pycook.regression.design import RegressionDesign, WeightedSums, compute_sums
from pycook.regression.solution import LinearSolution
from pycook.regression.backends.cpu import CPUSumsBackend


class RegressionModel:
    """
    Least squares line fit y = a + b * x with lazily cached coefficients.

    Not safe for concurrent mutation; use one instance per thread.
    """

    def __init__(
        self,
        x: ArrayLike | None = None,
        y: ArrayLike | None = None,
        weight: ArrayLike | None = None,
    ):
        self._x = check_vector([] if x is None else x, 'x')
        self._y = check_vector([] if y is None else y, 'y')
        self._weight = None if weight is None else check_vector(weight, 'weight')

        # Only vectors given together are checked; setters defer to fit time
        given = [
            (arr, name)
            for arg, arr, name in (
                (x, self._x, 'x'),
                (y, self._y, 'y'),
                (weight, self._weight, 'weight'),
            )
            if arg is not None
        ]
        check_consistent_length(
            *(arr for arr, _ in given),
            names=tuple(name for _, name in given),
        )

        self._slope: float | None = None
        self._intercept: float | None = None
        self._sqdev_y: float | None = None
        self._solution: LinearSolution | None = None
        self._fit_computed = False

    # === Data ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x

    @x.setter
    def x(self, value: ArrayLike) -> None:
        self._x = check_vector(value, 'x')
        self._fit_computed = False

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self._y

    @y.setter
    def y(self, value: ArrayLike) -> None:
        self._y = check_vector(value, 'y')
        self._fit_computed = False

    @property
    def weight(self) -> NDArray[np.floating[Any]] | None:
        return self._weight

    @weight.setter
    def weight(self, value: ArrayLike | None) -> None:
        self._weight = None if value is None else check_vector(value, 'weight')

    # === Fit state ===

    @property
    def slope(self) -> float | None:
        """Slope from the last successful fit, None before any fit."""
        return self._slope

    @property
    def intercept(self) -> float | None:
        """Intercept from the last successful fit, None before any fit."""
        return self._intercept

    @property
    def sqdev_y(self) -> float | None:
        """Weighted sum of squared y deviations from the last fit."""
        return self._sqdev_y

    @property
    def fit_computed(self) -> bool:
        return self._fit_computed

    # === Operations ===

    def compute_sums(self) -> WeightedSums:
        """
        Weighted sums of the current data. Recomputed on every call.

        Raises:
            DimensionError: If weight (or y) length differs from x length
        """
        return compute_sums(self._x, self._y, self._weight)

    def fit(self) -> tuple[float, float]:
        """
        Fit the line and cache the coefficients.

        Returns:
            (intercept, slope)

        Raises:
            ValidationError: If x or y is empty or their lengths differ
            DimensionError: If weight length differs from x length
            DegenerateFitError: If all x values are equal
        """
        design = RegressionDesign.build(self._x, self._y, self._weight)
        result = CPUSumsBackend().solve(design)

        self._slope = result.params.slope
        self._intercept = result.params.intercept
        self._sqdev_y = result.params.sqdev_y
        self._solution = LinearSolution(_result=result, _design=design)
        self._fit_computed = True
        return (self._intercept, self._slope)

    def coefficients(self) -> tuple[float, float]:
        """(intercept, slope), fitting first if the cache is stale."""
        if self._fit_computed:
            return (self._intercept, self._slope)
        return self.fit()

    def solution(self) -> LinearSolution:
        """Full LinearSolution for the current data, fitting if needed."""
        if not self._fit_computed:
            self.fit()
        return self._solution

    def fitted(self) -> NDArray[np.floating[Any]]:
        """Predicted y for every x, in x order."""
        intercept, slope = self.coefficients()
        return intercept + slope * self._x

    def residuals(self) -> NDArray[np.floating[Any]]:
        """Observed minus predicted y, in y order."""
        return self._y - self.fitted()

    def cooks_distance(self) -> NDArray[np.floating[Any]]:
        """
        Cook's distance of every observation, in input order.

        Leave-one-out refits ignore the weights.

        Raises:
            PerfectFitError: If n <= 2 or the residual sum of squares is zero
            DegenerateFitError: If a leave-one-out fit has all x equal
        """
        return cooks_distance(
            self._x,
            self._y,
            self.fitted(),
            self.residuals(),
            weighted=self._weight is not None,
        )

    @staticmethod
    def N(values: ArrayLike, percentile: float = 50) -> tuple[float, int] | None:
        """
        N-percentile of a sequence, e.g. N50 (the default), N80, N90.

        See pycook.diagnostics.n_percentile.
        """
        return n_percentile(values, percentile)

    def __repr__(self) -> str:
        if self._fit_computed:
            state = f"intercept={self._intercept:.4f}, slope={self._slope:.4f}"
        else:
            state = "unfitted"
        return f"RegressionModel(n={self._x.shape[0]}, {state})"
