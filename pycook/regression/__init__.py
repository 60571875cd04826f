"""
Simple linear regression, y = a + b * x.

Public API:
    fit(x, y, weight=None) -> LinearSolution
    RegressionModel(x, y, weight=None)  - stateful model with cached fit

Example:
    >>> from pycook.regression import RegressionModel
    >>> model = RegressionModel(x=[1, 2, 3, 4, 5, 6], y=[1, 2.1, 3.2, 4, 7, 6])
    >>> intercept, slope = model.coefficients()
    >>> model.cooks_distance()
"""

from pycook.regression.design import RegressionDesign, WeightedSums, compute_sums
from pycook.regression.solution import LinearSolution, LinearParams
from pycook.regression.solvers import fit
from pycook.regression.model import RegressionModel

__all__ = [
    "fit",
    "RegressionModel",
    "RegressionDesign",
    "WeightedSums",
    "compute_sums",
    "LinearSolution",
    "LinearParams",
]
