"""
Solver dispatch for regression.

This module provides the functional fit() entry point.
"""

from numpy.typing import ArrayLike

from pycook.regression.design import RegressionDesign
from pycook.regression.solution import LinearSolution
from pycook.regression.backends.cpu import CPUSumsBackend


def fit(
    x: ArrayLike,
    y: ArrayLike,
    *,
    weight: ArrayLike | None = None,
) -> LinearSolution:
    """
    Fit the least squares line y = a + b * x.
    
    All input validation, design construction and result wrapping happens
    here. For a stateful, cached interface use RegressionModel.
    
    Args:
        x: Predictor values (n,). Can be any array-like.
        y: Response values (n,). Can be any array-like.
        weight: Optional weights (n,). Absent means every weight is 1.
            
    Returns:
        LinearSolution with coefficients, residuals and diagnostics
        
    Raises:
        ValidationError: If x or y is empty or not finite numeric data
        DimensionError: If x, y and weight have inconsistent lengths
        DegenerateFitError: If all x values are equal
        
    Example:
        >>> from pycook.regression import fit
        >>> result = fit([1, 2, 3, 4, 5, 6], [1, 2.1, 3.2, 4, 7, 6])
        >>> result.coefficients
        >>> result.cooks_distance
    """
    design = RegressionDesign.build(x, y, weight)
    result = CPUSumsBackend().solve(design)
    return LinearSolution(_result=result, _design=design)
