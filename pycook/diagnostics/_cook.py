"""
Cook's distance for a least squares line fit.

For observation i the line is refitted without it, and the change in
fitted values over the FULL data is scaled by the residual variance:

    D_i = sum_j (yhat_j - yhat_j(-i))^2 * (n - 2) / (2 * RSS)

where yhat_j(-i) = a(-i) + b(-i) * x_j uses the leave-one-out coefficients.
The leave-one-out fits are always unweighted.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pycook.core.exceptions import PerfectFitError


def cooks_distance(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    fitted_values: NDArray[np.floating[Any]],
    residuals: NDArray[np.floating[Any]],
    *,
    weighted: bool = False,
) -> NDArray[np.floating[Any]]:
    """
    Compute Cook's distance of every observation.

    Args:
        x: Predictor values of the full fit, shape (n,)
        y: Response values of the full fit, shape (n,)
        fitted_values: Fitted values of the full fit, shape (n,)
        residuals: Residuals of the full fit, shape (n,)
        weighted: Whether the full fit used weights. Only used to warn
            that the leave-one-out fits do not.

    Returns:
        Distances, shape (n,), in input order.

    Raises:
        PerfectFitError: If n <= 2 (a line through two points has no
            residual variance) or the residual sum of squares is zero
        DegenerateFitError: If a leave-one-out fit has all x equal
    """
    # Deferred to avoid a circular import with pycook.regression
    from pycook.regression.design import RegressionDesign
    from pycook.regression.backends.cpu import CPUSumsBackend

    n = y.shape[0]
    # Rounding can leave a tiny nonzero rss at n == 2
    if n <= 2:
        raise PerfectFitError(
            f"Cook's distance needs n > 2 observations, got n={n}",
            n=n,
        )

    rss = float(np.sum(residuals ** 2))
    if rss == 0:
        raise PerfectFitError(
            f"Cook's distance is undefined: residual sum of squares is 0 (n={n})",
            n=n,
        )

    if weighted:
        warnings.warn(
            "Cook's distance leave-one-out fits ignore the weights of the full model",
            UserWarning,
            stacklevel=2,
        )

    backend = CPUSumsBackend()
    distances = np.empty(n, dtype=np.float64)

    for i in range(n):
        design = RegressionDesign.build(np.delete(x, i), np.delete(y, i))
        params = backend.solve(design).params
        fitted_loo = params.intercept + params.slope * x
        shift = float(np.sum((fitted_values - fitted_loo) ** 2))
        distances[i] = shift * (n - 2) / rss / 2

    return distances
