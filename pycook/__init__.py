"""
PyCook: least squares line fit with Cook's distance.

Fits y = a + b * x (optionally weighted) to two-dimensional data and
computes per-observation Cook's distance for outlier detection.

Submodules:
    regression: Line fit (functional fit() and stateful RegressionModel)
    diagnostics: Cook's distance and the N-percentile rank statistic
"""

__version__ = "0.1.0"

from pycook import regression
from pycook import diagnostics
from pycook.regression import RegressionModel, fit

__all__ = [
    "__version__",
    "regression",
    "diagnostics",
    "RegressionModel",
    "fit",
]
