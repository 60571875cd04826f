"""
Influence and ranking diagnostics.

Public API:
    cooks_distance(x, y, fitted_values, residuals) - Cook's distance per observation
    n_percentile(values, percentile=50)           - N50/N80/N90-style rank statistic
"""

from pycook.diagnostics._cook import cooks_distance
from pycook.diagnostics._rank import n_percentile

__all__ = [
    "cooks_distance",
    "n_percentile",
]
