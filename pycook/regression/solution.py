"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pycook.core.result import Result

if TYPE_CHECKING:
    from pycook.regression.design import RegressionDesign, WeightedSums


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for simple linear regression.
    
    This is the immutable data computed by backends. sqdev_y plays no
    role in the fit and is kept as a diagnostic value only.
    """
    intercept: float
    slope: float
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    sums: 'WeightedSums'
    sqdev_x: float
    sqdev_y: float
    sqdev_xy: float


@dataclass
class LinearSolution:
    """
    User-facing regression results.
    
    Wraps the backend Result and provides convenient accessors for the
    line coefficients, fitted values, residuals and influence diagnostics.
    """
    _result: Result[LinearParams]
    _design: 'RegressionDesign'
    
    # Cached computations
    _cooks_distance: NDArray[np.floating[Any]] | None = None
    
    @property
    def intercept(self) -> float:
        return self._result.params.intercept
    
    @property
    def slope(self) -> float:
        return self._result.params.slope
    
    @property
    def coefficients(self) -> tuple[float, float]:
        """(intercept, slope), intercept first."""
        return (self.intercept, self.slope)
    
    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values
    
    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals
    
    @property
    def rss(self) -> float:
        residuals = self.residuals
        return float(residuals @ residuals)
    
    @property
    def tss(self) -> float:
        y = self._design.y
        return float(np.sum((y - np.mean(y)) ** 2))
    
    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)
    
    @property
    def cooks_distance(self) -> NDArray[np.floating[Any]]:
        """
        Cook's distance of every observation, in input order.
        
        Leave-one-out refits are unweighted even when this solution is
        weighted; a UserWarning is emitted in that case.
        
        Raises:
            PerfectFitError: If n <= 2 or the residual sum of squares is zero
            DegenerateFitError: If a leave-one-out fit has all x equal
        """
        if self._cooks_distance is not None:
            return self._cooks_distance
        
        from pycook.diagnostics import cooks_distance
        
        self._cooks_distance = cooks_distance(
            self._design.x,
            self._design.y,
            self.fitted_values,
            self.residuals,
            weighted=self._design.is_weighted,
        )
        return self._cooks_distance
    
    @property
    def n(self) -> int:
        return self._design.n
    
    @property
    def info(self) -> dict[str, Any]:
        return self._result.info
    
    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing
    
    @property
    def backend_name(self) -> str:
        return self._result.backend_name
    
    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings
    
    def has_warning(self, substring: str) -> bool:
        """Check if any fit warning contains the given substring."""
        return self._result.has_warning(substring)
    
    def summary(self) -> str:
        """Generate a plain-text summary."""
        lines = [
            "Simple Linear Regression Results",
            "=" * 50,
            f"Observations: {self.n}",
            f"Weighted: {'yes' if self._design.is_weighted else 'no'}",
            f"Intercept: {self.intercept:14.6f}",
            f"Slope:     {self.slope:14.6f}",
            f"RSS: {self.rss:.6f}",
            f"R-squared: {self.r_squared:.6f}",
            "-" * 50,
            f"Backend: {self.backend_name}",
        ]
        for warning in self.warnings:
            lines.append(f"Warning: {warning}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        
        return "\n".join(lines)
    
    def __repr__(self) -> str:
        return (
            f"LinearSolution(n={self.n}, intercept={self.intercept:.4f}, "
            f"slope={self.slope:.4f}, r_squared={self.r_squared:.4f})"
        )
