"""
CPU reference backend for simple linear regression.

Solves y = a + b * x directly from weighted sums of the data. No
decomposition is needed for a single predictor; numerical stability is
that of direct summation.
"""

from typing import Any
import numpy as np

from pycook.core.result import Result
from pycook.core.compute.timing import Timer
from pycook.core.exceptions import DegenerateFitError
from pycook.regression.design import RegressionDesign
from pycook.regression.solution import LinearParams


class CPUSumsBackend:
    """
    CPU backend using sums of squares and cross products.
    
    Implements RegressionDesign -> Result[LinearParams].
    """
    
    @property
    def name(self) -> str:
        return 'cpu_sums'
    
    def solve(self, design: RegressionDesign) -> Result[LinearParams]:
        """
        Solve the least squares line fit.
        
        Algorithm:
            1. Compute weighted sums Σwx, Σwy, Σwx², Σwy², Σwxy
            2. sqdev_x = Σwx² - (Σwx)² / n
            3. slope = (Σwxy - Σwx Σwy / n) / sqdev_x
            4. intercept = (Σwy - slope Σwx) / n
            5. Compute fitted values and residuals
            
        The divisor is the number of points n, not Σw.
            
        Args:
            design: Validated regression design
            
        Returns:
            Result containing LinearParams
            
        Raises:
            DegenerateFitError: If sqdev_x is exactly zero
        """
        timer = Timer()
        timer.start()

        n = design.n
        warnings_list: list[str] = []

        if design.is_weighted:
            total_weight = float(np.sum(design.weight))
            if total_weight != n:
                warnings_list.append(
                    f"Weighted sums are divided by n={n}, not by the total "
                    f"weight {total_weight:g}"
                )
        
        with timer.section('sums'):
            sums = design.compute_sums()
        
        with timer.section('solve'):
            sqdev_x = sums.xx - sums.x ** 2 / n
            # Exact comparison: no tolerance
            if sqdev_x == 0:
                raise DegenerateFitError(
                    f"Can't fit line when x values are all equal "
                    f"(n={n}, weighted sum of squared x deviations is 0)",
                    sqdev_x=sqdev_x,
                    n=n,
                )
            sqdev_y = sums.yy - sums.y ** 2 / n
            sqdev_xy = sums.xy - sums.x * sums.y / n
            slope = sqdev_xy / sqdev_x
            intercept = (sums.y - slope * sums.x) / n
        
        with timer.section('residuals'):
            fitted_values = intercept + slope * design.x
            residuals = design.y - fitted_values
        
        timer.stop()
        
        params = LinearParams(
            intercept=intercept,
            slope=slope,
            fitted_values=fitted_values,
            residuals=residuals,
            sums=sums,
            sqdev_x=sqdev_x,
            sqdev_y=sqdev_y,
            sqdev_xy=sqdev_xy,
        )
        
        info: dict[str, Any] = {
            'method': 'sums',
            'n': n,
            'weighted': design.is_weighted,
        }
        
        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
