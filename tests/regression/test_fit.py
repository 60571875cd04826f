"""
Tests for regression fit().

Tests the complete pipeline: design construction, backend solve,
and solution properties.
"""

import pytest
import numpy as np

from pycook.regression import fit
from pycook.regression.solution import LinearSolution
from pycook.core.exceptions import (
    DegenerateFitError,
    DimensionError,
    ValidationError,
)


class TestFitBasic:
    """Basic fit() functionality tests."""

    def test_returns_solution(self, linear_data):
        x, y = linear_data
        result = fit(x, y)
        assert isinstance(result, LinearSolution)

    def test_perfect_line(self, linear_data):
        x, y = linear_data
        result = fit(x, y)
        assert result.slope == pytest.approx(2.0, abs=1e-9)
        assert result.intercept == pytest.approx(0.0, abs=1e-9)

    def test_coefficients_intercept_first(self, linear_data):
        x, y = linear_data
        assert fit(x, y).coefficients == pytest.approx((0.0, 2.0), abs=1e-9)

    def test_outlier_scenario_coefficients(self, outlier_data):
        x, y = outlier_data
        result = fit(x, y)
        # Sxx = 17.5, Sxy = 20.25
        assert result.slope == pytest.approx(20.25 / 17.5, rel=1e-12)
        assert result.intercept == pytest.approx(-1.0 / 6.0, rel=1e-12)

    def test_matches_numpy_polyfit(self, noisy_data):
        x, y = noisy_data
        slope, intercept = np.polyfit(x, y, 1)
        result = fit(x, y)
        np.testing.assert_allclose(result.coefficients, (intercept, slope), rtol=1e-9)


class TestFitProperties:
    """Test derived properties of LinearSolution."""

    def test_fitted_plus_residuals_equals_y(self, noisy_data):
        x, y = noisy_data
        result = fit(x, y)
        np.testing.assert_allclose(result.fitted_values + result.residuals, y, atol=1e-12)

    def test_residuals_sum_to_near_zero(self, noisy_data):
        x, y = noisy_data
        assert abs(fit(x, y).residuals.sum()) < 1e-9

    def test_rss_matches_residuals(self, noisy_data):
        x, y = noisy_data
        result = fit(x, y)
        assert result.rss == pytest.approx(float(np.sum(result.residuals ** 2)))

    def test_r_squared_range(self, noisy_data):
        x, y = noisy_data
        assert 0.0 <= fit(x, y).r_squared <= 1.0

    def test_r_squared_perfect_line(self, linear_data):
        x, y = linear_data
        assert fit(x, y).r_squared == pytest.approx(1.0)

    def test_r_squared_constant_y(self):
        result = fit([1, 2, 3], [5, 5, 5])
        assert result.slope == 0.0
        assert result.r_squared == 1.0

    def test_info_and_backend(self, linear_data):
        x, y = linear_data
        result = fit(x, y)
        assert result.backend_name == 'cpu_sums'
        assert result.info == {'method': 'sums', 'n': 4, 'weighted': False}
        assert 'total_seconds' in result.timing

    def test_summary_runs(self, outlier_data):
        x, y = outlier_data
        s = fit(x, y).summary()
        assert "Intercept" in s
        assert "R-squared" in s
        assert "Backend: cpu_sums" in s

    def test_repr(self, linear_data):
        x, y = linear_data
        assert repr(fit(x, y)).startswith("LinearSolution(n=4")

    def test_cooks_distance_cached(self, outlier_data):
        x, y = outlier_data
        result = fit(x, y)
        first = result.cooks_distance
        assert result.cooks_distance is first
        assert first.shape == (6,)


class TestFitWeighted:

    def test_unit_weights_match_unweighted(self, outlier_data):
        x, y = outlier_data
        plain = fit(x, y)
        weighted = fit(x, y, weight=[1, 1, 1, 1, 1, 1])
        assert weighted.coefficients == pytest.approx(plain.coefficients, abs=1e-12)
        assert weighted.warnings == ()
        assert not weighted.has_warning("divided by n")

    def test_weighted_sums_divided_by_n(self):
        # Σwx=4, Σwy=5, Σwx²=6, Σwxy=8 with n=3
        result = fit([0, 1, 2], [0, 1, 3], weight=[1, 2, 1])
        assert result.slope == pytest.approx(2.0)
        assert result.intercept == pytest.approx(-1.0)
        assert result.info['weighted'] is True

    def test_weights_not_summing_to_n_are_noted(self):
        result = fit([0, 1, 2], [0, 1, 3], weight=[1, 2, 1])
        assert result.has_warning("divided by n=3")
        assert "divided by n=3" in result.summary()


class TestFitErrors:

    def test_all_equal_x(self):
        with pytest.raises(DegenerateFitError) as exc_info:
            fit([5, 5, 5], [1, 2, 3])
        assert exc_info.value.sqdev_x == 0.0
        assert exc_info.value.n == 3

    def test_length_mismatch(self):
        with pytest.raises(ValidationError, match="Inconsistent lengths"):
            fit([1, 2, 3], [1, 2])

    def test_empty(self):
        with pytest.raises(ValidationError, match="no data"):
            fit([], [])

    def test_weight_length_mismatch(self):
        with pytest.raises(DimensionError, match="weight"):
            fit([1, 2, 3], [1, 2, 3], weight=[1, 1])

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="non-finite"):
            fit([1, 2, np.nan], [1, 2, 3])
