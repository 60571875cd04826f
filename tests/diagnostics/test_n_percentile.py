"""
Tests for the N-percentile rank statistic.
"""

import pytest
import numpy as np

from pycook.diagnostics import n_percentile
from pycook.core.exceptions import ValidationError


class TestNPercentile:

    def test_n50_default(self):
        # total 10, threshold 5, running sums 1, 3, 6
        assert n_percentile([1, 2, 3, 4]) == (3.0, 3)

    def test_unsorted_input(self):
        assert n_percentile([4, 1, 3, 2]) == (3.0, 3)

    def test_n90(self):
        assert n_percentile([1, 2, 3, 4], 90) == (4.0, 4)

    def test_n80(self):
        # threshold 8: running sums 1, 3, 6, 10
        assert n_percentile([1, 2, 3, 4], 80) == (4.0, 4)

    def test_strictly_exceeds(self):
        # threshold 3 is reached exactly at rank 2, crossed at rank 3
        assert n_percentile([1, 2, 3], 50) == (3.0, 3)

    def test_returns_python_types(self):
        value, rank = n_percentile(np.array([5, 1, 1]))
        assert type(value) is float
        assert type(rank) is int

    def test_empty_returns_none(self):
        assert n_percentile([]) is None

    def test_threshold_never_crossed(self):
        assert n_percentile([1, 2, 3, 4], 100) is None

    def test_zero_percentile_is_not_default(self):
        assert n_percentile([1, 2, 3, 4], 0) == (1.0, 1)

    def test_rejects_non_numeric(self):
        with pytest.raises(ValidationError):
            n_percentile(["a", "b"])
