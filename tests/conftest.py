"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def linear_data():
    """Perfectly linear data: y = 2x."""
    return [1.0, 2.0, 3.0, 4.0], [2.0, 4.0, 6.0, 8.0]


@pytest.fixture
def outlier_data():
    """Six points with an influential fifth observation."""
    return [1, 2, 3, 4, 5, 6], [1, 2.1, 3.2, 4, 7, 6]


@pytest.fixture
def noisy_data(rng):
    """Noisy line y = 1.5 + 0.8x."""
    n = 50
    x = rng.uniform(0.0, 10.0, n)
    y = 1.5 + 0.8 * x + rng.standard_normal(n) * 0.3
    return x, y
