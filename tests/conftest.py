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
def simple_regression_data(rng):
    """Simple regression dataset with an intercept column."""
    n = 100
    Z = np.column_stack([np.ones(n), rng.standard_normal((n, 2))])
    beta_true = np.array([1.0, -2.0, 0.5])
    y = Z @ beta_true + rng.standard_normal(n) * 0.1
    return Z, y, beta_true


@pytest.fixture
def collinear_data(rng):
    """Design with perfect collinearity (third column = first + second)."""
    n = 100
    z1 = rng.standard_normal(n)
    z2 = rng.standard_normal(n)
    Z = np.column_stack([z1, z2, z1 + z2])
    y = rng.standard_normal(n)
    return Z, y


@pytest.fixture
def spd_matrix(rng):
    """Well-conditioned 4 x 4 symmetric positive definite matrix."""
    M = rng.standard_normal((4, 4))
    return M @ M.T + 4.0 * np.eye(4)
