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
def well_conditioned_system(rng):
    """Random square system with a known solution."""
    n = 6
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true


@pytest.fixture
def rank_deficient_system(rng):
    """Consistent 4x4 system whose last column is the sum of the first two."""
    n = 4
    A = rng.standard_normal((n, n))
    A[:, 3] = A[:, 0] + A[:, 1]
    b = A @ np.ones(n)
    return A, b
