"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def invertible_3x3():
    """Well-known invertible matrix with a short decimal inverse."""
    return Matrix.from_rows([[7, 2, 1], [0, 4, -1], [-3, 4, -2]])


@pytest.fixture
def invertible_3x3_inverse():
    return np.array([
        [0.4, -0.8, 0.6],
        [-0.3, 1.1, -0.7],
        [-1.2, 3.4, -2.8],
    ])


@pytest.fixture
def singular_3x3():
    """Rank-2 matrix (third row is the sum of the first two)."""
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6], [5, 7, 9]], dtype=np.float64)


@pytest.fixture
def well_conditioned(rng):
    """Factory for random diagonally dominant float64 matrices."""
    def make(n):
        a = rng.standard_normal((n, n))
        a += np.diag(np.abs(a).sum(axis=1) + 1.0)
        return Matrix[n, n, np.float64](a.reshape(-1))
    return make
