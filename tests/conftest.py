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
def spd_matrix(rng):
    """Well-conditioned 5×5 symmetric positive-definite matrix."""
    M = rng.standard_normal((5, 5))
    return M @ M.T + 5 * np.eye(5)


@pytest.fixture
def symmetric_matrix(rng):
    """Symmetric (indefinite) 6×6 matrix."""
    M = rng.standard_normal((6, 6))
    return (M + M.T) / 2


@pytest.fixture
def cholesky_example():
    """Textbook SPD matrix with an integer Cholesky factor."""
    A = np.array([[4.0, 12.0, -16.0],
                  [12.0, 37.0, -43.0],
                  [-16.0, -43.0, 98.0]])
    R = np.array([[2.0, 6.0, -8.0],
                  [0.0, 1.0, 5.0],
                  [0.0, 0.0, 3.0]])
    return A, R
