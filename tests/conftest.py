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
    """Integer matrix with determinant -1 and an integer inverse."""
    a = Matrix.from_array([[2.0, 5.0, 7.0], [6.0, 3.0, 4.0], [5.0, -2.0, -3.0]])
    a_inv = Matrix.from_array([[1.0, -1.0, 1.0], [-38.0, 41.0, -34.0], [27.0, -29.0, 24.0]])
    return a, a_inv


@pytest.fixture
def singular_3x3():
    """Third row is the sum of the first two."""
    return Matrix.from_array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [5.0, 7.0, 9.0]])


def fill(rows, cols, f):
    """Matrix with element (i, j) set to f(i, j)."""
    m = Matrix(rows, cols)
    for i in range(rows):
        for j in range(cols):
            m[i, j] = f(i, j)
    return m


@pytest.fixture
def filled():
    """Factory fixture wrapping fill()."""
    return fill
