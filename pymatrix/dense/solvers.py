"""
Functional entry points for the dense Matrix type.

Each function accepts either a Matrix or any 2D array-like and returns a
new value; the input is never modified.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pymatrix.dense.matrix import Matrix


def _ensure_matrix(data: ArrayLike | Matrix) -> Matrix:
    """Convert raw array to Matrix if needed."""
    if isinstance(data, Matrix):
        return data
    return Matrix.from_array(data)


def determinant(data: ArrayLike | Matrix) -> float:
    """
    Determinant of a square matrix by cofactor expansion.

    Args:
        data: Matrix or 2D array-like

    Raises:
        NotSquareError: If data is not square
    """
    return _ensure_matrix(data).determinant()


def cofactor_matrix(data: ArrayLike | Matrix) -> Matrix:
    """Matrix of signed minor determinants. See Matrix.cofactor_matrix."""
    return _ensure_matrix(data).cofactor_matrix()


def inverse(data: ArrayLike | Matrix) -> Matrix:
    """
    Inverse of a square matrix via adjugate over determinant.

    Raises:
        NotSquareError: If data is not square
        SingularMatrixError: If the determinant is within tolerance of zero
    """
    return _ensure_matrix(data).inverse()


def transpose(data: ArrayLike | Matrix) -> Matrix:
    """
    Transposed copy of a matrix.

    Args:
        data: Matrix or 2D array-like of any shape

    Returns:
        New (cols, rows) Matrix; the input is left unchanged
    """
    return _ensure_matrix(data).transpose()
