"""
Cofactor engine: minors, determinant and the matrix of complements.

All functions operate on square float64 arrays and allocate their results;
inputs are never modified. Shape checks are the caller's job; Matrix
validates before delegating here.

The determinant uses closed forms up to 3x3 and Laplace expansion along
the first row beyond that:

    det(A) = Σ_j (-1)^j · a[0, j] · det(M(0, j))

where M(r, c) is A with row r and column c deleted. This is O(n!) by
construction; no elimination or pivoting is involved.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.tolerances import is_effectively_zero
from pymatrix.core.exceptions import DegenerateComplementError


def minor(a: NDArray[np.floating[Any]], row: int, col: int) -> NDArray[np.float64]:
    """
    Submatrix of a with the given row and column deleted.

    Requires a to be at least 2x2. Remaining rows and columns keep their
    original order.
    """
    keep_rows = [i for i in range(a.shape[0]) if i != row]
    keep_cols = [j for j in range(a.shape[1]) if j != col]
    return np.ascontiguousarray(a[np.ix_(keep_rows, keep_cols)], dtype=np.float64)


def sign(i: int, j: int) -> float:
    """(-1)^(i+j)."""
    return -1.0 if (i + j) % 2 else 1.0


def determinant(a: NDArray[np.floating[Any]]) -> float:
    """Determinant of a square array by cofactor expansion."""
    n = a.shape[0]

    if n == 1:
        return float(a[0, 0])

    if n == 2:
        return float(a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0])

    if n == 3:
        return float(
            a[0, 0] * a[1, 1] * a[2, 2]
            + a[0, 1] * a[1, 2] * a[2, 0]
            + a[0, 2] * a[1, 0] * a[2, 1]
            - a[0, 2] * a[1, 1] * a[2, 0]
            - a[0, 0] * a[1, 2] * a[2, 1]
            - a[0, 1] * a[1, 0] * a[2, 2]
        )

    total = 0.0
    for j in range(n):
        pivot = a[0, j]
        # Zero terms contribute nothing; skip the (n-1)! subtree
        if pivot == 0.0:
            continue
        total += sign(0, j) * pivot * determinant(minor(a, 0, j))
    return float(total)


def cofactor_matrix(a: NDArray[np.floating[Any]]) -> NDArray[np.float64]:
    """
    Matrix of complements: C[i, j] = (-1)^(i+j) · det(M(i, j)).

    A 1x1 input has no minors; its complement is defined as [[1.0]]
    unless the single element is effectively zero.

    Raises:
        DegenerateComplementError: If a is 1x1 and its element is within
            tolerance of zero
    """
    n = a.shape[0]

    if n == 1:
        value = float(a[0, 0])
        if is_effectively_zero(value):
            raise DegenerateComplementError(
                f"cofactor_matrix: 1x1 matrix holds {value!r}, which is within "
                f"tolerance of zero and has no complement",
                value=value,
            )
        return np.ones((1, 1), dtype=np.float64)

    result = np.empty((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            result[i, j] = sign(i, j) * determinant(minor(a, i, j))
    return result
