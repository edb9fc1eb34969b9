"""
Dense matrix module.

Provides the Matrix value type and functional wrappers around its
square-matrix algorithms.

Public API:
    Matrix              - dense real matrix value type
    determinant(x)      - determinant by cofactor expansion
    cofactor_matrix(x)  - matrix of complements
    inverse(x)          - adjugate / determinant
    transpose(x)        - transposed copy
"""

from pymatrix.dense.matrix import Matrix
from pymatrix.dense.solvers import (
    determinant,
    cofactor_matrix,
    inverse,
    transpose,
)

__all__ = [
    "Matrix",
    "determinant",
    "cofactor_matrix",
    "inverse",
    "transpose",
]
