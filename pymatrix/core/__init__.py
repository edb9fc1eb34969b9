"""
Core infrastructure for PyMatrix.

This module provides the pieces shared by the matrix implementation and
its tests.

Key components:
    exceptions: Exception hierarchy
    tolerances: Fixed numerical configuration (epsilon, default shape)
    validation: Input validators
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    InvalidDimensionError,
    IndexOutOfRangeError,
    EmptyMatrixError,
    DimensionError,
    DimensionMismatchError,
    NotSquareError,
    NumericalError,
    DegenerateComplementError,
    SingularMatrixError,
)
from pymatrix.core.tolerances import EPSILON, MATRIX_TOLERANCE

__all__ = [
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "InvalidDimensionError",
    "IndexOutOfRangeError",
    "EmptyMatrixError",
    "DimensionError",
    "DimensionMismatchError",
    "NotSquareError",
    "NumericalError",
    "DegenerateComplementError",
    "SingularMatrixError",
    # Tolerances
    "EPSILON",
    "MATRIX_TOLERANCE",
]
