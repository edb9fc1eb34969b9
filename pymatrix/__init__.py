"""
PyMatrix: dense real-valued matrices with classical linear algebra.

A small value type for numeric client code: element access, equality
under tolerance, elementwise arithmetic, matrix product, transpose,
determinant, cofactor matrix and inverse.

Submodules:
    core: exceptions, tolerances, validation
    dense: the Matrix type and functional wrappers
"""

__version__ = "0.1.0"

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
from pymatrix.core.tolerances import EPSILON
from pymatrix.dense import (
    Matrix,
    determinant,
    cofactor_matrix,
    inverse,
    transpose,
)

__all__ = [
    "__version__",
    "EPSILON",
    "Matrix",
    "determinant",
    "cofactor_matrix",
    "inverse",
    "transpose",
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
]
