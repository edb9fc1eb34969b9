"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Each failure mode of the Matrix type maps to
exactly one exception class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - A failed operation never leaves its receiver partially modified
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidDimensionError(ValidationError):
    """
    A row or column count is less than one.
    
    Raised when constructing or resizing a matrix with a non-positive
    number of rows or columns.
    
    Attributes:
        name: Which dimension was rejected ('rows' or 'cols')
        value: The rejected value
    """
    
    def __init__(
        self,
        message: str,
        name: str | None = None,
        value: int | None = None
    ):
        super().__init__(message)
        self.name = name
        self.value = value


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Element index lies outside [0, rows) x [0, cols).
    
    Also an IndexError, so generic sequence-handling code treats it the
    way it treats any out-of-bounds subscript.
    
    Attributes:
        index: The (row, col) pair that was requested
        shape: Shape of the matrix at the time of access
    """
    
    def __init__(
        self,
        message: str,
        index: tuple[int, int] | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class EmptyMatrixError(ValidationError):
    """
    Operation attempted on a moved-from (0 x 0) matrix.
    
    Only assignment and resize may target a matrix after take().
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.
    
    Base class for shape errors raised by arithmetic and by the
    square-only operations.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Operand shapes are incompatible for the requested operation.
    
    Attributes:
        operation: Name of the operation ('add', 'subtract', 'multiply')
        left_shape: Shape of the receiver
        right_shape: Shape of the other operand
    """
    
    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    A square matrix was required.
    
    Attributes:
        operation: Name of the operation that required a square matrix
        shape: Actual shape of the matrix
    """
    
    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.shape = shape


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.
    
    Base class for errors arising from the values in a matrix rather
    than its shape.
    """
    pass


class DegenerateComplementError(NumericalError):
    """
    Cofactor matrix requested for a 1 x 1 matrix holding (effectively) zero.
    
    Attributes:
        value: The single element of the matrix
    """
    
    def __init__(self, message: str, value: float | None = None):
        super().__init__(message)
        self.value = value


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.
    
    Raised when an inverse is requested but the determinant is within
    tolerance of zero.
    
    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that failed the check, if computed
        tolerance: The absolute tolerance it was compared against
    """
    
    def __init__(
        self, 
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        tolerance: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.tolerance = tolerance
