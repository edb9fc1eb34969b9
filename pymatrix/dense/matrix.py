"""
Matrix: dense, arbitrary-size, real-valued matrix value type.

A Matrix owns a single row-major float64 buffer and exposes the classical
linear-algebra operations on it: elementwise arithmetic, matrix product,
transpose, determinant, cofactor matrix and inverse. Arithmetic methods
mutate the receiver; the operator forms copy first and never touch their
right-hand operand.

Design decisions:
    - Shape lives in the buffer itself, so rows * cols always matches
      the number of stored elements
    - Every operation validates before it mutates; a raised exception
      leaves the receiver exactly as it was
    - Tolerance decisions go through pymatrix.core.tolerances
"""

from __future__ import annotations

import numbers
import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import SingularMatrixError, ValidationError
from pymatrix.core.tolerances import (
    DEFAULT_COLS,
    DEFAULT_ROWS,
    EPSILON,
    EXPANSION_WARNING_SIZE,
    is_effectively_zero,
    within_tolerance,
)
from pymatrix.core.validation import (
    check_array,
    check_dimension,
    check_index,
    check_multipliable,
    check_not_empty,
    check_same_shape,
    check_scalar,
    check_square,
)
from pymatrix.dense import _cofactor
from pymatrix.dense._storage import allocate, empty_buffer, resized


def _warn_if_expensive(n: int, operation: str) -> None:
    """Warn when cofactor expansion is requested on a large matrix."""
    if n > EXPANSION_WARNING_SIZE:
        warnings.warn(
            f"{operation}: cofactor expansion on a {n}x{n} matrix costs O(n!) "
            f"and may take a very long time",
            RuntimeWarning,
            stacklevel=3,
        )


def _split_key(key: Any) -> tuple[Any, Any]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise ValidationError(f"index: expected a (row, col) pair, got {key!r}")
    return key


class Matrix:
    """
    Dense real matrix with rows >= 1 and cols >= 1.

    Construction:
        Matrix()                      1x1 zero matrix
        Matrix(rows, cols)            zero matrix of the given shape
        Matrix.from_array(data)       from nested sequences or an ndarray
        Matrix.identity(n)            n x n identity

    Element access is 0-based and strictly bounds-checked:
        m[i, j], m[i, j] = value, m.get(i, j), m.set(i, j, value)

    Ownership:
        copy() returns an independent deep copy. take() transfers the
        buffer to a new Matrix and leaves the source empty (0 x 0); an
        empty matrix only accepts assign() and resize().

    Examples:
        >>> a = Matrix.from_array([[2, 5, 7], [6, 3, 4], [5, -2, -3]])
        >>> a.determinant()
        -1.0
        >>> a.inverse() == Matrix.from_array([[1, -1, 1], [-38, 41, -34], [27, -29, 24]])
        True
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS):
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        self._data: NDArray[np.float64] = allocate(rows, cols)

    @classmethod
    def _from_buffer(cls, buffer: NDArray[np.float64]) -> Matrix:
        """Wrap an already-validated buffer without copying it."""
        matrix = cls.__new__(cls)
        matrix._data = buffer
        return matrix

    @classmethod
    def from_array(cls, data: ArrayLike) -> Matrix:
        """
        Build a Matrix from a 2D array-like.

        Args:
            data: Nested sequence of numbers or a 2D numpy array. The
                values are copied.

        Raises:
            ValidationError: If data is not a finite numeric 2D array
            InvalidDimensionError: If data has zero rows or columns
        """
        return cls._from_buffer(check_array(data, 'data'))

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        n = check_dimension(n, 'n')
        return cls._from_buffer(np.eye(n, dtype=np.float64))

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self._data.shape[0], self._data.shape[1])

    @property
    def is_empty(self) -> bool:
        """True once take() has moved the buffer out of this matrix."""
        return self._data.size == 0

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def set_rows(self, rows: int) -> None:
        """
        Change the number of rows, keeping the surviving prefix.

        New rows are zero-filled. Raises InvalidDimensionError and leaves
        the matrix unchanged if rows < 1.
        """
        rows = check_dimension(rows, 'rows')
        self.resize(rows, self.cols)

    def set_cols(self, cols: int) -> None:
        """
        Change the number of columns, keeping the surviving prefix.

        New columns are zero-filled. Raises InvalidDimensionError and
        leaves the matrix unchanged if cols < 1.
        """
        cols = check_dimension(cols, 'cols')
        self.resize(self.rows, cols)

    def resize(self, rows: int, cols: int) -> None:
        """
        Change both dimensions at once.

        The top-left overlap of the old and new shapes is preserved and
        all other cells are zero. This is the only resize that works on
        an empty (moved-from) matrix.

        Raises:
            InvalidDimensionError: If rows or cols is less than 1
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        if (rows, cols) != self.shape:
            self._data = resized(self._data, rows, cols)

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def get(self, i: int, j: int) -> float:
        """Element at row i, column j (0-based)."""
        row, col = check_index(i, j, self.shape)
        return float(self._data[row, col])

    def set(self, i: int, j: int, value: float) -> None:
        """Overwrite the element at row i, column j (0-based)."""
        row, col = check_index(i, j, self.shape)
        self._data[row, col] = check_scalar(value, 'value')

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self.get(*_split_key(key))

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self.set(*_split_key(key), value)

    # ------------------------------------------------------------------
    # Ownership
    # ------------------------------------------------------------------

    def copy(self) -> Matrix:
        """Independent deep copy."""
        return Matrix._from_buffer(self._data.copy())

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.copy()

    def assign(self, other: Matrix) -> None:
        """
        Replace this matrix's shape and contents with a copy of other's.

        Valid on an empty matrix. Assigning a matrix to itself is a no-op.
        """
        other = self._require_matrix(other, 'assign')
        if other is self:
            return
        self._data = other._data.copy()

    def take(self) -> Matrix:
        """
        Move the buffer into a new Matrix and leave this one empty.

        Afterwards this matrix reports shape (0, 0); arithmetic on it
        raises EmptyMatrixError until assign() or resize() is called.
        """
        moved = Matrix._from_buffer(self._data)
        self._data = empty_buffer()
        return moved

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the elements as a (rows, cols) float64 array."""
        return self._data.copy()

    def tolist(self) -> list[list[float]]:
        return self._data.tolist()

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def equals(self, other: Matrix) -> bool:
        """
        True if shapes match and every pair of elements differs by at
        most EPSILON in absolute value.
        """
        if not isinstance(other, Matrix):
            return False
        if self.shape != other.shape:
            return False
        return bool(np.all(within_tolerance(self._data, other._data)))

    # ------------------------------------------------------------------
    # Elementwise arithmetic (in place)
    # ------------------------------------------------------------------

    def add(self, other: Matrix) -> None:
        """Add other elementwise. Shapes must match exactly."""
        other = self._require_operand(other, 'add')
        check_same_shape(self.shape, other.shape, 'add')
        self._data += other._data

    def subtract(self, other: Matrix) -> None:
        """Subtract other elementwise. Shapes must match exactly."""
        other = self._require_operand(other, 'subtract')
        check_same_shape(self.shape, other.shape, 'subtract')
        self._data -= other._data

    def scale(self, scalar: float) -> None:
        """Multiply every element by scalar."""
        check_not_empty(self.shape, 'scale')
        self._data *= check_scalar(scalar, 'scalar')

    def multiply(self, other: Matrix | float) -> None:
        """
        Multiply in place by a matrix or a scalar.

        With a Matrix, self becomes the (self.rows, other.cols) product
        self @ other; the product is built in a fresh buffer before it
        replaces the old one. With a real number this is scale().

        Raises:
            DimensionMismatchError: If self.cols != other.rows
        """
        if not isinstance(other, Matrix):
            self.scale(other)
            return
        other = self._require_operand(other, 'multiply')
        check_multipliable(self.shape, other.shape)
        self._data = np.ascontiguousarray(self._data @ other._data, dtype=np.float64)

    def transpose(self) -> Matrix:
        """New (cols, rows) matrix with result[j, i] == self[i, j]."""
        check_not_empty(self.shape, 'transpose')
        return Matrix._from_buffer(np.ascontiguousarray(self._data.T, dtype=np.float64))

    # ------------------------------------------------------------------
    # Cofactor engine
    # ------------------------------------------------------------------

    def determinant(self) -> float:
        """
        Determinant by cofactor expansion along the first row.

        Returns:
            The determinant as a float. For a 1x1 matrix this is exactly
            the single element.

        Raises:
            NotSquareError: If rows != cols
        """
        self._require_square('determinant')
        _warn_if_expensive(self.rows, 'determinant')
        return _cofactor.determinant(self._data)

    def cofactor_matrix(self) -> Matrix:
        """
        Matrix of complements, C[i, j] = (-1)^(i+j) * det(minor(i, j)).

        A non-zero 1x1 matrix has complement [[1.0]].

        Raises:
            NotSquareError: If rows != cols
            DegenerateComplementError: If the matrix is 1x1 and its value
                is within EPSILON of zero
        """
        self._require_square('cofactor_matrix')
        _warn_if_expensive(self.rows, 'cofactor_matrix')
        return Matrix._from_buffer(_cofactor.cofactor_matrix(self._data))

    def inverse(self) -> Matrix:
        """
        Inverse via the adjugate: transpose(cofactor_matrix()) / det.

        The determinant is checked before any complement is computed.

        Raises:
            NotSquareError: If rows != cols
            SingularMatrixError: If |det| < EPSILON
        """
        self._require_square('inverse')
        _warn_if_expensive(self.rows, 'inverse')
        det = _cofactor.determinant(self._data)
        if is_effectively_zero(det):
            raise SingularMatrixError(
                f"inverse: determinant {det!r} is within {EPSILON} of zero, "
                f"matrix has no inverse",
                matrix_name=f"{self.rows}x{self.cols}",
                determinant=det,
                tolerance=EPSILON,
            )
        adjugate = Matrix._from_buffer(_cofactor.cofactor_matrix(self._data)).transpose()
        adjugate.scale(1.0 / det)
        return adjugate

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result.add(other)
        return result

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result.subtract(other)
        return result

    def __mul__(self, other: Any) -> Matrix:
        if not isinstance(other, (Matrix, numbers.Real)):
            return NotImplemented
        result = self.copy()
        result.multiply(other)
        return result

    def __rmul__(self, other: Any) -> Matrix:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        result = self.copy()
        result.scale(other)
        return result

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result.multiply(other)
        return result

    def __iadd__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.add(other)
        return self

    def __isub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.subtract(other)
        return self

    def __imul__(self, other: Any) -> Matrix:
        if not isinstance(other, (Matrix, numbers.Real)):
            return NotImplemented
        self.multiply(other)
        return self

    def __imatmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.multiply(other)
        return self

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    # Mutable with tolerance-based equality
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.is_empty:
            return "Matrix(<empty>)"
        return f"Matrix.from_array({self.tolist()!r})"

    def __str__(self) -> str:
        return np.array2string(self._data, precision=6, suppress_small=True)

    # ------------------------------------------------------------------
    # Internal checks
    # ------------------------------------------------------------------

    def _require_matrix(self, other: Any, operation: str) -> Matrix:
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"{operation}: expected a Matrix, got {type(other).__name__}"
            )
        return other

    def _require_operand(self, other: Any, operation: str) -> Matrix:
        other = self._require_matrix(other, operation)
        check_not_empty(self.shape, operation)
        check_not_empty(other.shape, operation)
        return other

    def _require_square(self, operation: str) -> None:
        check_not_empty(self.shape, operation)
        check_square(self.shape, operation)
