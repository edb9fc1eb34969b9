"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Validators take shapes, not matrices, so they stay free of the
      Matrix type itself
"""

import numbers
import operator

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    ValidationError,
    InvalidDimensionError,
    IndexOutOfRangeError,
    EmptyMatrixError,
    DimensionMismatchError,
    NotSquareError,
)

Shape = tuple[int, int]


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a row or column count is an integer >= 1.
    
    Args:
        value: Proposed count
        name: Parameter name for error messages ('rows' or 'cols')
        
    Returns:
        The count as a plain int
        
    Raises:
        ValidationError: If value is not an integer
        InvalidDimensionError: If value is less than 1
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected an integer, got bool")
    try:
        count = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        ) from e
    
    if count < 1:
        raise InvalidDimensionError(
            f"{name}: must be at least 1, got {count}",
            name=name,
            value=count,
        )
    return count


def check_index(i: Any, j: Any, shape: Shape) -> tuple[int, int]:
    """
    Verify (i, j) addresses an element of a matrix with the given shape.
    
    The only accepted range is 0 <= i < rows and 0 <= j < cols; negative
    indices are rejected rather than wrapped.
    
    Raises:
        ValidationError: If an index is not an integer
        IndexOutOfRangeError: If an index is outside the matrix
    """
    try:
        row = operator.index(i)
        col = operator.index(j)
    except TypeError as e:
        raise ValidationError(
            f"index: expected integers, got ({type(i).__name__}, {type(j).__name__})"
        ) from e
    
    rows, cols = shape
    if not 0 <= row < rows:
        raise IndexOutOfRangeError(
            f"row index {row} outside the range [0, {rows})",
            index=(row, col),
            shape=shape,
        )
    if not 0 <= col < cols:
        raise IndexOutOfRangeError(
            f"column index {col} outside the range [0, {cols})",
            index=(row, col),
            shape=shape,
        )
    return row, col


def check_not_empty(shape: Shape, operation: str) -> None:
    """
    Verify a matrix has not been moved from.
    
    Raises:
        EmptyMatrixError: If the shape is (0, 0)
    """
    if shape[0] == 0 or shape[1] == 0:
        raise EmptyMatrixError(
            f"{operation}: matrix is empty (moved-from), shape {shape}"
        )


def check_same_shape(left: Shape, right: Shape, operation: str) -> None:
    """
    Verify two operands have identical shapes.
    
    Raises:
        DimensionMismatchError: If shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: shapes differ, {left[0]}x{left[1]} vs {right[0]}x{right[1]}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_multipliable(left: Shape, right: Shape) -> None:
    """
    Verify the inner dimensions of a matrix product agree.
    
    Raises:
        DimensionMismatchError: If left cols != right rows
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"multiply: left has {left[1]} columns but right has {right[0]} rows",
            operation='multiply',
            left_shape=left,
            right_shape=right,
        )


def check_square(shape: Shape, operation: str) -> None:
    """
    Verify a matrix is square.
    
    Raises:
        NotSquareError: If rows != cols
    """
    if shape[0] != shape[1]:
        raise NotSquareError(
            f"{operation}: requires a square matrix, got {shape[0]}x{shape[1]}",
            operation=operation,
            shape=shape,
        )


def check_scalar(value: Any, name: str) -> float:
    """
    Verify value is a finite real number and return it as float.
    
    NaN and Inf are rejected, matching check_array.
    
    Raises:
        ValidationError: If value is not a real number or is not finite
    """
    if not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    result = float(value)
    if not np.isfinite(result):
        raise ValidationError(f"{name}: must be finite, got {result!r}")
    return result


def check_array(data: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate and convert input to a 2D float64 array.
    
    Accepts nested sequences and numpy arrays. Rejects ragged input,
    non-numeric data, non-finite values and empty dimensions.
    
    Args:
        data: Input to validate
        name: Parameter name for error messages
        
    Returns:
        A freshly allocated C-ordered float64 array
        
    Raises:
        ValidationError: If input is not a finite numeric 2D array
        InvalidDimensionError: If either dimension is zero
    """
    try:
        result = np.array(data)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )
    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )
    if np.iscomplexobj(result):
        raise ValidationError(f"{name}: complex values are not supported")
    
    if result.ndim != 2:
        raise ValidationError(
            f"{name}: expected 2D array, got {result.ndim}D with shape {result.shape}"
        )
    
    rows, cols = result.shape
    if rows < 1:
        raise InvalidDimensionError(
            f"{name}: must have at least 1 row, got {rows}", name='rows', value=rows
        )
    if cols < 1:
        raise InvalidDimensionError(
            f"{name}: must have at least 1 column, got {cols}", name='cols', value=cols
        )
    
    result = np.ascontiguousarray(result, dtype=np.float64)
    if not np.all(np.isfinite(result)):
        n_nan = int(np.sum(np.isnan(result)))
        n_inf = int(np.sum(np.isinf(result)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )
    return result
