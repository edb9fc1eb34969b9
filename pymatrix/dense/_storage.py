"""
Buffer management for the dense Matrix type.

A matrix owns exactly one C-ordered float64 array of shape (rows, cols).
The helpers here allocate such buffers and build resized copies of them;
none of them modify their input.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


def allocate(rows: int, cols: int) -> NDArray[np.float64]:
    """Zero-filled row-major buffer of the given shape."""
    return np.zeros((rows, cols), dtype=np.float64, order='C')


def empty_buffer() -> NDArray[np.float64]:
    """The (0, 0) buffer held by a moved-from matrix."""
    return np.zeros((0, 0), dtype=np.float64, order='C')


def resized(buffer: NDArray[np.floating[Any]], rows: int, cols: int) -> NDArray[np.float64]:
    """
    Copy of buffer reshaped to (rows, cols).

    The overlapping top-left min(old, new) region is carried over and any
    newly exposed cells are zero. When the column count is unchanged the
    surviving rows form a contiguous prefix of the row-major data and are
    copied in one flat slice.
    """
    old_rows, old_cols = buffer.shape
    target = allocate(rows, cols)
    keep_rows = min(old_rows, rows)
    keep_cols = min(old_cols, cols)

    if keep_rows == 0 or keep_cols == 0:
        return target

    if old_cols == cols:
        n = keep_rows * cols
        target.reshape(-1)[:n] = buffer.reshape(-1)[:n]
    else:
        target[:keep_rows, :keep_cols] = buffer[:keep_rows, :keep_cols]
    return target
