"""
Fixed numerical configuration for the Matrix type.

Every "effectively equal" and "effectively zero" decision in the package
goes through the helpers here, so equality, singularity detection and
degenerate-complement detection agree on a single threshold.

These are read-only module constants; nothing in the package mutates them.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    atol: float
    name: str
    description: str


# Absolute tolerance shared by equals(), inverse() and cofactor_matrix()
MATRIX_TOLERANCE = ToleranceTier(
    atol=1.0e-6,
    name='matrix_fp64',
    description='Absolute elementwise tolerance for float64 matrices',
)

EPSILON = MATRIX_TOLERANCE.atol

# Shape produced by Matrix() with no arguments
DEFAULT_ROWS = 1
DEFAULT_COLS = 1

# Cofactor expansion is O(n!); 9! is already ~3.6e5 recursive calls.
EXPANSION_WARNING_SIZE = 9


def within_tolerance(
    a: float | NDArray[np.floating[Any]],
    b: float | NDArray[np.floating[Any]],
) -> bool | NDArray[np.bool_]:
    """
    True if a and b differ by no more than EPSILON.

    Works elementwise when given numpy arrays, returning a boolean array.
    """
    return abs(a - b) <= EPSILON


def is_effectively_zero(value: float) -> bool:
    """True if |value| is strictly below EPSILON."""
    return abs(value) < EPSILON
