"""
Tests for the cofactor engine: minors, determinant, cofactor matrix.

Validates:
    - minor() deletes exactly one row and one column, preserving order
    - determinant: closed forms for n <= 3, expansion beyond, exact 1x1
    - cofactor_matrix: signed minors, the 1x1 special cases
    - Non-square input raises NotSquareError for every square-only operation
    - Large expansions emit a RuntimeWarning
    - Agreement with scipy.linalg on random matrices
"""

import warnings

import numpy as np
import pytest
from scipy import linalg as sp_linalg

from pymatrix import (
    DegenerateComplementError,
    EPSILON,
    Matrix,
    NotSquareError,
)
from pymatrix.core.tolerances import EXPANSION_WARNING_SIZE
from pymatrix.dense import _cofactor


# ═══════════════════════════════════════════════════════════════════════
# minor / sign
# ═══════════════════════════════════════════════════════════════════════


class TestMinor:

    def test_deletes_row_and_column(self):
        a = np.arange(16.0).reshape(4, 4)
        result = _cofactor.minor(a, 1, 2)
        expected = np.array([[0.0, 1.0, 3.0], [8.0, 9.0, 11.0], [12.0, 13.0, 15.0]])
        np.testing.assert_array_equal(result, expected)

    def test_corner(self):
        a = np.arange(9.0).reshape(3, 3)
        np.testing.assert_array_equal(_cofactor.minor(a, 0, 0), [[4.0, 5.0], [7.0, 8.0]])
        np.testing.assert_array_equal(_cofactor.minor(a, 2, 2), [[0.0, 1.0], [3.0, 4.0]])

    def test_2x2_gives_1x1(self):
        a = np.array([[1.0, 2.0], [3.0, 4.0]])
        np.testing.assert_array_equal(_cofactor.minor(a, 0, 1), [[3.0]])

    def test_input_untouched(self):
        a = np.arange(9.0).reshape(3, 3)
        before = a.copy()
        _cofactor.minor(a, 1, 1)
        np.testing.assert_array_equal(a, before)

    def test_sign_alternates(self):
        assert [_cofactor.sign(0, j) for j in range(4)] == [1.0, -1.0, 1.0, -1.0]
        assert _cofactor.sign(1, 1) == 1.0
        assert _cofactor.sign(2, 1) == -1.0


# ═══════════════════════════════════════════════════════════════════════
# determinant
# ═══════════════════════════════════════════════════════════════════════


class TestDeterminant:

    def test_1x1_exact(self):
        m = Matrix.from_array([[1183.2019381738]])
        assert m.determinant() == 1183.2019381738

    def test_2x2(self):
        m = Matrix.from_array([[179.38, 18.91], [2.18821, 472.9428]])
        assert m.determinant() == pytest.approx(84795.1004129, abs=EPSILON)

    def test_3x3_singular_is_zero(self, singular_3x3):
        assert singular_3x3.determinant() == 0.0

    def test_3x3(self, invertible_3x3):
        a, _ = invertible_3x3
        assert a.determinant() == -1.0

    def test_5x5(self):
        m = Matrix.from_array([
            [3.0, 2.0, -6.0, 2.0, -6.0],
            [-4.0, 17.0, 7.0, 17.0, 7.0],
            [1.0, 2.0, 9.0, -3.0, 4.0],
            [12.0, 3.0, 3.0, 2.0, 9.0],
            [-1.0, -2.0, 4.0, 8.0, -1.0],
        ])
        assert m.determinant() == pytest.approx(-158255.0, abs=EPSILON)

    def test_6x6(self):
        m = Matrix.from_array([
            [1.1, 1.2, 1.3, 1.4, 1.5, 1.6],
            [2.8, -2.9, -2.3, -2.4, 2.5, 2.7],
            [3.33, 3.2, -3.87, 3.99, 3.47, -3.02],
            [4.85, 4.23, 4.32, -4.18, 4.89, 4.23],
            [5.12, 5.32, 5.28, 5.67, -5.73, 5.91],
            [6.15, -6.53, 6.44, 6.32, 6.78, 6.98],
        ])
        expected = -77591.0 - (269266237810933.0 / 3733527061589101.0)
        assert m.determinant() == pytest.approx(expected, abs=EPSILON)

    def test_6x6_zero_column(self):
        m = Matrix.from_array([
            [0.0, 1.2, 1.3, 1.4, 1.5, 1.6],
            [0.0, -2.9, -2.3, -2.4, 2.5, 2.7],
            [0.0, 3.2, -3.87, 3.99, 3.47, -3.02],
            [0.0, 4.23, 4.32, -4.18, 4.89, 4.23],
            [0.0, 5.32, 5.28, 5.67, -5.73, 5.91],
            [0.0, -6.53, 6.44, 6.32, 6.78, 6.98],
        ])
        assert m.determinant() == pytest.approx(0.0, abs=EPSILON)

    def test_identity(self):
        assert Matrix.identity(7).determinant() == 1.0

    def test_row_swap_flips_sign(self, rng):
        arr = rng.standard_normal((5, 5))
        swapped = arr[[1, 0, 2, 3, 4]]
        d = Matrix.from_array(arr).determinant()
        assert Matrix.from_array(swapped).determinant() == pytest.approx(-d, rel=1e-10)

    @pytest.mark.parametrize("n", [2, 3, 4, 5, 6])
    def test_matches_scipy(self, rng, n):
        arr = rng.standard_normal((n, n))
        assert Matrix.from_array(arr).determinant() == pytest.approx(
            sp_linalg.det(arr), rel=1e-9, abs=1e-12
        )

    def test_does_not_modify_matrix(self, rng):
        arr = rng.standard_normal((5, 5))
        m = Matrix.from_array(arr)
        m.determinant()
        np.testing.assert_array_equal(m.to_numpy(), arr)


# ═══════════════════════════════════════════════════════════════════════
# cofactor_matrix
# ═══════════════════════════════════════════════════════════════════════


class TestCofactorMatrix:

    def test_1x1_zero_is_degenerate(self):
        with pytest.raises(DegenerateComplementError) as exc_info:
            Matrix(1, 1).cofactor_matrix()
        assert exc_info.value.value == 0.0

    def test_1x1_near_zero_is_degenerate(self):
        with pytest.raises(DegenerateComplementError):
            Matrix.from_array([[0.5 * EPSILON]]).cofactor_matrix()

    def test_1x1_nonzero(self):
        comp = Matrix.from_array([[100.0]]).cofactor_matrix()
        assert comp.shape == (1, 1)
        assert comp[0, 0] == 1.0

    def test_2x2(self):
        a = Matrix.from_array([[15.87, 78.98], [47.25, -45.478]])
        expected = Matrix.from_array([[-45.478, -47.25], [-78.98, 15.87]])
        assert a.cofactor_matrix() == expected

    def test_3x3(self):
        a = Matrix.from_array([[1.0, 2.0, 3.0], [0.0, 4.0, 2.0], [5.0, 2.0, 1.0]])
        expected = Matrix.from_array(
            [[0.0, 10.0, -20.0], [4.0, -14.0, 8.0], [-8.0, -2.0, 4.0]]
        )
        assert a.cofactor_matrix() == expected

    def test_4x4(self):
        a = Matrix.from_array([
            [4.0, 5.0, 9.0, 8.0],
            [4.0, 1.0, 2.0, 3.0],
            [8.0, 7.0, 15.0, 4.0],
            [7.0, 6.0, 4.0, 9.0],
        ])
        expected = Matrix.from_array([
            [-145.0, -169.0, 109.0, 177.0],
            [252.0, -504.0, 72.0, 108.0],
            [47.0, 95.0, 25.0, -111.0],
            [24.0, 276.0, -132.0, -36.0],
        ])
        assert a.cofactor_matrix() == expected

    def test_5x5(self):
        a = Matrix.from_array([
            [78.0, 951.0, 147.0, 47.0, 52.0],
            [76.0, 98.0, 78.0, 753.0, -89.0],
            [87.0, 457.0, 253.0, 984.0, -71.0],
            [47.0, 453.0, 786.0, 123.0, 357.0],
            [765.0, -896.0, 783.0, 478.0, 456.0],
        ])
        expected = np.array([
            [892211883.0, -9088259207.0, 44376427597.0, -13166556043.0, -81751647719.0],
            [97617917421.0, -13672761316.0, 251606522691.0, -104032036661.0, -513616435766.0],
            [-71997449493.0, 10510919457.0, -193843105045.0, 72992451018.0, 397773228858.0],
            [25486500814.0, -1504267981.0, 29580687324.0, -14989913303.0, -80792756249.0],
            [-12212500158.0, 1182045334.0, -9293332343.0, 4297527901.0, 19088191207.0],
        ])
        np.testing.assert_allclose(a.cofactor_matrix().to_numpy(), expected, rtol=1e-12)

    def test_singular_matrix_still_has_complements(self, singular_3x3):
        comp = singular_3x3.cofactor_matrix()
        assert comp.shape == (3, 3)

    def test_matches_scipy_adjugate(self, rng):
        arr = rng.standard_normal((4, 4)) + 4 * np.eye(4)
        expected = sp_linalg.det(arr) * sp_linalg.inv(arr).T
        np.testing.assert_allclose(
            Matrix.from_array(arr).cofactor_matrix().to_numpy(), expected, rtol=1e-9, atol=1e-10
        )


# ═══════════════════════════════════════════════════════════════════════
# Square-only operations
# ═══════════════════════════════════════════════════════════════════════


class TestNotSquare:

    @pytest.mark.parametrize("operation", ["determinant", "cofactor_matrix", "inverse"])
    @pytest.mark.parametrize("shape", [(1, 2), (19, 18), (13, 10), (9, 10)])
    def test_raises(self, operation, shape):
        m = Matrix(*shape)
        with pytest.raises(NotSquareError) as exc_info:
            getattr(m, operation)()
        assert exc_info.value.operation == operation
        assert exc_info.value.shape == shape


# ═══════════════════════════════════════════════════════════════════════
# Expansion-size warning
# ═══════════════════════════════════════════════════════════════════════


class TestExpansionWarning:
    """Zero matrices short-circuit the expansion, so these stay fast."""

    def test_large_matrix_warns(self):
        n = EXPANSION_WARNING_SIZE + 1
        with pytest.warns(RuntimeWarning, match=f"{n}x{n}"):
            assert Matrix(n, n).determinant() == 0.0

    def test_threshold_size_is_silent(self):
        n = EXPANSION_WARNING_SIZE
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert Matrix(n, n).determinant() == 0.0

    def test_identity_expansion_stays_linear(self):
        """Only the diagonal is non-zero, so one subtree per level."""
        n = EXPANSION_WARNING_SIZE + 3
        with pytest.warns(RuntimeWarning):
            assert Matrix.identity(n).determinant() == 1.0
