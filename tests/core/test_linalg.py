"""
Tests for the factorization kernels in core/compute/linalg.

Validates:
    - lu: determinant sign from pivoting, singular input, empty matrix
    - cholesky: reconstruction, solve, failure on non-PD input
    - ldlt: reconstruction under the permutation, semidefinite solve, rank
    - cod: reconstruction, rank, pseudo-inverse against numpy.linalg.pinv
    - precision helpers used for rank decisions
"""

import warnings

import numpy as np
import pytest
from scipy.linalg import LinAlgWarning

from pymatops.core.exceptions import NotPositiveDefiniteError
from pymatops.core.compute.precision import (
    EPSILON_64,
    DEFAULT_RTOL,
    machine_epsilon,
    numerical_rank,
    rank_threshold,
)
from pymatops.core.compute.tolerances import CPU_FP64
from pymatops.core.compute.linalg import (
    cholesky_cpu,
    cholesky_solve_cpu,
    cod_cpu,
    cod_pseudo_inverse,
    ldlt_cpu,
    ldlt_solve_cpu,
    lu_cpu,
    lu_determinant,
)


RTOL, ATOL = CPU_FP64.rtol, CPU_FP64.atol


# ═══════════════════════════════════════════════════════════════════════
# Precision helpers
# ═══════════════════════════════════════════════════════════════════════


class TestPrecision:
    """Rank thresholds scale epsilon by the larger dimension."""

    def test_machine_epsilon_float64(self):
        assert machine_epsilon() == EPSILON_64

    def test_rank_threshold_uses_larger_dimension(self):
        assert rank_threshold((3, 7)) == pytest.approx(7 * EPSILON_64)

    def test_rank_threshold_empty_shape(self):
        assert rank_threshold((0, 0)) == pytest.approx(EPSILON_64)

    def test_numerical_rank_counts_relative_pivots(self):
        pivots = np.array([10.0, 1.0, 1e-20])
        assert numerical_rank(pivots, 1e-12) == 2

    def test_numerical_rank_all_zero(self):
        assert numerical_rank(np.zeros(3), 1e-12) == 0

    def test_numerical_rank_empty(self):
        assert numerical_rank(np.zeros(0), 1e-12) == 0


# ═══════════════════════════════════════════════════════════════════════
# LU
# ═══════════════════════════════════════════════════════════════════════


class TestLU:
    """LU determinant reads sign(P) * prod(diag(U))."""

    def test_permutation_sign(self):
        result = lu_cpu(np.array([[0.0, 1.0], [1.0, 0.0]]))
        assert result.sign == -1.0

    def test_determinant_matches_numpy(self, rng):
        A = rng.standard_normal((5, 5))
        assert lu_determinant(A) == pytest.approx(np.linalg.det(A), rel=1e-10)

    def test_determinant_swap(self):
        assert lu_determinant(np.array([[0.0, 1.0], [1.0, 0.0]])) == pytest.approx(-1.0)

    def test_singular_is_zero(self):
        A = np.array([[1.0, 2.0], [0.0, 0.0]])
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", LinAlgWarning)
            assert lu_determinant(A) == 0.0

    def test_empty_matrix(self):
        assert lu_determinant(np.zeros((0, 0))) == 1.0

    def test_input_not_overwritten(self, rng):
        A = rng.standard_normal((4, 4))
        A_copy = A.copy()
        lu_cpu(A)
        np.testing.assert_array_equal(A, A_copy)


# ═══════════════════════════════════════════════════════════════════════
# Cholesky
# ═══════════════════════════════════════════════════════════════════════


class TestCholesky:
    """Cholesky factor and SPD solve."""

    def test_reconstruction(self, spd_matrix):
        L = cholesky_cpu(spd_matrix).L
        np.testing.assert_allclose(L @ L.T, spd_matrix, rtol=RTOL, atol=ATOL)
        np.testing.assert_array_equal(L, np.tril(L))

    def test_solve_vector(self, spd_matrix, rng):
        b = rng.standard_normal(4)
        x = cholesky_solve_cpu(spd_matrix, b)
        np.testing.assert_allclose(spd_matrix @ x, b, rtol=RTOL, atol=1e-10)

    def test_solve_matrix(self, spd_matrix, rng):
        B = rng.standard_normal((4, 3))
        X = cholesky_solve_cpu(spd_matrix, B)
        assert X.shape == (4, 3)
        np.testing.assert_allclose(spd_matrix @ X, B, rtol=RTOL, atol=1e-10)

    def test_not_positive_definite_raises(self):
        A = np.array([[1.0, 2.0], [2.0, 1.0]])
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            cholesky_cpu(A, name="I22")
        assert exc_info.value.matrix_name == "I22"
        assert "I22" in str(exc_info.value)

    def test_reports_min_eigenvalue(self):
        A = np.array([[1.0, 2.0], [2.0, 1.0]])
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            cholesky_cpu(A)
        assert exc_info.value.min_eigenvalue == pytest.approx(-1.0)

    def test_chained_linalg_error(self):
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            cholesky_cpu(-np.eye(2))
        assert isinstance(exc_info.value.__cause__, np.linalg.LinAlgError)

    def test_empty_solve(self):
        x = cholesky_solve_cpu(np.zeros((0, 0)), np.zeros((0, 2)))
        assert x.shape == (0, 2)


# ═══════════════════════════════════════════════════════════════════════
# LDL'
# ═══════════════════════════════════════════════════════════════════════


class TestLDLT:
    """LDL' with Bunch-Kaufman pivoting and semidefinite-tolerant solve."""

    def test_reconstruction_indefinite(self, rng):
        M = rng.standard_normal((5, 5))
        A = M + M.T
        f = ldlt_cpu(A)
        PAPt = A[np.ix_(f.perm, f.perm)]
        np.testing.assert_allclose(f.L @ f.D @ f.L.T, PAPt, rtol=RTOL, atol=1e-10)
        np.testing.assert_allclose(np.diag(f.L), np.ones(5))
        assert f.rank == 5

    def test_solve_spd(self, spd_matrix, rng):
        b = rng.standard_normal(4)
        x, rank = ldlt_solve_cpu(spd_matrix, b)
        assert rank == 4
        np.testing.assert_allclose(x, np.linalg.solve(spd_matrix, b), rtol=1e-10, atol=1e-12)

    def test_solve_indefinite(self, rng):
        M = rng.standard_normal((6, 6))
        A = M + M.T
        b = rng.standard_normal(6)
        x, rank = ldlt_solve_cpu(A, b)
        assert rank == 6
        np.testing.assert_allclose(A @ x, b, rtol=1e-8, atol=1e-8)

    def test_semidefinite_rank(self):
        # Integer design with third column = first + second
        Z = np.array([
            [1.0, 1.0, 2.0],
            [1.0, 2.0, 3.0],
            [1.0, 3.0, 4.0],
            [1.0, 4.0, 5.0],
        ])
        f = ldlt_cpu(Z.T @ Z)
        assert f.rank == 2

    def test_semidefinite_solve_is_consistent(self):
        Z = np.array([
            [1.0, 1.0, 2.0],
            [1.0, 2.0, 3.0],
            [1.0, 3.0, 4.0],
            [1.0, 4.0, 5.0],
        ])
        y = np.array([1.0, 3.0, 2.0, 5.0])
        A = Z.T @ Z
        b = Z.T @ y
        x, rank = ldlt_solve_cpu(A, b)
        assert rank == 2
        assert np.all(np.isfinite(x))
        # Any solution of the consistent normal equations reproduces b
        np.testing.assert_allclose(A @ x, b, rtol=1e-8, atol=1e-8)

    def test_zero_matrix(self):
        x, rank = ldlt_solve_cpu(np.zeros((3, 3)), np.zeros(3))
        assert rank == 0
        np.testing.assert_array_equal(x, np.zeros(3))

    def test_rtol_controls_rank(self):
        A = np.diag([1.0, 1e-8])
        assert ldlt_cpu(A).rank == 2
        assert ldlt_cpu(A, rtol=1e-6).rank == 1

    def test_solve_ignores_column_scale(self):
        A = np.diag([1e14, 1.0])
        x, rank = ldlt_solve_cpu(A, np.array([1e14, 2.0]))
        assert rank == 2
        np.testing.assert_allclose(x, [1.0, 2.0], rtol=RTOL)

    def test_solve_scaled_semidefinite_rank(self):
        Z = np.array([
            [1.0, 1.0, 2.0],
            [1.0, 2.0, 3.0],
            [1.0, 3.0, 4.0],
            [1.0, 4.0, 5.0],
        ]) * np.array([1.0, 1e6, 1e-3])
        _, rank = ldlt_solve_cpu(Z.T @ Z, np.ones(3))
        assert rank == 2

    def test_default_rtol(self):
        assert DEFAULT_RTOL == 1e-12

    def test_empty_matrix(self):
        x, rank = ldlt_solve_cpu(np.zeros((0, 0)), np.zeros(0))
        assert rank == 0
        assert x.shape == (0,)


# ═══════════════════════════════════════════════════════════════════════
# Complete orthogonal decomposition
# ═══════════════════════════════════════════════════════════════════════


class TestCOD:
    """A[:, perm] = Q T Z' and pseudo-inverse."""

    def test_reconstruction_full_rank(self, rng):
        A = rng.standard_normal((6, 4))
        cod = cod_cpu(A)
        assert cod.rank == 4
        np.testing.assert_allclose(cod.Q @ cod.T @ cod.Z.T, A[:, cod.perm], rtol=RTOL, atol=1e-10)
        np.testing.assert_array_equal(cod.T, np.tril(cod.T))

    def test_rank_of_diagonal_with_zero(self):
        cod = cod_cpu(np.diag([3.0, 0.0, 1.0]))
        assert cod.rank == 2
        assert cod.Q.shape == (3, 2)
        assert cod.Z.shape == (3, 2)

    def test_low_rank_reconstruction(self, rng):
        A = rng.standard_normal((5, 2)) @ rng.standard_normal((2, 4))
        cod = cod_cpu(A, threshold=1e-10)
        assert cod.rank == 2
        np.testing.assert_allclose(cod.Q @ cod.T @ cod.Z.T, A[:, cod.perm], atol=1e-10)

    def test_pinv_invertible(self, rng):
        A = rng.standard_normal((4, 4))
        Ai = cod_pseudo_inverse(A)
        np.testing.assert_allclose(A @ Ai, np.eye(4), atol=1e-10)

    def test_pinv_matches_numpy_wide(self, rng):
        A = rng.standard_normal((3, 5))
        np.testing.assert_allclose(cod_pseudo_inverse(A), np.linalg.pinv(A), rtol=1e-8, atol=1e-10)

    def test_pinv_penrose_conditions_low_rank(self, rng):
        A = rng.standard_normal((5, 2)) @ rng.standard_normal((2, 4))
        Ai = cod_pseudo_inverse(A, threshold=1e-10)
        assert Ai.shape == (4, 5)
        np.testing.assert_allclose(A @ Ai @ A, A, atol=1e-10)
        np.testing.assert_allclose(Ai @ A @ Ai, Ai, atol=1e-10)
        np.testing.assert_allclose((A @ Ai).T, A @ Ai, atol=1e-10)
        np.testing.assert_allclose((Ai @ A).T, Ai @ A, atol=1e-10)

    def test_pinv_zero_matrix(self):
        Ai = cod_pseudo_inverse(np.zeros((2, 3)))
        assert Ai.shape == (3, 2)
        np.testing.assert_array_equal(Ai, np.zeros((3, 2)))

    def test_pinv_empty(self):
        Ai = cod_pseudo_inverse(np.zeros((0, 3)))
        assert Ai.shape == (3, 0)
