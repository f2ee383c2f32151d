"""
Symmetric LDL' decomposition and solve.

Uses LAPACK sytrf (Bunch-Kaufman pivoting, via SciPy). D is block
diagonal with 1x1 and 2x2 blocks. Numerically zero pivots are
pseudo-inverted (their components of the solution are set to zero), so
the solve stays defined when A is only positive semidefinite, as happens
for Z'WZ with a rank-deficient design.

A pivot counts as zero below rtol times the largest pivot. The default,
DEFAULT_RTOL = 1e-12, corresponds to cond(Z) = 1e6 for normal equations,
where cond(Z'Z) = 1e12 and float64 has no accurate digits left.

ldlt_solve_cpu() first scales A symmetrically to unit diagonal, so the pivot
rule compares the correlation structure of A rather than the units its
columns happen to be measured in.
"""

from dataclasses import dataclass
from typing import Any, Iterator
import numpy as np
from numpy.typing import NDArray
import scipy.linalg as sla

from pymatops.core.compute.precision import DEFAULT_RTOL


@dataclass(frozen=True)
class LDLResult:
    """
    Result of LDL' decomposition.

    With P the row permutation given by perm, P A P' = L D L'.

    Attributes:
        L: Unit lower triangular factor, already permuted (p x p)
        D: Block diagonal factor with 1x1 and 2x2 blocks (p x p)
        perm: Row permutation; (P A P')[i, j] = A[perm[i], perm[j]]
        rank: Number of pivots of D above the rank threshold
    """
    L: NDArray[np.floating[Any]]
    D: NDArray[np.floating[Any]]
    perm: NDArray[np.integer[Any]]
    rank: int


def _diagonal_blocks(
    D: NDArray[np.floating[Any]],
    rtol: float,
) -> Iterator[tuple[slice, NDArray[np.floating[Any]], NDArray[np.floating[Any]], NDArray[np.bool_]]]:
    """
    Walk the diagonal blocks of D.

    Yields (block, eigenvalues, eigenvectors, keep) per block, where keep
    marks eigenvalues large enough to invert. A 2x2 block built from
    rounding noise in a singular matrix is caught the same way as a tiny
    1x1 pivot.
    """
    p = D.shape[0]
    largest = float(np.max(np.abs(D))) if D.size else 0.0
    tol = rtol * largest

    i = 0
    while i < p:
        size = 2 if i + 1 < p and D[i + 1, i] != 0.0 else 1
        block = slice(i, i + size)
        vals, vecs = np.linalg.eigh(D[block, block])
        yield block, vals, vecs, np.abs(vals) > tol
        i += size


def ldlt_cpu(
    A: NDArray[np.floating[Any]],
    rtol: float = DEFAULT_RTOL,
) -> LDLResult:
    """
    LDL' decomposition of a symmetric matrix.

    Only the lower triangle of A is referenced.

    Args:
        A: Symmetric matrix (p x p), possibly indefinite or singular
        rtol: Relative pivot tolerance for the rank count

    Returns:
        LDLResult with triangular L, block diagonal D, permutation and rank
    """
    if A.shape[0] == 0:
        empty = np.zeros((0, 0), dtype=A.dtype)
        return LDLResult(L=empty, D=empty, perm=np.zeros(0, dtype=np.intp), rank=0)

    lu, D, perm = sla.ldl(A, lower=True, hermitian=True, overwrite_a=False, check_finite=False)
    rank = sum(int(np.sum(keep)) for _, _, _, keep in _diagonal_blocks(D, rtol))
    return LDLResult(L=lu[perm], D=D, perm=perm, rank=rank)


def _solve_block_diagonal(
    D: NDArray[np.floating[Any]],
    z: NDArray[np.floating[Any]],
    rtol: float,
) -> NDArray[np.floating[Any]]:
    """Solve D v = z blockwise with the pseudo-inverse of each block."""
    v = np.zeros_like(z)
    for block, vals, vecs, keep in _diagonal_blocks(D, rtol):
        V = vecs[:, keep]
        v[block] = V @ ((V.T @ z[block]) / vals[keep])
    return v


def ldlt_solve_cpu(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    rtol: float = DEFAULT_RTOL,
) -> tuple[NDArray[np.floating[Any]], int]:
    """
    Solve A x = b for symmetric A via LDL'.

    Algorithm:
        With S = diag(1 / sqrt|A_ii|), factor S A S so its diagonal is one:
        P (S A S) P' = L D L', so with u = P S^-1 x:
        1. Solve L z = P S b (forward substitution, unit diagonal)
        2. Solve D v = z (blockwise, zero pivots pseudo-inverted)
        3. Solve L' u = v (back substitution, unit diagonal)
        4. x = S P' u

    Args:
        A: Symmetric matrix (p x p)
        b: Right-hand side (p,)
        rtol: Relative pivot tolerance, see ldlt_cpu()

    Returns:
        Tuple of (solution x (p,), numerical rank of the scaled A)
    """
    if A.shape[0] == 0:
        return np.zeros_like(b), 0

    # Zero diagonal entries leave their row and column unscaled
    d = np.sqrt(np.abs(np.diag(A)))
    s = np.ones_like(d)
    np.divide(1.0, d, out=s, where=d > np.sqrt(np.finfo(d.dtype).tiny))
    factor = ldlt_cpu(s[:, np.newaxis] * A * s[np.newaxis, :], rtol=rtol)

    z = sla.solve_triangular(factor.L, (s * b)[factor.perm], lower=True, unit_diagonal=True)
    v = _solve_block_diagonal(factor.D, z, rtol)
    u = sla.solve_triangular(factor.L.T, v, lower=False, unit_diagonal=True)

    x = np.empty_like(u)
    x[factor.perm] = u
    return s * x, factor.rank
