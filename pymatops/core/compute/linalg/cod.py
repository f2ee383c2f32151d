"""
Complete orthogonal decomposition and pseudo-inverse.

A rank-revealing factorization built from two QR decompositions:

    1. Column-pivoted QR:      A P = Q R
    2. QR of the leading rows: R[:r, :]' = Z S

so that A P = Q_r T Z' with T = S' lower triangular (r x r) and r the
numerical rank. The Moore-Penrose pseudo-inverse follows directly as
A+ = P Z T^-1 Q_r', and is well defined for singular and non-square A.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
import scipy.linalg as sla

from pymatops.core.compute.precision import numerical_rank, rank_threshold


@dataclass(frozen=True)
class CODResult:
    """
    Result of complete orthogonal decomposition.

    Attributes:
        Q: Orthonormal columns spanning the range of A (m x r)
        T: Lower triangular core factor (r x r)
        Z: Orthonormal columns spanning the row space of A P (n x r)
        perm: Column permutation; A[:, perm] = Q T Z'
        rank: Numerical rank r
    """
    Q: NDArray[np.floating[Any]]
    T: NDArray[np.floating[Any]]
    Z: NDArray[np.floating[Any]]
    perm: NDArray[np.integer[Any]]
    rank: int


def cod_cpu(
    A: NDArray[np.floating[Any]],
    threshold: float | None = None,
) -> CODResult:
    """
    Complete orthogonal decomposition using LAPACK (via SciPy).

    Args:
        A: Matrix to decompose (m x n), any shape
        threshold: Relative pivot threshold for the rank decision. A pivot
                   |R[i, i]| counts as nonzero when it exceeds threshold
                   times |R[0, 0]|. Defaults to eps * max(m, n).

    Returns:
        CODResult with Q, T, Z, column permutation and numerical rank
    """
    m, n = A.shape
    if threshold is None:
        threshold = rank_threshold(A.shape, A.dtype)

    if A.size == 0:
        return CODResult(
            Q=np.zeros((m, 0), dtype=A.dtype),
            T=np.zeros((0, 0), dtype=A.dtype),
            Z=np.zeros((n, 0), dtype=A.dtype),
            perm=np.arange(n),
            rank=0,
        )

    Q, R, perm = sla.qr(A, mode='economic', pivoting=True, check_finite=False)

    # Pivoted QR orders |diag(R)| non-increasingly
    rank = numerical_rank(np.abs(np.diag(R)), threshold)

    if rank == 0:
        return CODResult(
            Q=Q[:, :0],
            T=np.zeros((0, 0), dtype=A.dtype),
            Z=np.zeros((n, 0), dtype=A.dtype),
            perm=perm,
            rank=0,
        )

    Z, S = sla.qr(R[:rank, :].T, mode='economic', check_finite=False)

    return CODResult(
        Q=Q[:, :rank],
        T=S.T,
        Z=Z,
        perm=perm,
        rank=rank,
    )


def cod_pseudo_inverse(
    A: NDArray[np.floating[Any]],
    threshold: float | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Moore-Penrose pseudo-inverse via complete orthogonal decomposition.

    Args:
        A: Matrix (m x n)
        threshold: Relative rank threshold, see cod_cpu()

    Returns:
        Pseudo-inverse (n x m). Zero matrix if A has numerical rank 0.
    """
    m, n = A.shape
    cod = cod_cpu(A, threshold=threshold)

    pinv = np.zeros((n, m), dtype=A.dtype)
    if cod.rank == 0:
        return pinv

    # T^-1 Q' by forward substitution, then map back through Z and P
    TinvQt = sla.solve_triangular(cod.T, cod.Q.T, lower=True, check_finite=False)
    pinv[cod.perm, :] = cod.Z @ TinvQt
    return pinv
