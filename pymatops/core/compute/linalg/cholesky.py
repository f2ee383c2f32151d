"""
Cholesky decomposition and SPD solves.

Used by the Schur complement (solve against the nuisance information)
and ordinary least squares (solve the normal equations). The factorization
never falls back to another method: a matrix that is not positive definite
is reported, not repaired.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
import scipy.linalg as sla

from pymatops.core.exceptions import NotPositiveDefiniteError


@dataclass(frozen=True)
class CholeskyResult:
    """
    Result of Cholesky decomposition.

    Attributes:
        L: Lower triangular factor with A = L L' (p x p)
    """
    L: NDArray[np.floating[Any]]


def cholesky_cpu(A: NDArray[np.floating[Any]], name: str = 'A') -> CholeskyResult:
    """
    Cholesky decomposition using LAPACK potrf (via SciPy).

    Only the lower triangle of A is referenced.

    Args:
        A: Symmetric positive definite matrix (p x p)
        name: Matrix name for error messages

    Returns:
        CholeskyResult with the lower factor

    Raises:
        NotPositiveDefiniteError: If the factorization hits a non-positive pivot
    """
    try:
        L = sla.cholesky(A, lower=True, overwrite_a=False, check_finite=False)
    except np.linalg.LinAlgError as e:
        min_eigenvalue = float(np.linalg.eigvalsh(A)[0])
        raise NotPositiveDefiniteError(
            f"{name} is not positive definite (min eigenvalue {min_eigenvalue:.3g}); "
            f"Cholesky factorization failed: {e}",
            matrix_name=name,
            min_eigenvalue=min_eigenvalue,
        ) from e
    return CholeskyResult(L=L)


def cholesky_solve_cpu(
    A: NDArray[np.floating[Any]],
    B: NDArray[np.floating[Any]],
    name: str = 'A',
) -> NDArray[np.floating[Any]]:
    """
    Solve A X = B for symmetric positive definite A.

    Algorithm:
        1. A = L L'
        2. Solve L Z = B (forward substitution)
        3. Solve L' X = Z (back substitution)

    Args:
        A: Symmetric positive definite matrix (p x p)
        B: Right-hand side (p,) or (p x k)
        name: Matrix name for error messages

    Returns:
        Solution X with the same shape as B

    Raises:
        NotPositiveDefiniteError: If A is not positive definite
    """
    if A.shape[0] == 0:
        return np.zeros_like(B)
    factor = cholesky_cpu(A, name=name)
    return sla.cho_solve((factor.L, True), B, overwrite_b=False, check_finite=False)
