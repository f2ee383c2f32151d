"""
LU decomposition and determinant.

Uses LAPACK getrf (via SciPy) with partial pivoting. The determinant is
read off the factorization; singular input simply yields a zero pivot
and therefore a zero determinant.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
import scipy.linalg as sla


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU decomposition with partial pivoting.

    Attributes:
        lu: Packed L (strictly lower, unit diagonal implied) and U factors (p x p)
        piv: LAPACK pivot indices; row i was interchanged with row piv[i]
        sign: Sign of the row permutation, +1.0 or -1.0
    """
    lu: NDArray[np.floating[Any]]
    piv: NDArray[np.integer[Any]]
    sign: float


def lu_cpu(A: NDArray[np.floating[Any]]) -> LUResult:
    """
    LU decomposition using LAPACK (via SciPy).

    Computes P A = L U. Exactly singular input is not an error: SciPy emits
    a LinAlgWarning and U carries a zero on its diagonal.

    Args:
        A: Square matrix (p x p)

    Returns:
        LUResult with packed factors, pivots and permutation sign
    """
    lu, piv = sla.lu_factor(A, overwrite_a=False, check_finite=False)
    n_swaps = int(np.sum(piv != np.arange(piv.shape[0])))
    sign = -1.0 if n_swaps % 2 else 1.0
    return LUResult(lu=lu, piv=piv, sign=sign)


def lu_determinant(A: NDArray[np.floating[Any]]) -> float:
    """
    Determinant via LU decomposition.

    det(A) = sign(P) * prod(diag(U)). A 0 x 0 matrix has determinant 1.

    Args:
        A: Square matrix (p x p)

    Returns:
        Determinant as a Python float (0.0 for exactly singular A)
    """
    if A.shape[0] == 0:
        return 1.0
    result = lu_cpu(A)
    return float(result.sign * np.prod(np.diag(result.lu)))
