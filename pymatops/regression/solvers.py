"""
Least-squares coefficient solvers.

Both solvers form the normal equations and factor them; they return point
coefficients only. The two paths stay numerically distinct on purpose:

    wls: Z'WZ b = Z'Wy via LDL', tolerates a semidefinite Z'WZ
    ols: Z'Z b = Z'y via Cholesky, requires Z of full column rank

Neither falls back to a pseudo-inverse; use pymatops.matrix.fast_inv for
that.
"""

import warnings
import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatops.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
)
from pymatops.core.compute.linalg.cholesky import cholesky_solve_cpu
from pymatops.core.compute.linalg.ldlt import ldlt_solve_cpu


def wls(Z: ArrayLike, w: ArrayLike, y: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Weighted least squares coefficients.

    Solves:
        beta = (Z'WZ)^-1 Z'Wy
    with W = diag(w) supplied as a vector.

    Algorithm:
        1. A = Z'WZ (row-scaled Z, W never formed)
        2. b = Z'Wy
        3. Solve A beta = b via LDL' with Bunch-Kaufman pivoting, on A
           scaled to unit diagonal so column units do not affect the rank

    Weights may be negative; A is then indefinite and the LDL' solve still
    applies. If A is numerically singular the zero pivots of D are skipped, a
    RuntimeWarning is issued and the resulting (non-unique) solution is
    returned.

    Args:
        Z: Design matrix (n x p)
        w: Weight vector (n,)
        y: Response vector (n,)

    Returns:
        Coefficient vector (p,)

    Raises:
        DimensionError: If Z, w and y have inconsistent lengths

    Example:
        >>> beta = wls(Z, np.ones(len(y)), y)  # same as ols(Z, y)
    """
    # === Input Validation ===
    Z_arr = check_array(Z, 'Z')
    w_arr = check_array(w, 'w')
    y_arr = check_array(y, 'y')
    check_2d(Z_arr, 'Z')
    check_1d(w_arr, 'w')
    check_1d(y_arr, 'y')
    check_consistent_length(Z_arr, w_arr, y_arr, names=('Z', 'w', 'y'))

    # === Normal Equations ===
    WZ = w_arr[:, np.newaxis] * Z_arr
    A = Z_arr.T @ WZ
    b = WZ.T @ y_arr

    # === Solve ===
    p = Z_arr.shape[1]
    beta, rank = ldlt_solve_cpu(A, b)
    if rank < p:
        warnings.warn(
            f"Z'WZ is numerically singular (rank {rank} of {p}); "
            f"zero pivots were skipped and the coefficients are not unique.",
            RuntimeWarning,
            stacklevel=2,
        )
    return beta


def ols(Z: ArrayLike, y: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Ordinary least squares coefficients.

    Solves:
        beta = (Z'Z)^-1 Z'y

    Algorithm:
        1. A = Z'Z, b = Z'y
        2. A = L L' (Cholesky)
        3. Solve L z = b, then L' beta = z

    Z must have full column rank. A rank-deficient Z makes the Cholesky
    factorization fail, or, when rounding leaves a tiny positive pivot,
    yields meaningless coefficients. There is no fallback.

    Args:
        Z: Design matrix (n x p)
        y: Response vector (n,)

    Returns:
        Coefficient vector (p,)

    Raises:
        DimensionError: If Z and y have inconsistent lengths
        NotPositiveDefiniteError: If Z'Z is not positive definite

    Example:
        >>> ols([[1, 1], [1, 2], [1, 3]], [2, 2, 4])
        array([0.66666667, 1.        ])
    """
    # === Input Validation ===
    Z_arr = check_array(Z, 'Z')
    y_arr = check_array(y, 'y')
    check_2d(Z_arr, 'Z')
    check_1d(y_arr, 'y')
    check_consistent_length(Z_arr, y_arr, names=('Z', 'y'))

    # === Normal Equations ===
    A = Z_arr.T @ Z_arr
    b = Z_arr.T @ y_arr

    # === Solve ===
    return cholesky_solve_cpu(A, b, name="Z'Z")
