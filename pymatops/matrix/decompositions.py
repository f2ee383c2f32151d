"""
Decomposition-backed matrix operations: determinant, pseudo-inverse and
Schur complement.

These delegate to the factorization kernels in
pymatops.core.compute.linalg. Degenerate input is handled the way each
factorization naturally handles it: the determinant of a singular matrix
is zero, the pseudo-inverse is defined for any matrix, and the Schur
complement refuses a nuisance information that is not positive definite.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatops.core.exceptions import DimensionError
from pymatops.core.validation import check_2d, check_array, check_square
from pymatops.core.compute.linalg.lu import lu_determinant
from pymatops.core.compute.linalg.cod import cod_pseudo_inverse
from pymatops.core.compute.linalg.cholesky import cholesky_solve_cpu


def fast_det(A: ArrayLike) -> float:
    """
    Matrix determinant via LU decomposition.

    No conditioning check is made: singular input gives 0.0 (SciPy emits
    a LinAlgWarning for an exactly zero pivot) and near-singular input
    gives a value near zero.

    Args:
        A: Square matrix (p x p)

    Returns:
        Determinant

    Raises:
        DimensionError: If A is not square
    """
    A_arr = check_array(A, 'A')
    check_square(A_arr, 'A')
    return lu_determinant(A_arr)


def fast_inv(A: ArrayLike, *, threshold: float | None = None) -> NDArray[np.floating[Any]]:
    """
    Matrix (pseudo-)inverse.

    Computes the Moore-Penrose pseudo-inverse via complete orthogonal
    decomposition. For invertible square A this is the ordinary inverse;
    for singular or non-square A it is the minimum-norm least-squares
    generalized inverse rather than an error.

    Args:
        A: Matrix (m x n)
        threshold: Relative rank threshold for the pivoted QR. Pivots below
                   threshold * largest pivot are treated as zero. Defaults
                   to eps * max(m, n).

    Returns:
        Matrix (n x m)
    """
    A_arr = check_array(A, 'A')
    check_2d(A_arr, 'A')
    return cod_pseudo_inverse(A_arr, threshold=threshold)


def schur_c(
    I11: ArrayLike,
    I22: ArrayLike,
    I12: ArrayLike,
) -> NDArray[np.floating[Any]]:
    """
    Schur complement (efficient information).

    Computes K = I11 - I12 I22^-1 I12' by solving I22 X = I12' with a
    Cholesky factorization of I22; I22 is never inverted explicitly.

    Args:
        I11: Information of the target parameter (k x k)
        I22: Information of the nuisance parameter (m x m), symmetric
             positive definite
        I12: Cross information between target and nuisance (k x m)

    Returns:
        Efficient information for the target parameter (k x k)

    Raises:
        DimensionError: If the blocks do not fit together
        NotPositiveDefiniteError: If I22 is not positive definite
    """
    I11_arr = check_array(I11, 'I11')
    I22_arr = check_array(I22, 'I22')
    I12_arr = check_array(I12, 'I12')
    check_square(I11_arr, 'I11')
    check_square(I22_arr, 'I22')
    check_2d(I12_arr, 'I12')

    k = I11_arr.shape[0]
    m = I22_arr.shape[0]
    if I12_arr.shape != (k, m):
        raise DimensionError(
            f"I12: expected shape {(k, m)} from I11 {I11_arr.shape} and "
            f"I22 {I22_arr.shape}, got {I12_arr.shape}"
        )

    # X = I22^-1 I12' (m x k)
    X = cholesky_solve_cpu(I22_arr, I12_arr.T, name='I22')
    return I11_arr - I12_arr @ X
