"""
Matrix products, quadratic forms, transpose and trace.

Each function validates its inputs at the boundary and is otherwise a
single NumPy expression. Results are freshly allocated float64 arrays.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatops.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_conformable,
    check_consistent_length,
    check_square,
)


def diag_qf(Z: ArrayLike, w: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Diagonal quadratic form.

    Computes A = Z'WZ = sum_i z_i w_i z_i' where W = diag(w), without
    forming W. Negative weights are not special-cased.

    Args:
        Z: Design matrix (n x p)
        w: Weight vector (n,)

    Returns:
        Symmetric matrix (p x p)

    Raises:
        DimensionError: If len(w) != rows(Z)

    Example:
        >>> diag_qf([[1, 0], [0, 1], [1, 1]], [1, 2, 3])
        array([[4., 3.],
               [3., 5.]])
    """
    Z_arr = check_array(Z, 'Z')
    w_arr = check_array(w, 'w')
    check_2d(Z_arr, 'Z')
    check_1d(w_arr, 'w')
    check_consistent_length(Z_arr, w_arr, names=('Z', 'w'))

    # Row-scale Z instead of building diag(w)
    return Z_arr.T @ (w_arr[:, np.newaxis] * Z_arr)


def fast_ip(A: ArrayLike, B: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Matrix inner product A'B.

    Args:
        A: Matrix (n x p)
        B: Matrix (n x q)

    Returns:
        Matrix (p x q)

    Raises:
        DimensionError: If rows(A) != rows(B)
    """
    A_arr = check_array(A, 'A')
    B_arr = check_array(B, 'B')
    check_2d(A_arr, 'A')
    check_2d(B_arr, 'B')
    check_consistent_length(A_arr, B_arr, names=('A', 'B'))
    return A_arr.T @ B_arr


def fast_mmp(A: ArrayLike, B: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Matrix-matrix product AB.

    Args:
        A: Matrix (n x p)
        B: Matrix (p x q)

    Returns:
        Matrix (n x q)

    Raises:
        DimensionError: If cols(A) != rows(B)
    """
    A_arr = check_array(A, 'A')
    B_arr = check_array(B, 'B')
    check_2d(A_arr, 'A')
    check_2d(B_arr, 'B')
    check_conformable(A_arr, B_arr, names=('A', 'B'))
    return A_arr @ B_arr


def fast_t(A: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Matrix transpose.

    Returns a new contiguous array rather than a view, so the result
    never aliases the caller's input.

    Args:
        A: Matrix (n x p)

    Returns:
        Matrix (p x n)
    """
    A_arr = check_array(A, 'A')
    check_2d(A_arr, 'A')
    return A_arr.T.copy(order='C')


def tr(A: ArrayLike) -> float:
    """
    Matrix trace.

    Sums the main diagonal. A non-square matrix is not rejected: the sum
    runs over its min(n, p) leading diagonal entries, the same diagonal
    NumPy's diagonal() reads.

    Args:
        A: Matrix (n x p), normally square

    Returns:
        Sum of diagonal entries
    """
    A_arr = check_array(A, 'A')
    check_2d(A_arr, 'A')
    return float(np.trace(A_arr))


def fast_qf(X: ArrayLike, A: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Quadratic form X'AX.

    Args:
        X: Matrix (n x p)
        A: Square matrix (n x n)

    Returns:
        Matrix (p x p)

    Raises:
        DimensionError: If A is not square or rows(X) != rows(A)

    Example:
        >>> fast_qf(np.eye(2), [[2, 0], [0, 3]])
        array([[2., 0.],
               [0., 3.]])
    """
    X_arr = check_array(X, 'X')
    A_arr = check_array(A, 'A')
    check_2d(X_arr, 'X')
    check_square(A_arr, 'A')
    check_consistent_length(X_arr, A_arr, names=('X', 'A'))
    return X_arr.T @ A_arr @ X_arr
