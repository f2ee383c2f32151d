"""
Numerical precision constants and utilities.

Provides machine epsilon, the rank thresholds used by the rank-revealing
factorizations and the pivot tolerance of the LDL' solve.
"""

import numpy as np


# Machine epsilon for float64
EPSILON_64: float = np.finfo(np.float64).eps  # ~2.22e-16

# Relative pivot tolerance for semidefinite solves (cond(Z'Z) = 1e12)
DEFAULT_RTOL: float = 1e-12


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def rank_threshold(shape: tuple[int, ...], dtype: np.dtype | type = np.float64) -> float:
    """
    Default relative threshold for numerical rank decisions.

    A pivot is treated as nonzero when its magnitude exceeds this value
    times the largest pivot. The default is epsilon scaled by the larger
    dimension, the same convention numpy.linalg.matrix_rank uses.

    Args:
        shape: Shape of the matrix being factorized
        dtype: Floating dtype of the matrix

    Returns:
        Relative threshold
    """
    return machine_epsilon(dtype) * max(1, *shape)


def numerical_rank(pivots: np.ndarray, threshold: float) -> int:
    """
    Count pivots that are nonzero relative to the largest one.

    Args:
        pivots: Absolute values of the factorization pivots, largest first
                for pivoted decompositions (order does not matter here)
        threshold: Relative threshold, see rank_threshold()

    Returns:
        Number of pivots with |pivot| > threshold * max|pivot|
    """
    if pivots.size == 0:
        return 0
    largest = float(np.max(pivots))
    if largest <= 0.0:
        return 0
    return int(np.sum(pivots > threshold * largest))
