"""
Shared compute infrastructure for pymatops.

This module provides precision constants, tolerance tiers and the
factorization kernels shared by the matrix operations and least-squares
solvers. It contains NUMERIC infrastructure only; the public operations
live in pymatops.matrix and pymatops.regression.

Submodules:
    precision: Machine epsilon and rank thresholds
    tolerances: Tolerance tiers for numerical comparison
    linalg: Factorization kernels (LU, Cholesky, LDL', COD)
"""

from pymatops.core.compute.precision import (
    EPSILON_64,
    DEFAULT_RTOL,
    machine_epsilon,
    rank_threshold,
)
from pymatops.core.compute.tolerances import ToleranceTier, CPU_FP64

__all__ = [
    # Precision
    "EPSILON_64",
    "DEFAULT_RTOL",
    "machine_epsilon",
    "rank_threshold",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
]
