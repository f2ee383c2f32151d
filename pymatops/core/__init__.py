"""
Core infrastructure for pymatops.

This module provides shared abstractions and numeric infrastructure used by
the public operation modules (matrix, regression).

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Precision constants, tolerance tiers, factorization kernels
"""

from pymatops.core.exceptions import (
    PyMatOpsError,
    ValidationError,
    DimensionError,
    NumericalError,
    NotPositiveDefiniteError,
)

__all__ = [
    "PyMatOpsError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "NotPositiveDefiniteError",
]
