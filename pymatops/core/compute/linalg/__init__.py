"""
Linear algebra kernels for pymatops.

Factorizations shared by the matrix operations and the least-squares
solvers.

All functions follow these conventions:
    - NumPy/SciPy only (LAPACK under the hood)
    - Inputs are never overwritten
    - Each decomposition returns a structured result dataclass
    - Factorization failures that the caller must know about are raised
      immediately with clear messages; rank deficiency that the method
      tolerates by construction is reported through the result's rank

Submodules:
    lu: LU decomposition and determinant
    cholesky: Cholesky decomposition and SPD solve
    ldlt: Symmetric LDL' decomposition and semidefinite-tolerant solve
    cod: Complete orthogonal decomposition and pseudo-inverse
"""

from pymatops.core.compute.linalg.lu import (
    LUResult,
    lu_cpu,
    lu_determinant,
)
from pymatops.core.compute.linalg.cholesky import (
    CholeskyResult,
    cholesky_cpu,
    cholesky_solve_cpu,
)
from pymatops.core.compute.linalg.ldlt import (
    LDLResult,
    ldlt_cpu,
    ldlt_solve_cpu,
)
from pymatops.core.compute.linalg.cod import (
    CODResult,
    cod_cpu,
    cod_pseudo_inverse,
)

__all__ = [
    # LU
    "LUResult",
    "lu_cpu",
    "lu_determinant",
    # Cholesky
    "CholeskyResult",
    "cholesky_cpu",
    "cholesky_solve_cpu",
    # LDL'
    "LDLResult",
    "ldlt_cpu",
    "ldlt_solve_cpu",
    # Complete orthogonal decomposition
    "CODResult",
    "cod_cpu",
    "cod_pseudo_inverse",
]
