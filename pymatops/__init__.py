"""
pymatops: dense-matrix kernels for statistical computing.

Stateless float64 routines meant to be called from a higher-level
statistical environment: quadratic forms, products, transpose, trace,
determinant, pseudo-inverse, Schur complement and least-squares
coefficients.

Submodules:
    matrix: Products, quadratic forms, determinant, inverse, Schur complement
    regression: Weighted and ordinary least squares coefficients
    core: Exceptions, validation and factorization kernels

Every function is also exported under the name the host environment
calls it by (diagQF, fastDet, fastIP, fastInv, fastMMp, fastT, fastQF,
SchurC, WLS, OLS; tr is unchanged).
"""

__version__ = "0.1.0"

from pymatops.matrix import (
    diag_qf,
    fast_det,
    fast_inv,
    fast_ip,
    fast_mmp,
    fast_qf,
    fast_t,
    schur_c,
    tr,
)
from pymatops.regression import ols, wls

# Host-facing names
diagQF = diag_qf
fastDet = fast_det
fastIP = fast_ip
fastInv = fast_inv
fastMMp = fast_mmp
fastT = fast_t
fastQF = fast_qf
SchurC = schur_c
WLS = wls
OLS = ols

__all__ = [
    "__version__",
    # snake_case API
    "diag_qf",
    "fast_det",
    "fast_inv",
    "fast_ip",
    "fast_mmp",
    "fast_qf",
    "fast_t",
    "schur_c",
    "tr",
    "wls",
    "ols",
    # Host-facing names
    "diagQF",
    "fastDet",
    "fastIP",
    "fastInv",
    "fastMMp",
    "fastT",
    "fastQF",
    "SchurC",
    "WLS",
    "OLS",
]
