"""
Dense matrix operations.

Stateless kernels over float64 matrices: products, quadratic forms,
transpose, trace, determinant, pseudo-inverse and Schur complement.

Public API:
    diag_qf(Z, w) -> Z'WZ
    fast_ip(A, B) -> A'B
    fast_mmp(A, B) -> AB
    fast_t(A) -> A'
    tr(A) -> trace
    fast_qf(X, A) -> X'AX
    fast_det(A) -> determinant
    fast_inv(A) -> pseudo-inverse
    schur_c(I11, I22, I12) -> I11 - I12 I22^-1 I12'

Example:
    >>> from pymatops.matrix import schur_c
    >>> K = schur_c(I11, I22, I12)
"""

from pymatops.matrix.products import (
    diag_qf,
    fast_ip,
    fast_mmp,
    fast_qf,
    fast_t,
    tr,
)
from pymatops.matrix.decompositions import fast_det, fast_inv, schur_c

__all__ = [
    "diag_qf",
    "fast_ip",
    "fast_mmp",
    "fast_qf",
    "fast_t",
    "tr",
    "fast_det",
    "fast_inv",
    "schur_c",
]
