"""
Least-squares coefficient solvers.

Public API:
    wls(Z, w, y) -> coefficients of the weighted least squares fit
    ols(Z, y) -> coefficients of the ordinary least squares fit

Only point coefficients are computed; standard errors, residual
diagnostics and model summaries belong to the calling environment.

Example:
    >>> from pymatops.regression import ols
    >>> beta = ols(Z, y)
"""

from pymatops.regression.solvers import wls, ols

__all__ = [
    "wls",
    "ols",
]
