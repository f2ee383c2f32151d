"""
Exception hierarchy for pymatops.

All exceptions inherit from PyMatOpsError to allow catching any
library-specific error. Validation errors additionally inherit from
ValueError so callers that only know NumPy's conventions still catch them.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatOpsError(Exception):
    """Base exception for all pymatops errors."""
    pass


class ValidationError(PyMatOpsError, ValueError):
    """
    Input validation failed.

    Raised when user-provided inputs cannot be used as numeric arrays.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when operands are not conformable for the requested operation.
    """
    pass


class NumericalError(PyMatOpsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.

    Raised when a Cholesky factorization fails, e.g. the nuisance
    information I22 in a Schur complement or Z'Z for a rank-deficient
    design in ordinary least squares.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        min_eigenvalue: Minimum eigenvalue, if computed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        min_eigenvalue: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.min_eigenvalue = min_eigenvalue
