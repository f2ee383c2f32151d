"""
Tolerance tiers for numerical validation.

Defines precision expectations when comparing kernel output against a
reference computation (NumPy, or a hand-computed value). Only the CPU FP64
tier exists: every kernel runs in double precision on well-conditioned
reference problems.

Used by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Well-conditioned problems: results agree with a LAPACK reference
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned',
)
