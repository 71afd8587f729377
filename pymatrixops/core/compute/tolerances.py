"""
Numerical thresholds used by the dense linear algebra wrappers.

Kept in one place so the session, the display layer and the test suite
agree on what counts as "zero", "singular" and "ill-conditioned".
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double-precision reference for comparing LAPACK results
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision',
)

# Products of random [-10, 10] matrices are moderately conditioned at best;
# inverse round-trips lose several digits.
CPU_FP64_ROUND_TRIP = ToleranceTier(
    rtol=1e-6,
    atol=1e-6,
    name='cpu_fp64_round_trip',
    description='inverse(M) @ M compared with the identity',
)

# Imaginary parts at or below this magnitude are displayed as real.
IMAGINARY_TOLERANCE = 1e-10

# Reciprocal condition number below which a matrix is treated as singular.
SINGULAR_RCOND = float(np.finfo(np.float64).eps)

# Condition number above which an inverse is still returned but flagged.
ILL_CONDITIONED_THRESHOLD = 1e10
