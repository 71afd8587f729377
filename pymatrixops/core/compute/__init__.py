"""
Shared compute infrastructure for PyMatrixOps.

Timing utilities, numerical thresholds and the dense linear algebra
wrappers used by the session layer.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical thresholds
    linalg: Dense linear algebra kernels
"""

from pymatrixops.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
