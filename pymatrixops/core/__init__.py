"""
Core infrastructure for PyMatrixOps.

Shared abstractions used by the session layer and the CLI.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    config: SessionConfig and environment overrides
    compute: Timing, tolerances, dense linear algebra wrappers
"""

from pymatrixops.core.result import Result
from pymatrixops.core.config import SessionConfig
from pymatrixops.core.exceptions import (
    PyMatrixOpsError,
    ValidationError,
    DimensionError,
    SessionError,
    PrerequisiteError,
    NumericalError,
    SingularMatrixError,
    ConvergenceError,
)

__all__ = [
    # Result
    "Result",
    # Config
    "SessionConfig",
    # Exceptions
    "PyMatrixOpsError",
    "ValidationError",
    "DimensionError",
    "SessionError",
    "PrerequisiteError",
    "NumericalError",
    "SingularMatrixError",
    "ConvergenceError",
]
