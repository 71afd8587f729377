"""
Exception hierarchy for PyMatrixOps.

All exceptions inherit from PyMatrixOpsError so the menu loop can catch any
library-specific error without swallowing programming errors.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are user-facing; the low-level cause is chained
      with ``raise ... from exc`` rather than folded into the message
    - Never catch and re-raise with less information
"""


class PyMatrixOpsError(Exception):
    """Base exception for all PyMatrixOps errors."""
    pass


class ValidationError(PyMatrixOpsError):
    """
    Input validation failed.

    Raised when user-provided inputs (matrix size, configuration values)
    fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a matrix is not square or two operands have
    incompatible shapes.
    """
    pass


class SessionError(PyMatrixOpsError):
    """Session state does not allow the requested operation."""
    pass


class PrerequisiteError(SessionError):
    """
    An operation was invoked before the state it needs exists.

    Attributes:
        operation: Name of the rejected operation
        required_option: Menu option that produces the missing state
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        required_option: int | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.required_option = required_option


class NumericalError(PyMatrixOpsError):
    """
    Numerical computation failed.

    Base class for errors raised by the wrapped linear algebra routines.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or too ill-conditioned to invert.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated 2-norm condition number, if available
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number


class ConvergenceError(PyMatrixOpsError):
    """
    Iterative eigenvalue algorithm failed to converge.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        size: Dimension of the matrix
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        size: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.size = size
