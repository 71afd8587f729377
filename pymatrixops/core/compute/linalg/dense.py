"""
Dense matrix routines.

Thin wrappers over NumPy / SciPy (LAPACK under the hood). Each wrapper
validates its operand, delegates the arithmetic to the library and
translates library failures into the PyMatrixOps exception hierarchy,
chaining the original error so callers can report it.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
import scipy.linalg as sla
from numpy.typing import NDArray

from pymatrixops.core.exceptions import (
    ConvergenceError,
    NumericalError,
    SingularMatrixError,
)
from pymatrixops.core.validation import (
    check_array,
    check_compatible,
    check_finite,
    check_square,
)
from pymatrixops.core.compute.tolerances import SINGULAR_RCOND


@dataclass(frozen=True)
class InverseResult:
    """
    Result of a matrix inversion.

    Attributes:
        inverse: The inverse matrix (n x n)
        condition_number: 2-norm condition number of the input
    """
    inverse: NDArray[np.floating[Any]]
    condition_number: float


def _checked(matrix, name: str) -> NDArray[np.floating[Any]]:
    """Convert to a finite, square floating-point array."""
    matrix = check_array(matrix, name)
    check_square(matrix, name)
    check_finite(matrix, name)
    return matrix


def random_uniform(
    rng: np.random.Generator,
    size: int,
    low: float,
    high: float,
    decimals: int,
) -> NDArray[np.floating[Any]]:
    """
    Square matrix of independent uniform draws rounded to `decimals` places.

    Rounding can land exactly on `high`, so entries lie in the closed
    interval [low, high].
    """
    values = rng.uniform(low, high, size=(size, size))
    return np.round(values, decimals)


def matmul(
    left: NDArray[np.floating[Any]],
    right: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """Standard matrix product ``left @ right``."""
    check_compatible(left, right, ('A', 'B'))
    return left @ right


def invert(
    matrix: NDArray[np.floating[Any]],
    name: str = "matrix",
) -> InverseResult:
    """
    Inverse via LU factorisation (LAPACK getrf/getri).

    The 2-norm condition number is estimated first; matrices whose
    reciprocal condition number falls below machine epsilon are rejected
    even when LAPACK would return garbage without complaint.

    Raises:
        SingularMatrixError: If the matrix is singular, numerically
            singular, or the computed inverse is not finite
    """
    matrix = _checked(matrix, name)
    message = "Matrix is singular (non-invertible) or ill-conditioned."

    try:
        condition_number = float(np.linalg.cond(matrix))
    except np.linalg.LinAlgError as e:
        raise SingularMatrixError(message, matrix_name=name) from e

    if not np.isfinite(condition_number) or 1.0 / condition_number < SINGULAR_RCOND:
        cause = np.linalg.LinAlgError(
            f"condition number {condition_number:.3e} exceeds 1/eps"
        )
        raise SingularMatrixError(
            message, matrix_name=name, condition_number=condition_number
        ) from cause

    try:
        inverse = sla.inv(matrix)
    except (np.linalg.LinAlgError, ValueError) as e:
        raise SingularMatrixError(
            message, matrix_name=name, condition_number=condition_number
        ) from e

    if not np.all(np.isfinite(inverse)):
        cause = np.linalg.LinAlgError("inverse contains non-finite entries")
        raise SingularMatrixError(
            message, matrix_name=name, condition_number=condition_number
        ) from cause

    return InverseResult(inverse=inverse, condition_number=condition_number)


def determinant(matrix: NDArray[np.floating[Any]], name: str = "matrix") -> float:
    """
    Determinant via LU factorisation.

    May overflow to +/-inf for large matrices; callers decide whether
    that is an error.

    Raises:
        NumericalError: If LAPACK rejects the input
    """
    matrix = _checked(matrix, name)
    try:
        return float(sla.det(matrix))
    except (np.linalg.LinAlgError, ValueError) as e:
        raise NumericalError(f"Determinant computation failed for {name}.") from e


def eigenvalues(
    matrix: NDArray[np.floating[Any]],
    name: str = "matrix",
) -> NDArray[np.complexfloating[Any, Any]]:
    """
    Eigenvalues of a general (non-symmetric) matrix via LAPACK geev.

    Returns:
        Complex array of length n, in the order LAPACK produces them

    Raises:
        ConvergenceError: If the QR algorithm fails to converge
    """
    matrix = _checked(matrix, name)
    try:
        values = sla.eigvals(matrix)
    except (np.linalg.LinAlgError, ValueError) as e:
        raise ConvergenceError(
            "Eigenvalue computation failed (matrix may be defective).",
            matrix_name=name,
            size=matrix.shape[0],
        ) from e
    return np.asarray(values, dtype=np.complex128)


def diagonal_part(matrix: NDArray[np.floating[Any]], name: str = "matrix") -> NDArray[np.floating[Any]]:
    """Matrix holding the diagonal of `matrix`, with exact zeros elsewhere."""
    matrix = _checked(matrix, name)
    return np.diag(np.diag(matrix)).astype(matrix.dtype, copy=False)
