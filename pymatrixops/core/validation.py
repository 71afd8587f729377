"""
Input validation utilities for PyMatrixOps.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrixops.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a floating-point numpy array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    # Complex input is allowed through; integers are promoted
    if not np.issubdtype(result.dtype, np.inexact):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is a non-empty square matrix.

    Raises:
        DimensionError: If array is not 2D or rows != columns
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )
    n, m = array.shape
    if n != m or n == 0:
        raise DimensionError(
            f"{name}: expected a non-empty square matrix, got shape {array.shape}"
        )


def check_compatible(
    left: NDArray[np.floating[Any]],
    right: NDArray[np.floating[Any]],
    names: tuple[str, str],
) -> None:
    """
    Verify two matrices can be multiplied (left columns == right rows).

    Raises:
        DimensionError: If inner dimensions disagree
    """
    if left.shape[1] != right.shape[0]:
        raise DimensionError(
            f"Cannot multiply {names[0]} {left.shape} by {names[1]} {right.shape}: "
            f"inner dimensions {left.shape[1]} and {right.shape[0]} differ"
        )


def check_size(size: int, max_size: int, name: str = "size") -> int:
    """
    Verify a matrix dimension lies in [1, max_size].

    Args:
        size: Candidate dimension
        max_size: Inclusive upper bound
        name: Parameter name for error messages

    Returns:
        The size as a plain int

    Raises:
        ValidationError: If size is not an integer or is out of range
    """
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise ValidationError(f"{name}: expected an integer, got {type(size).__name__}")
    if size < 1 or size > max_size:
        raise ValidationError(
            f"Invalid size. Must be between 1 and {max_size}. Got {size}."
        )
    return int(size)


def parse_size(text: str | None, max_size: int) -> int:
    """
    Parse user-typed text into a matrix dimension.

    Surrounding whitespace is ignored; anything else that is not a base-10
    integer is rejected.

    Raises:
        ValidationError: If text is empty, not an integer, or out of range
    """
    if text is None or not text.strip():
        raise ValidationError(f"Invalid size. Must be between 1 and {max_size}.")
    try:
        value = int(text.strip())
    except ValueError as e:
        raise ValidationError(
            f"Invalid size. Must be between 1 and {max_size}. Got {text.strip()!r}."
        ) from e
    return check_size(value, max_size)
