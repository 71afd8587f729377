"""
Session operation payloads.

Each operation wraps one of these in a Result envelope.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class SizeParams:
    """Payload of set_size."""
    size: int
    previous_size: int


@dataclass(frozen=True)
class GenerateParams:
    """Payload of generate: the two new operands."""
    matrix_a: NDArray[np.floating[Any]]
    matrix_b: NDArray[np.floating[Any]]


@dataclass(frozen=True)
class MatrixParams:
    """Payload of multiply, invert and diagonalize: the new current result."""
    matrix: NDArray[np.floating[Any]]


@dataclass(frozen=True)
class DeterminantParams:
    """Payload of determinant."""
    determinant: float


@dataclass(frozen=True)
class EigenParams:
    """
    Payload of eigenvalues.

    Values are complex even when every imaginary part is zero.
    """
    eigenvalues: NDArray[np.complexfloating[Any, Any]]

    @property
    def count(self) -> int:
        return int(self.eigenvalues.shape[0])
