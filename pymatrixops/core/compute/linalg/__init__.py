"""
Linear algebra kernels for PyMatrixOps.

All functions follow these conventions:
    - Arithmetic is delegated to NumPy/SciPy (LAPACK under the hood)
    - Operands are validated before the library call
    - Library failures are re-raised as PyMatrixOps exceptions with the
      original error chained as the cause

Submodules:
    dense: product, inverse, determinant, eigenvalues, diagonal extraction
"""

from pymatrixops.core.compute.linalg.dense import (
    InverseResult,
    random_uniform,
    matmul,
    invert,
    determinant,
    eigenvalues,
    diagonal_part,
)

__all__ = [
    "InverseResult",
    "random_uniform",
    "matmul",
    "invert",
    "determinant",
    "eigenvalues",
    "diagonal_part",
]
