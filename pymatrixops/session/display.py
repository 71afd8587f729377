"""
Text formatting for the interactive menu.

Pure functions returning strings; the CLI decides where they are written.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrixops.core.compute.tolerances import IMAGINARY_TOLERANCE

BANNER_WIDTH = 50
SECTION_RULE_WIDTH = 60
EIGEN_RULE_WIDTH = 40

MENU_OPTIONS = (
    "Input Size",
    "Generate Random Matrices",
    "Multiply Matrices",
    "Invert Result Matrix",
    "Calculate Determinant",
    "Display Eigenvalues",
    "Make Diagonal Matrix",
    "Exit",
)


def format_menu(size: int) -> str:
    """Menu banner with the current size and the numbered options."""
    rule = "=" * BANNER_WIDTH
    lines = [
        rule,
        "MATRIX OPERATIONS MENU".rjust(32),
        rule,
        f"Current size: {size}x{size}",
        rule,
    ]
    lines.extend(f"({i}) {label}" for i, label in enumerate(MENU_OPTIONS, start=1))
    lines.append(rule)
    return "\n".join(lines)


def format_matrix_section(
    title: str,
    matrix: NDArray[np.floating[Any]],
    size: int = 5,
) -> str:
    """
    Top-left k x k block of `matrix`, k = min(size, n).

    Each entry is printed with two decimals, right-aligned in ten columns
    and followed by a single space.
    """
    k = min(size, matrix.shape[0], matrix.shape[1])
    lines = [
        f"{title} (first {k}x{k} section):",
        "-" * SECTION_RULE_WIDTH,
    ]
    for row in matrix[:k, :k]:
        lines.append("".join(f"{float(value):10.2f} " for value in row))
    return "\n".join(lines)


def format_eigenvalue(
    index: int,
    value: complex,
    imag_tol: float = IMAGINARY_TOLERANCE,
) -> str:
    """One eigenvalue line: ``λ 1:    12.3456 + 0.5000i``."""
    value = complex(value)
    line = f"λ{index:2d}: {value.real:10.4f}"
    if abs(value.imag) > imag_tol:
        sign = "-" if value.imag < 0 else "+"
        line += f" {sign} {abs(value.imag):.4f}i"
    return line


def format_eigenvalues(
    values: NDArray[np.complexfloating[Any, Any]],
    count: int = 10,
    imag_tol: float = IMAGINARY_TOLERANCE,
) -> str:
    """The first `count` eigenvalues, in library order, one per line."""
    shown = min(count, len(values))
    lines = [
        f"First {shown} eigenvalues (real parts):",
        "-" * EIGEN_RULE_WIDTH,
    ]
    lines.extend(
        format_eigenvalue(i + 1, values[i], imag_tol) for i in range(shown)
    )
    return "\n".join(lines)


def format_determinant(det: float) -> str:
    """Scientific notation with six fractional digits."""
    return f"{det:.6E}"


def format_elapsed(seconds: float | None) -> str:
    """Elapsed time in whole milliseconds."""
    if seconds is None:
        return "n/a"
    return f"{int(seconds * 1000)} ms"
