"""
Generic result container for all PyMatrixOps operations.

The Result class provides a standardized envelope that every session
operation returns. This lets the CLI report timing and non-fatal warnings
the same way regardless of which operation ran, while each operation
defines its own payload type.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (size, condition number)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a result cannot drift from the session
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix operations.

    Type Parameters:
        P: The operation-specific payload type

    Attributes:
        params: Operation payload (matrices, determinant, eigenvalues)
        info: Structured metadata (operation, size, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        operation: Name of the operation that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=DeterminantParams(determinant=-12.5),
        ...     info={'operation': 'determinant', 'size': 3},
        ...     timing={'total_seconds': 0.0001},
        ...     operation='determinant',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    operation: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def elapsed_seconds(self) -> float | None:
        """Total wall-clock time, or None if not measured."""
        if self.timing is None:
            return None
        return self.timing.get('total_seconds')

    @property
    def elapsed_ms(self) -> int | None:
        """Total wall-clock time in whole milliseconds, or None."""
        seconds = self.elapsed_seconds
        if seconds is None:
            return None
        return int(seconds * 1000)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
