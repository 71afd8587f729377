"""
SessionState: the mutable data model behind the menu.

Holds the configured dimension, the two generated operands and the current
result. Mutation goes through the methods below so the pairing invariants
hold after every call:

    - matrix_a and matrix_b are both present or both absent
    - result is present if and only if multiplied is True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


@dataclass
class SessionState:
    """In-memory state of one interactive session."""
    size: int
    matrix_a: NDArray[np.floating[Any]] | None = None
    matrix_b: NDArray[np.floating[Any]] | None = None
    result: NDArray[np.floating[Any]] | None = None
    multiplied: bool = False

    @property
    def generated(self) -> bool:
        """Whether A and B have been generated for the current size."""
        return self.matrix_a is not None and self.matrix_b is not None

    def resize(self, size: int) -> None:
        """Change the dimension and drop every matrix."""
        self.size = size
        self.matrix_a = None
        self.matrix_b = None
        self.clear_result()

    def set_operands(
        self,
        matrix_a: NDArray[np.floating[Any]],
        matrix_b: NDArray[np.floating[Any]],
    ) -> None:
        """Install freshly generated operands; any prior result is stale."""
        self.matrix_a = matrix_a
        self.matrix_b = matrix_b
        self.clear_result()

    def set_result(self, result: NDArray[np.floating[Any]]) -> None:
        self.result = result
        self.multiplied = True

    def clear_result(self) -> None:
        self.result = None
        self.multiplied = False

    def check_invariants(self) -> None:
        """
        Assert the pairing invariants.

        Raises:
            AssertionError: If the state is inconsistent
        """
        assert (self.matrix_a is None) == (self.matrix_b is None), \
            "matrix_a and matrix_b must be populated together"
        assert (self.result is not None) == self.multiplied, \
            "result must be present exactly when multiplied is set"
