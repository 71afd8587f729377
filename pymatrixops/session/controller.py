"""
MatrixSession: the seven menu operations over a SessionState.

Every operation checks its prerequisites first and raises
PrerequisiteError without touching state when they are missing. Work that
succeeds is timed and returned in a Result envelope; library failures
surface as NumericalError / SingularMatrixError / ConvergenceError with the
original exception chained.
"""

from __future__ import annotations

import logging
from typing import Any, Callable
import numpy as np

from pymatrixops.core.config import SessionConfig
from pymatrixops.core.exceptions import (
    ConvergenceError,
    PrerequisiteError,
    SingularMatrixError,
)
from pymatrixops.core.result import Result
from pymatrixops.core.validation import check_size
from pymatrixops.core.compute.timing import Timer, timed
from pymatrixops.core.compute.tolerances import ILL_CONDITIONED_THRESHOLD
from pymatrixops.core.compute.linalg import dense
from pymatrixops.session.state import SessionState
from pymatrixops.session.solution import (
    DeterminantParams,
    EigenParams,
    GenerateParams,
    MatrixParams,
    SizeParams,
)

logger = logging.getLogger(__name__)

# Menu options that produce each prerequisite
OPTION_GENERATE = 2
OPTION_MULTIPLY = 3

ConfirmCallback = Callable[[str], bool]


class MatrixSession:
    """
    Stateful controller behind the interactive menu.

    Construction:
        MatrixSession()                      # defaults, OS entropy
        MatrixSession(SessionConfig(seed=7))
        MatrixSession(rng=np.random.default_rng(42))

    State machine:
        Empty -> SizeSet -> Generated -> Multiplied -> (Inverted | Diagonalized)
    with set_size returning to SizeSet from anywhere.
    """

    def __init__(
        self,
        config: SessionConfig | None = None,
        rng: np.random.Generator | None = None,
    ):
        self.config = config if config is not None else SessionConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.state = SessionState(size=self.config.default_size)

    # === Read-only views ===

    @property
    def size(self) -> int:
        return self.state.size

    @property
    def generated(self) -> bool:
        return self.state.generated

    @property
    def multiplied(self) -> bool:
        return self.state.multiplied

    @property
    def result(self):
        return self.state.result

    @property
    def needs_eigen_confirmation(self) -> bool:
        """Whether eigenvalues() will ask before running at the current size."""
        return self.state.size > self.config.eigen_confirm_threshold

    # === Operations ===

    def set_size(self, size: int) -> Result[SizeParams]:
        """
        Change the matrix dimension and discard all matrices.

        Raises:
            ValidationError: If size is outside [1, max_size]; state is unchanged
        """
        size = check_size(size, self.config.max_size)
        with timed() as timer:
            previous = self.state.size
            self.state.resize(size)

        logger.debug("size changed from %d to %d", previous, size)
        return self._result(
            'set_size', SizeParams(size=size, previous_size=previous), timer,
        )

    def generate(self) -> Result[GenerateParams]:
        """Fill A and B with uniform random entries and clear any result."""
        cfg = self.config
        n = self.state.size

        timer = Timer()
        timer.start()
        with timer.section('sampling'):
            matrix_a = dense.random_uniform(
                self.rng, n, cfg.value_low, cfg.value_high, cfg.decimals,
            )
            matrix_b = dense.random_uniform(
                self.rng, n, cfg.value_low, cfg.value_high, cfg.decimals,
            )
        self.state.set_operands(matrix_a, matrix_b)
        timer.stop()

        logger.debug("generated two %dx%d matrices", n, n)
        return self._result(
            'generate', GenerateParams(matrix_a=matrix_a, matrix_b=matrix_b), timer,
        )

    def multiply(self) -> Result[MatrixParams]:
        """
        Set result = A @ B.

        Raises:
            PrerequisiteError: If A and B have not been generated
        """
        self.require_operands('multiply')

        timer = Timer()
        timer.start()
        with timer.section('lapack'):
            product = dense.matmul(self.state.matrix_a, self.state.matrix_b)
        self.state.set_result(product)
        timer.stop()

        logger.debug("multiplied %dx%d matrices", self.state.size, self.state.size)
        return self._result('multiply', MatrixParams(matrix=product), timer)

    def invert(self) -> Result[MatrixParams]:
        """
        Replace the result with its inverse.

        Raises:
            PrerequisiteError: If no result exists yet
            SingularMatrixError: If the result is singular or ill-conditioned;
                the result is left unchanged
        """
        current = self.require_result('invert')

        timer = Timer()
        timer.start()
        try:
            with timer.section('lapack'):
                inverted = dense.invert(current, name='result')
        except SingularMatrixError:
            logger.warning("inversion of %dx%d result failed", *current.shape)
            raise
        self.state.set_result(inverted.inverse)
        timer.stop()

        warnings: list[str] = []
        if inverted.condition_number > ILL_CONDITIONED_THRESHOLD:
            warnings.append(
                f"Result is ill-conditioned (condition number "
                f"{inverted.condition_number:.3e}); inverse may be inaccurate."
            )

        logger.debug("inverted result, cond=%.3e", inverted.condition_number)
        return self._result(
            'invert', MatrixParams(matrix=inverted.inverse), timer,
            info={'condition_number': inverted.condition_number},
            warnings=tuple(warnings),
        )

    def determinant(self) -> Result[DeterminantParams]:
        """
        Determinant of the current result. State is not modified.

        Raises:
            PrerequisiteError: If no result exists yet
            NumericalError: If the determinant cannot be computed
        """
        current = self.require_result('determinant')

        timer = Timer()
        timer.start()
        with timer.section('lapack'):
            det = dense.determinant(current, name='result')
        timer.stop()

        warnings: tuple[str, ...] = ()
        if not np.isfinite(det):
            warnings = (
                f"Determinant is not representable in double precision ({det}).",
            )

        return self._result(
            'determinant', DeterminantParams(determinant=det), timer,
            warnings=warnings,
        )

    def eigenvalues(
        self,
        confirm: ConfirmCallback | None = None,
    ) -> Result[EigenParams] | None:
        """
        Eigenvalues of the current result.

        Args:
            confirm: Called with a cost warning when size exceeds
                eigen_confirm_threshold. Returning False cancels the
                operation. When None, no confirmation is requested.

        Returns:
            Result with complex eigenvalues, or None if cancelled

        Raises:
            PrerequisiteError: If no result exists yet
            ConvergenceError: If the decomposition does not converge
        """
        current = self.require_result('eigenvalues')

        if confirm is not None and self.needs_eigen_confirmation:
            n = self.state.size
            message = (
                f"Warning: Eigenvalue computation for {n}x{n} matrix "
                f"may take several seconds."
            )
            if not confirm(message):
                logger.debug("eigenvalue computation cancelled at size %d", n)
                return None

        timer = Timer()
        timer.start()
        try:
            with timer.section('lapack'):
                values = dense.eigenvalues(current, name='result')
        except ConvergenceError:
            logger.warning("eigenvalue computation failed for size %d", self.state.size)
            raise
        timer.stop()

        return self._result('eigenvalues', EigenParams(eigenvalues=values), timer)

    def diagonalize(self) -> Result[MatrixParams]:
        """
        Replace the result with a matrix holding only its diagonal.

        Raises:
            PrerequisiteError: If no result exists yet
        """
        current = self.require_result('diagonalize')

        with timed() as timer:
            diagonal = dense.diagonal_part(current, name='result')
            self.state.set_result(diagonal)

        return self._result('diagonalize', MatrixParams(matrix=diagonal), timer)

    # === Prerequisites ===

    def require_operands(self, operation: str = 'multiply') -> None:
        """Raise PrerequisiteError unless A and B exist."""
        if not self.state.generated:
            raise PrerequisiteError(
                f"Generate matrices first (Option {OPTION_GENERATE})!",
                operation=operation,
                required_option=OPTION_GENERATE,
            )

    def require_result(self, operation: str):
        """
        Return the current result, or raise PrerequisiteError if none exists.
        """
        if not self.state.multiplied:
            raise PrerequisiteError(
                f"Multiply matrices first (Option {OPTION_MULTIPLY})!",
                operation=operation,
                required_option=OPTION_MULTIPLY,
            )
        return self.state.result

    # === Helpers ===

    def _result(
        self,
        operation: str,
        params: Any,
        timer: Timer,
        *,
        info: dict[str, Any] | None = None,
        warnings: tuple[str, ...] = (),
    ) -> Result:
        merged = {'operation': operation, 'size': self.state.size}
        if info:
            merged.update(info)
        return Result(
            params=params,
            info=merged,
            timing=timer.result(),
            operation=operation,
            warnings=warnings,
        )
