"""
Interactive console menu.

MenuApp drives a MatrixSession from typed menu choices. Input and output
are injectable so the loop can be scripted in tests; main() wires it to
the real terminal.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, TextIO

from pymatrixops.core.config import SessionConfig
from pymatrixops.core.exceptions import (
    PrerequisiteError,
    PyMatrixOpsError,
    ValidationError,
)
from pymatrixops.core.result import Result
from pymatrixops.core.validation import parse_size
from pymatrixops.session.controller import MatrixSession
from pymatrixops.session import display

logger = logging.getLogger(__name__)

CHOICE_EXIT = 8
CLEAR_SCREEN = "\033[2J\033[H"

InputFn = Callable[[str], str]


class MenuApp:
    """
    Read-dispatch loop over the eight menu options.

    Args:
        session: Controller holding the matrices
        input_fn: Prompt-and-read callable, ``input`` by default
        out: Stream for all user-facing text
        pause: Wait for Enter after each handled choice
        clear: Clear the screen after each pause
    """

    def __init__(
        self,
        session: MatrixSession,
        input_fn: InputFn | None = None,
        out: TextIO | None = None,
        pause: bool = False,
        clear: bool = False,
    ):
        self.session = session
        self._input = input_fn if input_fn is not None else input
        self._out = out if out is not None else sys.stdout
        self.pause = pause
        self.clear = clear
        self._handlers = {
            1: self.input_size,
            2: self.generate,
            3: self.multiply,
            4: self.invert,
            5: self.determinant,
            6: self.eigenvalues,
            7: self.diagonalize,
        }

    def write(self, text: str = "") -> None:
        print(text, file=self._out)

    def prompt(self, text: str) -> str:
        self._out.write(text)
        self._out.flush()
        return self._input("")

    # === Loop ===

    def run(self) -> int:
        """
        Run until the user exits or input ends.

        Returns:
            Process exit code (0 on normal quit)
        """
        try:
            while True:
                self.write(display.format_menu(self.session.size))
                choice = self._parse_choice(self.prompt("\nEnter your choice (1-8): "))
                if choice is None:
                    self.write("❌ Invalid choice. Please enter a number between 1 and 8.")
                    continue

                if choice == CHOICE_EXIT:
                    self.write("👋 Goodbye!")
                    return 0

                self.dispatch(choice)

                if self.pause:
                    self.prompt("\nPress Enter to continue...")
                    if self.clear:
                        self._out.write(CLEAR_SCREEN)
        except EOFError:
            logger.debug("input closed, ending session")
            self.write()
            self.write("👋 Goodbye!")
            return 0

    def dispatch(self, choice: int) -> None:
        """Run one menu option, reporting library errors instead of raising."""
        handler = self._handlers[choice]
        try:
            handler()
        except PrerequisiteError as e:
            self.write(f"❌ {e}")
        except ValidationError as e:
            self.write(f"❌ {e}")
        except PyMatrixOpsError as e:
            logger.debug("option %d failed", choice, exc_info=True)
            self.write(f"\n❌ Error: {e}")
            if e.__cause__ is not None:
                self.write(f"   Inner: {e.__cause__}")

    @staticmethod
    def _parse_choice(text: str) -> int | None:
        try:
            choice = int(text.strip())
        except ValueError:
            return None
        if choice < 1 or choice > CHOICE_EXIT:
            return None
        return choice

    # === Options ===

    def input_size(self) -> None:
        text = self.prompt(f"Enter new matrix size (current: {self.session.size}): ")
        size = parse_size(text, self.session.config.max_size)
        result = self.session.set_size(size)
        n = result.params.size
        self.write(f"✅ Matrix size set to {n}x{n}")

    def generate(self) -> None:
        self.write("Generating random matrices...")
        result = self.session.generate()
        self.write(f"✅ Matrices generated in {display.format_elapsed(result.elapsed_seconds)}")

    def multiply(self) -> None:
        self.session.require_operands('multiply')
        self.write("Multiplying matrices...")
        result = self.session.multiply()
        self.write(
            f"✅ Multiplication completed in {display.format_elapsed(result.elapsed_seconds)}"
        )

    def invert(self) -> None:
        self.session.require_result('invert')
        self.write("Inverting result matrix...")
        result = self.session.invert()
        self.write(f"✅ Inversion completed in {display.format_elapsed(result.elapsed_seconds)}")
        self._write_warnings(result)
        self._write_section("Inverted Matrix", result.params.matrix)

    def determinant(self) -> None:
        self.session.require_result('determinant')
        self.write("Calculating determinant...")
        result = self.session.determinant()
        self.write(
            f"✅ Determinant = {display.format_determinant(result.params.determinant)} "
            f"(computed in {display.format_elapsed(result.elapsed_seconds)})"
        )
        self._write_warnings(result)

    def eigenvalues(self) -> None:
        self.session.require_result('eigenvalues')
        if not self.session.needs_eigen_confirmation:
            self.write("Computing eigenvalues...")
        result = self.session.eigenvalues(confirm=self._confirm_eigenvalues)
        if result is None:
            return
        self.write(
            f"✅ Computed {result.params.count} eigenvalues in "
            f"{display.format_elapsed(result.elapsed_seconds)}"
        )
        self.write()
        self.write(display.format_eigenvalues(
            result.params.eigenvalues,
            count=self.session.config.eigen_display_count,
        ))

    def diagonalize(self) -> None:
        self.session.require_result('diagonalize')
        self.write("Creating diagonal matrix from result...")
        result = self.session.diagonalize()
        self.write(
            f"✅ Diagonal matrix created in {display.format_elapsed(result.elapsed_seconds)}"
        )
        self._write_section("Diagonal Matrix", result.params.matrix)

    # === Helpers ===

    def _confirm_eigenvalues(self, message: str) -> bool:
        self.write(f"⚠️ {message}")
        answer = self.prompt("Continue? (y/n): ")
        if answer.strip().lower() != "y":
            return False
        self.write("Computing eigenvalues...")
        return True

    def _write_section(self, title: str, matrix) -> None:
        self.write()
        self.write(display.format_matrix_section(
            title, matrix, size=self.session.config.display_size,
        ))

    def _write_warnings(self, result: Result) -> None:
        for warning in result.warnings:
            self.write(f"⚠️ {warning}")


def main() -> int:
    """Console entry point."""
    try:
        config = SessionConfig.from_env()
    except ValidationError as e:
        print(f"[pymatrixops] Config error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.numeric_log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    interactive = sys.stdin.isatty()
    app = MenuApp(
        MatrixSession(config),
        pause=interactive,
        clear=interactive and sys.stdout.isatty(),
    )

    print("Starting Matrix Processor...")
    print(
        f"Note: For large matrices (>{config.eigen_confirm_threshold}), "
        f"some operations may take time.\n"
    )
    try:
        return app.run()
    except KeyboardInterrupt:
        print()
        return 130
