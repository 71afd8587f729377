"""
Tests for the interactive menu loop.

The loop is driven with scripted input and a StringIO sink; running out of
script behaves like the user closing stdin.
"""

import io
import re

import numpy as np
import pytest

from pymatrixops import cli
from pymatrixops.core.config import SessionConfig
from pymatrixops.session.controller import MatrixSession


class ScriptedInput:
    """input()-compatible callable that replays answers, then raises EOFError."""

    def __init__(self, *answers):
        self._answers = list(answers)

    def __call__(self, prompt=""):
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)


def run_menu(*answers, size=4, pause=False):
    session = MatrixSession(
        SessionConfig(default_size=size, max_size=60),
        rng=np.random.default_rng(42),
    )
    out = io.StringIO()
    app = cli.MenuApp(session, input_fn=ScriptedInput(*answers), out=out, pause=pause)
    code = app.run()
    return code, out.getvalue(), session


# ═══════════════════════════════════════════════════════════════════════
# Loop control
# ═══════════════════════════════════════════════════════════════════════


class TestLoop:

    def test_exit_option(self):
        code, text, _ = run_menu("8")
        assert code == 0
        assert "MATRIX OPERATIONS MENU" in text
        assert "Goodbye!" in text

    def test_eof_exits_cleanly(self):
        code, text, _ = run_menu()
        assert code == 0
        assert "Goodbye!" in text

    @pytest.mark.parametrize("choice", ["0", "9", "abc", "", "2.5"])
    def test_invalid_choice_reported_and_loop_continues(self, choice):
        code, text, _ = run_menu(choice, "8")
        assert code == 0
        assert "Invalid choice. Please enter a number between 1 and 8." in text
        assert text.count("MATRIX OPERATIONS MENU") == 2

    def test_pause_waits_for_enter(self):
        code, text, session = run_menu("2", "", "8", pause=True)
        assert code == 0
        assert "Press Enter to continue..." in text
        assert session.generated

    def test_menu_shows_current_size(self):
        _, text, _ = run_menu("1", "7", "8")
        assert "Current size: 4x4" in text
        assert "Current size: 7x7" in text


# ═══════════════════════════════════════════════════════════════════════
# Option (1): size
# ═══════════════════════════════════════════════════════════════════════


class TestInputSize:

    def test_valid_size(self):
        _, text, session = run_menu("1", "10", "8")
        assert "Matrix size set to 10x10" in text
        assert session.size == 10

    @pytest.mark.parametrize("answer", ["0", "61", "ten", ""])
    def test_invalid_size_reported(self, answer):
        code, text, session = run_menu("1", answer, "8")
        assert code == 0
        assert "Invalid size. Must be between 1 and 60." in text
        assert session.size == 4

    def test_resize_discards_result(self):
        _, _, session = run_menu("2", "3", "1", "5", "8")
        assert session.size == 5
        assert not session.generated
        assert not session.multiplied


# ═══════════════════════════════════════════════════════════════════════
# Options (2)-(7)
# ═══════════════════════════════════════════════════════════════════════


class TestOperations:

    def test_generate_reports_time(self):
        _, text, session = run_menu("2", "8")
        assert "Generating random matrices..." in text
        assert "Matrices generated in" in text
        assert " ms" in text
        assert session.generated

    def test_multiply_before_generate(self):
        _, text, session = run_menu("3", "8")
        assert "Generate matrices first (Option 2)!" in text
        assert "Multiplying matrices..." not in text
        assert not session.multiplied

    @pytest.mark.parametrize("choice", ["4", "5", "6", "7"])
    def test_result_operations_before_multiply(self, choice):
        _, text, session = run_menu("2", choice, "8")
        assert "Multiply matrices first (Option 3)!" in text
        assert session.result is None

    def test_full_pipeline(self):
        code, text, session = run_menu("2", "3", "5", "6", "4", "7", "8")
        assert code == 0
        assert "Multiplication completed in" in text
        assert "Determinant = " in text
        assert "Computed 4 eigenvalues in" in text
        assert "First 4 eigenvalues (real parts):" in text
        assert "Inversion completed in" in text
        assert "Inverted Matrix (first 4x4 section):" in text
        assert "Diagonal matrix created in" in text
        assert "Diagonal Matrix (first 4x4 section):" in text
        assert session.multiplied
        assert np.count_nonzero(session.result - np.diag(np.diag(session.result))) == 0

    def test_determinant_scientific_notation(self):
        _, text, session = run_menu("2", "3", "5", "8")
        assert re.search(r"Determinant = -?\d\.\d{6}E[+-]\d{2,3} \(computed in \d+ ms\)", text)

    def test_singular_inverse_reports_error_and_cause(self):
        session = MatrixSession(SessionConfig(default_size=3, max_size=60))
        session.generate()
        session.multiply()
        session.state.set_result(np.diag([1.0, 0.0, 2.0]))
        out = io.StringIO()
        app = cli.MenuApp(session, input_fn=ScriptedInput("4", "8"), out=out)

        assert app.run() == 0
        text = out.getvalue()
        assert "❌ Error: Matrix is singular (non-invertible) or ill-conditioned." in text
        assert "   Inner: " in text
        assert "Goodbye!" in text


# ═══════════════════════════════════════════════════════════════════════
# Eigenvalue confirmation
# ═══════════════════════════════════════════════════════════════════════


class TestEigenConfirmation:

    def test_large_size_declined(self):
        _, text, _ = run_menu("1", "51", "2", "3", "6", "n", "8")
        assert "Warning: Eigenvalue computation for 51x51 matrix" in text
        assert "Continue? (y/n): " in text
        assert "Computing eigenvalues..." not in text
        assert "eigenvalues in" not in text

    def test_large_size_accepted(self):
        _, text, _ = run_menu("1", "51", "2", "3", "6", "Y", "8")
        assert "Computing eigenvalues..." in text
        assert "Computed 51 eigenvalues in" in text
        assert "First 10 eigenvalues (real parts):" in text
        assert "λ10:" in text
        assert "λ11:" not in text

    def test_small_size_not_asked(self):
        _, text, _ = run_menu("2", "3", "6", "8")
        assert "Continue? (y/n)" not in text
        assert "Computing eigenvalues..." in text


# ═══════════════════════════════════════════════════════════════════════
# main()
# ═══════════════════════════════════════════════════════════════════════


class TestMain:

    def test_quits_with_zero(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", ScriptedInput("8"))
        monkeypatch.delenv("PYMATRIXOPS_SEED", raising=False)
        monkeypatch.delenv("PYMATRIXOPS_MAX_SIZE", raising=False)
        assert cli.main() == 0
        out = capsys.readouterr().out
        assert "Starting Matrix Processor..." in out
        assert "Goodbye!" in out

    def test_bad_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("PYMATRIXOPS_SEED", "not-a-number")
        assert cli.main() == 2
        assert "Config error" in capsys.readouterr().err
