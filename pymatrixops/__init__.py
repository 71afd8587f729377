"""
PyMatrixOps: an interactive console for dense linear algebra.

Generates random square matrices and runs library-provided routines on
them (product, inverse, determinant, eigenvalues, diagonal extraction),
reporting wall-clock time for each step. The arithmetic is NumPy/SciPy's;
this package tracks session state and formats the results.

Submodules:
    core: Exceptions, validation, configuration, Result envelope, compute kernels
    session: MatrixSession controller and display helpers
    cli: Interactive menu loop
"""

__version__ = "0.1.0"

from pymatrixops.core.config import SessionConfig
from pymatrixops.session import MatrixSession

__all__ = [
    "__version__",
    "SessionConfig",
    "MatrixSession",
]
