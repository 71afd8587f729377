"""
Interactive matrix session.

Public API:
    MatrixSession   - stateful controller with the seven menu operations
    SessionState    - the underlying data model
"""

from pymatrixops.session.state import SessionState
from pymatrixops.session.solution import (
    SizeParams,
    GenerateParams,
    MatrixParams,
    DeterminantParams,
    EigenParams,
)
from pymatrixops.session.controller import MatrixSession

__all__ = [
    "MatrixSession",
    "SessionState",
    "SizeParams",
    "GenerateParams",
    "MatrixParams",
    "DeterminantParams",
    "EigenParams",
]
