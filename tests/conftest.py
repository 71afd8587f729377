"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrixops.core.config import SessionConfig
from pymatrixops.session.controller import MatrixSession


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def small_config():
    """Config with a small default size so tests stay fast."""
    return SessionConfig(default_size=4, max_size=60)


@pytest.fixture
def session(small_config, rng):
    """Fresh session at size 4."""
    return MatrixSession(small_config, rng=rng)


@pytest.fixture
def multiplied_session(session):
    """Session with A, B generated and multiplied."""
    session.generate()
    session.multiply()
    return session


@pytest.fixture
def singular_matrix():
    """Rank-deficient 3x3 matrix (row 3 = row 1 + row 2)."""
    return np.array([
        [1.0, 2.0, 3.0],
        [4.0, 5.0, 6.0],
        [5.0, 7.0, 9.0],
    ])
