"""
Session configuration.

SessionConfig is a frozen dataclass holding every tunable constant of the
interactive session. Defaults reproduce the stock behaviour; a handful of
values can be overridden from the environment at startup:

    PYMATRIXOPS_SEED       integer seed for the random generator
    PYMATRIXOPS_MAX_SIZE   upper bound accepted by option (1)
    PYMATRIXOPS_LOG_LEVEL  logging level name (DEBUG, INFO, WARNING, ...)

There are no configuration files and nothing is persisted.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping

from pymatrixops.core.exceptions import ValidationError

ENV_PREFIX = "PYMATRIXOPS_"


@dataclass(frozen=True)
class SessionConfig:
    """
    Immutable session settings.

    Attributes:
        default_size: Matrix dimension before the user picks one
        max_size: Largest dimension accepted by set_size
        value_low: Lower bound of generated entries
        value_high: Upper bound of generated entries
        decimals: Rounding applied to generated entries
        eigen_confirm_threshold: Sizes above this ask before computing eigenvalues
        eigen_display_count: Number of eigenvalues printed
        display_size: Edge of the top-left block printed for matrices
        seed: Seed for numpy's default_rng, or None for OS entropy
        log_level: Name of the logging level used by main()
    """
    default_size: int = 100
    max_size: int = 500
    value_low: float = -10.0
    value_high: float = 10.0
    decimals: int = 2
    eigen_confirm_threshold: int = 50
    eigen_display_count: int = 10
    display_size: int = 5
    seed: int | None = None
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.max_size < 1:
            raise ValidationError(f"max_size: must be >= 1, got {self.max_size}")
        if not 1 <= self.default_size <= self.max_size:
            raise ValidationError(
                f"default_size: must be in [1, {self.max_size}], got {self.default_size}"
            )
        if self.value_low > self.value_high:
            raise ValidationError(
                f"value range is empty: [{self.value_low}, {self.value_high}]"
            )
        if self.decimals < 0:
            raise ValidationError(f"decimals: must be >= 0, got {self.decimals}")
        if self.display_size < 1:
            raise ValidationError(f"display_size: must be >= 1, got {self.display_size}")
        if self.eigen_display_count < 1:
            raise ValidationError(
                f"eigen_display_count: must be >= 1, got {self.eigen_display_count}"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValidationError(f"log_level: unknown level {self.log_level!r}")

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SessionConfig:
        """
        Build a config from defaults plus PYMATRIXOPS_* overrides.

        Args:
            environ: Mapping to read instead of os.environ (for tests)

        Raises:
            ValidationError: If an override is not a valid value
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}

        seed = env.get(ENV_PREFIX + "SEED")
        if seed:
            overrides["seed"] = _parse_int(seed, ENV_PREFIX + "SEED")

        max_size = env.get(ENV_PREFIX + "MAX_SIZE")
        if max_size:
            overrides["max_size"] = _parse_int(max_size, ENV_PREFIX + "MAX_SIZE")

        log_level = env.get(ENV_PREFIX + "LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level.strip().upper()

        config = cls()
        if "max_size" in overrides:
            # Keep the default size inside a lowered bound
            overrides["default_size"] = min(config.default_size, overrides["max_size"])
        return replace(config, **overrides)


def _parse_int(value: str, name: str) -> int:
    try:
        return int(value.strip())
    except ValueError as e:
        raise ValidationError(f"{name}: expected an integer, got {value!r}") from e
