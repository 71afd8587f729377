"""
Tests for SessionConfig defaults, validation and environment overrides.
"""

import logging
from dataclasses import FrozenInstanceError

import pytest

from pymatrixops.core.config import SessionConfig
from pymatrixops.core.exceptions import ValidationError


class TestDefaults:

    def test_stock_values(self):
        cfg = SessionConfig()
        assert cfg.default_size == 100
        assert cfg.max_size == 500
        assert (cfg.value_low, cfg.value_high) == (-10.0, 10.0)
        assert cfg.decimals == 2
        assert cfg.eigen_confirm_threshold == 50
        assert cfg.eigen_display_count == 10
        assert cfg.display_size == 5
        assert cfg.seed is None

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            SessionConfig().max_size = 10

    def test_numeric_log_level(self):
        assert SessionConfig(log_level="debug").numeric_log_level == logging.DEBUG


class TestValidation:

    def test_default_size_above_max(self):
        with pytest.raises(ValidationError, match="default_size"):
            SessionConfig(default_size=20, max_size=10)

    def test_empty_value_range(self):
        with pytest.raises(ValidationError, match="value range"):
            SessionConfig(value_low=1.0, value_high=-1.0)

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError, match="log_level"):
            SessionConfig(log_level="CHATTY")

    def test_zero_display_size(self):
        with pytest.raises(ValidationError, match="display_size"):
            SessionConfig(display_size=0)


class TestFromEnv:

    def test_empty_environment_gives_defaults(self):
        assert SessionConfig.from_env({}) == SessionConfig()

    def test_seed_override(self):
        cfg = SessionConfig.from_env({"PYMATRIXOPS_SEED": "123"})
        assert cfg.seed == 123

    def test_max_size_override_clamps_default(self):
        cfg = SessionConfig.from_env({"PYMATRIXOPS_MAX_SIZE": "40"})
        assert cfg.max_size == 40
        assert cfg.default_size == 40

    def test_log_level_override(self):
        cfg = SessionConfig.from_env({"PYMATRIXOPS_LOG_LEVEL": "info"})
        assert cfg.log_level == "INFO"

    def test_bad_integer(self):
        with pytest.raises(ValidationError, match="PYMATRIXOPS_SEED"):
            SessionConfig.from_env({"PYMATRIXOPS_SEED": "abc"})

    def test_non_positive_max_size(self):
        with pytest.raises(ValidationError, match="max_size"):
            SessionConfig.from_env({"PYMATRIXOPS_MAX_SIZE": "0"})
