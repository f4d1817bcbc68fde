"""Tests for housing settings."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from housing.settings import HousingSettings, get_settings


class TestHousingSettings:
    """Environment-driven configuration."""

    def test_defaults(self):
        """Defaults match the model bed ranges."""
        with patch.dict("os.environ", {}, clear=True):
            settings = HousingSettings(_env_file=None)
        assert (settings.room_min_beds, settings.room_max_beds) == (2, 4)
        assert (settings.tent_min_beds, settings.tent_max_beds) == (10, 50)
        assert settings.random_seed is None
        assert settings.log_level == "INFO"
        assert settings.snapshot_path == Path("data/housing_snapshot.json")

    def test_prefixed_environment(self):
        """HOUSING_* variables override defaults."""
        env = {"HOUSING_TENT_MIN_BEDS": "20", "HOUSING_RANDOM_SEED": "42", "HOUSING_LOG_LEVEL": "debug"}
        with patch.dict("os.environ", env, clear=True):
            settings = HousingSettings(_env_file=None)
        assert settings.tent_min_beds == 20
        assert settings.random_seed == 42
        assert settings.log_level == "DEBUG"

    def test_plain_log_level_variable(self):
        """LOG_LEVEL is honored without the prefix."""
        with patch.dict("os.environ", {"LOG_LEVEL": "warning"}, clear=True):
            assert HousingSettings(_env_file=None).log_level == "WARNING"

    def test_trace_level_accepted(self):
        """TRACE is a valid level."""
        assert HousingSettings(_env_file=None, log_level="trace").log_level == "TRACE"

    def test_invalid_log_level(self):
        """Unknown levels are rejected."""
        with pytest.raises(ValidationError, match="Invalid log level"):
            HousingSettings(_env_file=None, log_level="LOUD")

    @pytest.mark.parametrize(
        "overrides",
        [
            {"room_min_beds": 4, "room_max_beds": 3},
            {"room_min_beds": 1},
            {"tent_max_beds": 60},
            {"tent_min_beds": 30, "tent_max_beds": 20},
        ],
    )
    def test_bed_ranges_validated(self, overrides):
        """Ranges must be ordered and inside the model bounds."""
        with pytest.raises(ValidationError):
            HousingSettings(_env_file=None, **overrides)


class TestGetSettings:
    """Cached accessor."""

    def test_cached(self):
        """get_settings returns the same instance until the cache is cleared."""
        assert get_settings() is get_settings()

    def test_cache_clear_rereads_environment(self):
        """Clearing the cache picks up new environment values."""
        with patch.dict("os.environ", {"HOUSING_RANDOM_SEED": "1"}):
            get_settings.cache_clear()
            assert get_settings().random_seed == 1
        get_settings.cache_clear()
        with patch.dict("os.environ", {"HOUSING_RANDOM_SEED": "2"}):
            assert get_settings().random_seed == 2
