"""Tests for settings and logging configuration."""

import pytest
from pydantic import ValidationError

from before_humans.config import Settings
from before_humans.core.point_sampler import SamplingOptions
from before_humans.logging_config import configure_logging


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self):
        s = Settings()
        assert s.point_spacing == 0.009
        assert s.jitter_fraction == 0.4
        assert s.max_workers == 1

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("BEFORE_HUMANS_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("BEFORE_HUMANS_POINT_SPACING", "0.02")
        s = Settings()
        assert s.log_level == "DEBUG"
        assert s.point_spacing == 0.02

    def test_invalid_jitter(self):
        with pytest.raises(ValidationError):
            Settings(jitter_fraction=0.5)

    def test_invalid_spacing(self):
        with pytest.raises(ValidationError):
            Settings(point_spacing=0)

    def test_sampling_options(self):
        options = SamplingOptions.from_settings(Settings(point_spacing=0.01, jitter_fraction=0.25))
        assert options.spacing == 0.01
        assert options.jitter == 0.25


class TestLogging:
    """Test structlog setup."""

    @pytest.mark.parametrize("log_format", ["json", "plain"])
    def test_configure(self, log_format):
        configure_logging(Settings(log_format=log_format, log_level="WARNING"))
        import structlog

        structlog.get_logger("test").info("Not shown")
