# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================
# Unit tests for app.config.Settings:
# - Defaults and validation constraints
# - Computed properties
# =============================================================================

import logging

import pytest
from pydantic import ValidationError

from app.config import Settings


def make_settings(**overrides) -> Settings:
    """Build Settings without reading a .env file."""
    return Settings(_env_file=None, **overrides)


class TestSettings:
    """Tests for Settings."""

    def test_port_bounds(self):
        """Test that PORT must be a valid TCP port."""
        with pytest.raises(ValidationError):
            make_settings(PORT=0)

        with pytest.raises(ValidationError):
            make_settings(PORT=70000)

    def test_environment_choices(self):
        """Test that ENVIRONMENT only accepts known values."""
        with pytest.raises(ValidationError):
            make_settings(ENVIRONMENT="qa")

        assert make_settings(ENVIRONMENT="production").is_production is True

    def test_log_level_value(self):
        """Test LOG_LEVEL maps to logging constants and DEBUG overrides it."""
        assert make_settings(LOG_LEVEL="WARNING", DEBUG=False).log_level_value == logging.WARNING
        assert make_settings(LOG_LEVEL="ERROR", DEBUG=True).log_level_value == logging.DEBUG

    def test_cors_origins_list(self):
        """Test comma-separated origins are split and trimmed."""
        settings = make_settings(CORS_ORIGINS="http://localhost:3000, https://roman.example.com,")

        assert settings.cors_origins_list == [
            "http://localhost:3000",
            "https://roman.example.com",
        ]

    def test_static_path(self, tmp_path):
        """Test static_path resolves existing directories only."""
        assert make_settings(STATIC_DIR=None).static_path is None
        assert make_settings(STATIC_DIR=str(tmp_path / "missing")).static_path is None
        assert make_settings(STATIC_DIR=str(tmp_path)).static_path == tmp_path.resolve()
