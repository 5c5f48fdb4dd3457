"""
Unit tests for configuration management.

Tests cover:
- Default values
- Loading from FP_-prefixed environment variables
- log_level validation
- Environment helpers
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from fp.core.config import Settings, get_settings
from fp.core.enums import Environment


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


class TestSettingsDefaults:
    """Test Settings defaults with an empty environment."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.log_caught_exceptions is True
        assert settings.is_development is True
        assert settings.is_testing is False


class TestSettingsFromEnvironment:
    """Test Settings loading from environment variables."""

    def test_reads_prefixed_variables(self):
        env_values = {
            "FP_ENVIRONMENT": "ci",
            "FP_LOG_LEVEL": "debug",
            "FP_LOG_CAUGHT_EXCEPTIONS": "false",
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()

        assert settings.environment == Environment.CI
        assert settings.log_level == "DEBUG"
        assert settings.log_caught_exceptions is False
        assert settings.is_testing is True

    def test_ignores_unprefixed_variables(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "ERROR"}, clear=True):
            settings = Settings()

        assert settings.log_level == "INFO"


class TestSettingsValidation:
    """Test Settings field validation."""

    @pytest.mark.parametrize("level", ["DEBUG", "info", " Warning ", "critical"])
    def test_log_level_valid(self, level):
        with patch.dict(os.environ, {"FP_LOG_LEVEL": level}, clear=True):
            settings = Settings()

        assert settings.log_level == level.strip().upper()

    def test_log_level_invalid(self):
        with patch.dict(os.environ, {"FP_LOG_LEVEL": "VERBOSE"}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings()

        errors = exc_info.value.errors()
        assert any("log_level must be one of" in str(error) for error in errors)

    def test_environment_invalid(self):
        with patch.dict(os.environ, {"FP_ENVIRONMENT": "staging"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()


class TestGetSettings:
    """Test cached settings accessor."""

    def test_returns_same_instance(self):
        with patch.dict(os.environ, {}, clear=True):
            get_settings.cache_clear()
            assert get_settings() is get_settings()

    def test_cache_clear_reloads(self):
        with patch.dict(os.environ, {"FP_LOG_LEVEL": "ERROR"}, clear=True):
            get_settings.cache_clear()
            assert get_settings().log_level == "ERROR"

        with patch.dict(os.environ, {"FP_LOG_LEVEL": "WARNING"}, clear=True):
            get_settings.cache_clear()
            assert get_settings().log_level == "WARNING"
