"""Unit tests for get_logger() container function.

Tests cover:
- Adapter output format selected from the environment
- Log level passed through from settings
- Singleton pattern (same instance returned)
- Protocol compliance
"""

from unittest.mock import MagicMock, patch

import pytest

from fp.core.container import get_logger
from fp.core.enums import Environment
from fp.domain.protocols.logger_protocol import LoggerProtocol


def _settings(environment: Environment, log_level: str = "INFO") -> MagicMock:
    return MagicMock(environment=environment, log_level=log_level)


@pytest.mark.unit
class TestGetLoggerContainer:
    """Test get_logger() container function."""

    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
            (Environment.PRODUCTION, True),
        ],
    )
    def test_selects_output_format(self, environment, use_json):
        """Test JSON output everywhere except development."""
        with (
            patch(
                "fp.core.container.get_settings",
                return_value=_settings(environment),
            ),
            patch(
                "fp.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console,
        ):
            get_logger.cache_clear()
            logger = get_logger()

        mock_console.assert_called_once_with(use_json=use_json, level="INFO")
        assert logger == mock_console.return_value

    def test_passes_log_level(self):
        with (
            patch(
                "fp.core.container.get_settings",
                return_value=_settings(Environment.TESTING, "DEBUG"),
            ),
            patch(
                "fp.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console,
        ):
            get_logger.cache_clear()
            get_logger()

        mock_console.assert_called_once_with(use_json=True, level="DEBUG")

    def test_returns_singleton(self):
        """Test repeated calls return the cached instance."""
        get_logger.cache_clear()

        assert get_logger() is get_logger()

    def test_implements_logger_protocol(self):
        """Test the returned adapter has every protocol method."""
        get_logger.cache_clear()
        logger = get_logger()

        for name in dir(LoggerProtocol):
            if not name.startswith("_"):
                assert callable(getattr(logger, name))
