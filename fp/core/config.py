"""
Configuration management using Pydantic Settings.

Loads the library's runtime settings from environment variables prefixed
with ``FP_``. The core Result API has no required configuration; settings
only steer diagnostics (logging output and level).

Usage:
    from fp.core.config import get_settings

    settings = get_settings()
    if settings.is_development:
        # human-readable logs
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fp.core.enums import Environment

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables (FP_ENVIRONMENT, FP_LOG_LEVEL, ...)
        2. Default values
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_caught_exceptions: bool = Field(
        default=True,
        description="Emit a debug log when try_to_result converts an exception",
    )

    model_config = SettingsConfigDict(
        env_prefix="FP_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate and normalize the log level name.

        Args:
            v: Level name in any case.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the level is not one of the five standard levels.
        """
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """Check if running in testing or CI environment."""
        return self.environment in {Environment.TESTING, Environment.CI}


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once per process; call ``get_settings.cache_clear()``
    after changing the environment to reload.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
