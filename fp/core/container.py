"""Composition root for shared infrastructure.

Adapter selection is centralized here so library code depends only on
LoggerProtocol.

Usage:
    from fp.core.container import get_logger

    logger = get_logger()
    logger.debug("exception_converted_to_result", error_type="ValueError")
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from fp.core.config import get_settings
from fp.core.enums import Environment

if TYPE_CHECKING:
    from fp.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache
def get_logger() -> "LoggerProtocol":
    """Return the process-wide logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from fp.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = settings.environment != Environment.DEVELOPMENT
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)
