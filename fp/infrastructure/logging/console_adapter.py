"""Console logging adapter.

Writes structured logs to stdout through a private structlog logger.
- Development: human-readable console renderer with colors
- Testing/CI/Production: JSON renderer for machine parsing

The logger is built with ``structlog.wrap_logger`` and never touches
``structlog.configure``, so the host application's structlog setup is left
as it was.

Implementation intentionally does NOT inherit from LoggerProtocol (PEP 544
structural subtyping).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _build_processors(use_json: bool) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    return processors


class ConsoleAdapter:
    """Console logger for fp diagnostics.

    Args:
        use_json (bool): JSON output when True, human-readable when False.
        level (str): Minimum level name to emit; unknown names mean INFO.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        min_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=sys.stdout),
            processors=_build_processors(use_json),
            wrapper_class=structlog.make_filtering_bound_logger(min_level),
            context_class=dict,
        )

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error message, adding error_type/error_message for ``error``."""
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        self._logger.error(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose logs always carry ``context``."""
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter
