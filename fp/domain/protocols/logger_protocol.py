"""LoggerProtocol definition for structured logging.

Library code logs through this protocol and never through a concrete
backend. Implementations MUST emit structured logs (message + key-value
context).

Log Levels:
    - DEBUG: Diagnostic detail (e.g. exceptions converted to Results)
    - INFO: Normal operational events
    - WARNING: Unexpected but handled conditions
    - ERROR: Operation failed, caller continues

Usage:
    from fp.core.container import get_logger

    logger = get_logger()
    logger.debug("exception_converted_to_result", error_type="ValueError")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Implementations may enrich logs with timestamp and level.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
