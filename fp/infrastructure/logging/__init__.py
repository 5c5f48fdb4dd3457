"""Logging adapters implementing LoggerProtocol."""

from fp.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
