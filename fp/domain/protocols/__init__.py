"""Protocols implemented by infrastructure adapters."""

from fp.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
