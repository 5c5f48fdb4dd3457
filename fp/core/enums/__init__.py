"""Core enums package.

Usage:
    from fp.core.enums import ErrorKind, Environment, render
"""

from fp.core.enums.environment import Environment
from fp.core.enums.error_kind import ErrorKind, render

__all__ = ["ErrorKind", "Environment", "render"]
