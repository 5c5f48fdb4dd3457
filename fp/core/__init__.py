"""Core shared kernel.

- Error kinds and their canonical names
- Error value and per-kind factories
- Result types and combinators for railway-oriented programming
- Text rendering for logs and diagnostics

The core module has NO dependencies on other layers beyond the logger
resolved through the container.
"""

from fp.core.enums import ErrorKind, render
from fp.core.errors import BadResultAccessError, Error
from fp.core.formatting import format_error, format_result
from fp.core.result import (
    Failure,
    Result,
    Success,
    and_then,
    has_error,
    lift,
    make_failure,
    make_result,
    map_error,
    map_value,
    maybe_error,
    or_else,
    try_to_result,
    unwrap,
    unwrap_error,
    value_or,
)

__all__ = [
    "BadResultAccessError",
    "Error",
    "ErrorKind",
    "Failure",
    "Result",
    "Success",
    "and_then",
    "format_error",
    "format_result",
    "has_error",
    "lift",
    "make_failure",
    "make_result",
    "map_error",
    "map_value",
    "maybe_error",
    "or_else",
    "render",
    "try_to_result",
    "unwrap",
    "unwrap_error",
    "value_or",
]
