"""fp: Result and Error types for explicit error handling.

Main components:
* `ErrorKind`: closed taxonomy of failure categories
* `Error`: kind + message value, built with factories like `not_found`
* `Result`: `Success` or `Failure`, with `has_error`, `maybe_error`,
  `try_to_result` and friends
"""

__version__ = "0.1.0"

from fp.core import (
    BadResultAccessError,
    Error,
    ErrorKind,
    Failure,
    Result,
    Success,
    and_then,
    format_error,
    format_result,
    has_error,
    lift,
    make_failure,
    make_result,
    map_error,
    map_value,
    maybe_error,
    or_else,
    render,
    try_to_result,
    unwrap,
    unwrap_error,
    value_or,
)
from fp.core.errors import (
    aborted,
    already_exists,
    cancelled,
    data_loss,
    exception,
    failed_precondition,
    internal,
    invalid_argument,
    not_found,
    out_of_range,
    permission_denied,
    resource_exhausted,
    timeout,
    unauthenticated,
    unavailable,
    unimplemented,
    unknown,
)

__all__ = [
    # Taxonomy
    "ErrorKind",
    "render",
    # Error value
    "Error",
    "BadResultAccessError",
    "aborted",
    "already_exists",
    "cancelled",
    "data_loss",
    "exception",
    "failed_precondition",
    "internal",
    "invalid_argument",
    "not_found",
    "out_of_range",
    "permission_denied",
    "resource_exhausted",
    "timeout",
    "unauthenticated",
    "unavailable",
    "unimplemented",
    "unknown",
    # Result
    "Result",
    "Success",
    "Failure",
    "make_result",
    "make_failure",
    "has_error",
    "maybe_error",
    "try_to_result",
    "lift",
    "value_or",
    "unwrap",
    "unwrap_error",
    "map_value",
    "map_error",
    "and_then",
    "or_else",
    # Formatting
    "format_error",
    "format_result",
]
