"""Core errors package.

Exports the Error value, its per-kind factories and the access exception.

Usage:
    from fp.core.errors import Error, not_found, BadResultAccessError
"""

from fp.core.errors.access_error import BadResultAccessError
from fp.core.errors.error import Error
from fp.core.errors.factories import (
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
    "BadResultAccessError",
    "Error",
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
]
