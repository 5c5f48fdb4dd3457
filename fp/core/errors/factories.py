"""Factory functions for Error, one per ErrorKind.

Each factory is equivalent to ``Error(kind=<kind>, message=message)`` and
exists for readability at call sites.

Usage:
    from fp.core.errors import not_found, invalid_argument
    from fp.core.result import Failure

    return Failure(error=not_found("user 42"))
"""

from fp.core.enums import ErrorKind
from fp.core.errors.error import Error


def unknown(message: str = "") -> Error:
    """Error of unknown origin."""
    return Error(kind=ErrorKind.UNKNOWN, message=message)


def cancelled(message: str = "") -> Error:
    """Operation was cancelled by the caller."""
    return Error(kind=ErrorKind.CANCELLED, message=message)


def invalid_argument(message: str = "") -> Error:
    """Caller supplied a malformed argument."""
    return Error(kind=ErrorKind.INVALID_ARGUMENT, message=message)


def timeout(message: str = "") -> Error:
    """Deadline expired before the operation completed."""
    return Error(kind=ErrorKind.TIMEOUT, message=message)


def not_found(message: str = "") -> Error:
    """Requested entity was not found."""
    return Error(kind=ErrorKind.NOT_FOUND, message=message)


def already_exists(message: str = "") -> Error:
    """Entity the caller tried to create already exists."""
    return Error(kind=ErrorKind.ALREADY_EXISTS, message=message)


def permission_denied(message: str = "") -> Error:
    """Caller lacks permission for the operation."""
    return Error(kind=ErrorKind.PERMISSION_DENIED, message=message)


def resource_exhausted(message: str = "") -> Error:
    """A quota or capacity limit was reached."""
    return Error(kind=ErrorKind.RESOURCE_EXHAUSTED, message=message)


def failed_precondition(message: str = "") -> Error:
    """System is not in the state the operation requires."""
    return Error(kind=ErrorKind.FAILED_PRECONDITION, message=message)


def aborted(message: str = "") -> Error:
    """Operation was aborted, typically by a concurrency conflict."""
    return Error(kind=ErrorKind.ABORTED, message=message)


def out_of_range(message: str = "") -> Error:
    """Operation attempted past the valid range."""
    return Error(kind=ErrorKind.OUT_OF_RANGE, message=message)


def unimplemented(message: str = "") -> Error:
    """Operation is not implemented or not supported."""
    return Error(kind=ErrorKind.UNIMPLEMENTED, message=message)


def internal(message: str = "") -> Error:
    """An internal invariant was broken."""
    return Error(kind=ErrorKind.INTERNAL, message=message)


def unavailable(message: str = "") -> Error:
    """Service is currently unavailable."""
    return Error(kind=ErrorKind.UNAVAILABLE, message=message)


def data_loss(message: str = "") -> Error:
    """Unrecoverable data loss or corruption."""
    return Error(kind=ErrorKind.DATA_LOSS, message=message)


def unauthenticated(message: str = "") -> Error:
    """Request lacks valid authentication credentials."""
    return Error(kind=ErrorKind.UNAUTHENTICATED, message=message)


def exception(message: str = "") -> Error:
    """Failure converted from a raised exception."""
    return Error(kind=ErrorKind.EXCEPTION, message=message)
