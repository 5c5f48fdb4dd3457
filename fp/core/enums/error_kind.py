"""Error kinds (machine-readable failure categories).

The taxonomy is closed: 16 kinds for caller-classified failures plus
EXCEPTION for failures converted from a raised exception by
``try_to_result``. Ordinals are part of the public contract and never
change.

Usage:
    from fp.core.enums import ErrorKind, render

    render(ErrorKind.INVALID_ARGUMENT)  # "InvalidArgument"
"""

from enum import Enum
from typing import assert_never


class ErrorKind(Enum):
    """Closed set of error kinds carried by ``Error``."""

    UNKNOWN = 0
    CANCELLED = 1
    INVALID_ARGUMENT = 2
    TIMEOUT = 3
    NOT_FOUND = 4
    ALREADY_EXISTS = 5
    PERMISSION_DENIED = 6
    RESOURCE_EXHAUSTED = 7
    FAILED_PRECONDITION = 8
    ABORTED = 9
    OUT_OF_RANGE = 10
    UNIMPLEMENTED = 11
    INTERNAL = 12
    UNAVAILABLE = 13
    DATA_LOSS = 14
    UNAUTHENTICATED = 15
    EXCEPTION = 16

    def __str__(self) -> str:
        """Canonical display name (same as ``render``)."""
        return render(self)


def render(kind: ErrorKind) -> str:
    """Return the canonical display name of an error kind.

    The match is exhaustive; a type checker reports the ``assert_never``
    arm if a kind is added without a name.

    Args:
        kind: Error kind to render.

    Returns:
        str: CamelCase name, e.g. ``"InvalidArgument"``.
    """
    match kind:
        case ErrorKind.UNKNOWN:
            return "Unknown"
        case ErrorKind.CANCELLED:
            return "Cancelled"
        case ErrorKind.INVALID_ARGUMENT:
            return "InvalidArgument"
        case ErrorKind.TIMEOUT:
            return "Timeout"
        case ErrorKind.NOT_FOUND:
            return "NotFound"
        case ErrorKind.ALREADY_EXISTS:
            return "AlreadyExists"
        case ErrorKind.PERMISSION_DENIED:
            return "PermissionDenied"
        case ErrorKind.RESOURCE_EXHAUSTED:
            return "ResourceExhausted"
        case ErrorKind.FAILED_PRECONDITION:
            return "FailedPrecondition"
        case ErrorKind.ABORTED:
            return "Aborted"
        case ErrorKind.OUT_OF_RANGE:
            return "OutOfRange"
        case ErrorKind.UNIMPLEMENTED:
            return "Unimplemented"
        case ErrorKind.INTERNAL:
            return "Internal"
        case ErrorKind.UNAVAILABLE:
            return "Unavailable"
        case ErrorKind.DATA_LOSS:
            return "DataLoss"
        case ErrorKind.UNAUTHENTICATED:
            return "Unauthenticated"
        case ErrorKind.EXCEPTION:
            return "Exception"
        case _:
            assert_never(kind)
