"""Error value carried by failed Results.

Error is plain data: it does NOT inherit from Exception and is never
raised. It flows through the system inside ``Failure``.

Usage:
    from fp.core.errors import Error
    from fp.core.enums import ErrorKind

    err = Error(kind=ErrorKind.NOT_FOUND, message="user 42")
    str(err)  # "[Error: [NotFound] user 42]"
"""

from dataclasses import dataclass

from fp.core.enums import ErrorKind, render
from fp.core.formatting import format_error


@dataclass(frozen=True, slots=True, kw_only=True)
class Error:
    """Error kind paired with a free-text message.

    Two errors are equal iff both kind and message are equal.

    Attributes:
        kind: Machine-readable error kind.
        message: Human-readable explanation.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN
    message: str = ""

    @property
    def kind_name(self) -> str:
        """Canonical display name of the kind."""
        return render(self.kind)

    def __str__(self) -> str:
        """String representation used in logs."""
        return format_error(self)
