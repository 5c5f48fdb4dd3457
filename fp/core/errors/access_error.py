"""Exception raised when a Result is accessed on the wrong side.

This is the only exception the library raises itself. It signals caller
misuse (``unwrap`` on a Failure, ``unwrap_error`` on a Success), not a
domain failure.
"""

from typing import Any


class BadResultAccessError(Exception):
    """Raised when reading the value of a Failure or the error of a Success.

    Attributes:
        error: Error held by the Failure, or None when a Success was
            asked for its error.
    """

    def __init__(self, message: str, *, error: Any = None) -> None:
        super().__init__(message)
        self.error = error
