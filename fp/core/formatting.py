"""Text rendering for Error and Result values.

Log tooling may match on these templates literally; keep the brackets and
prefixes unchanged.

Templates:
    Error:   [Error: [<KindName>] <message>]
    Success: [Result<T>: value=<value>]
    Failure: [Result<T>: <error>]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fp.core.enums import render

if TYPE_CHECKING:
    from fp.core.errors import Error
    from fp.core.result import Result

ERROR_TEMPLATE = "[Error: [{kind}] {message}]"
SUCCESS_TEMPLATE = "[Result<T>: value={value}]"
FAILURE_TEMPLATE = "[Result<T>: {error}]"


def format_error(error: Error) -> str:
    """Render an Error as ``[Error: [<KindName>] <message>]``."""
    return ERROR_TEMPLATE.format(kind=render(error.kind), message=error.message)


def format_success(value: Any) -> str:
    """Render a success payload, delegating to the value's own formatting."""
    return SUCCESS_TEMPLATE.format(value=value)


def format_failure(error: Any) -> str:
    """Render a failure payload, delegating to the error's own formatting."""
    return FAILURE_TEMPLATE.format(error=error)


def format_result(result: Result[Any, Any]) -> str:
    """Render either side of a Result.

    Args:
        result: Success or Failure to render.

    Returns:
        str: ``[Result<T>: value=...]`` or ``[Result<T>: ...]``.
    """
    from fp.core.result import Failure, Success

    match result:
        case Success(value=value):
            return format_success(value)
        case Failure(error=error):
            return format_failure(error)
    raise TypeError(f"Expected Success or Failure, got {type(result).__name__}")
