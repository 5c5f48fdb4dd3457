"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. A Result is exactly one of ``Success`` (holding a
value) or ``Failure`` (holding an error); which one is fixed at
construction.

Usage:
    def parse_port(raw: str) -> Result[int]:
        if not raw.isdigit():
            return make_failure(invalid_argument(f"not a port: {raw}"))
        return make_result(int(raw))

    result = parse_port("8080")
    match result:
        case Success(value=port):
            print(f"Port: {port}")
        case Failure(error=error):
            print(f"Error: {error}")

Exceptions cross into Results at a single boundary, ``try_to_result`` (or
its decorator form ``lift``):

    result = try_to_result(lambda: json.loads(payload))
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import wraps
from typing import Any

from fp.core.config import get_settings
from fp.core.container import get_logger
from fp.core.errors import BadResultAccessError, Error, exception
from fp.core.formatting import format_failure, format_success


@dataclass(frozen=True, slots=True, kw_only=True)
class Success[T]:
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T

    def __str__(self) -> str:
        return format_success(self.value)


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure[E]:
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E

    def __str__(self) -> str:
        return format_failure(self.error)


# Type alias for Result union, error type defaults to Error
type Result[T, E = Error] = Success[T] | Failure[E]


def make_result[T](value: T) -> Success[T]:
    """Wrap a value as a successful Result."""
    return Success(value=value)


def make_failure[E](error: E) -> Failure[E]:
    """Wrap an error as a failed Result."""
    return Failure(error=error)


def has_error(result: Result[Any, Any]) -> bool:
    """Return True iff the result holds an error."""
    return isinstance(result, Failure)


def maybe_error[E](results: Iterable[Result[Any, E]]) -> E | None:
    """Return the error of the first failed result, if any.

    Results are scanned in iteration order and scanning stops at the first
    Failure, so when several results failed the leftmost error is reported.

    Args:
        results: Ordered results sharing the same error type.

    Returns:
        E | None: Error of the first Failure, or None if every result
            succeeded (or ``results`` is empty).

    Example:
        error = maybe_error([name_result, age_result, email_result])
        if error is not None:
            return make_failure(error)
    """
    for result in results:
        if isinstance(result, Failure):
            return result.error
    return None


def _describe(exc: Exception) -> str:
    """Return ``str(exc)``, or a placeholder if the exception cannot render."""
    try:
        return str(exc)
    except Exception:
        return f"<unprintable {type(exc).__name__}>"


def _log_conversion(error_type: str, description: str) -> None:
    """Emit the conversion debug event; never raises.

    Settings and logger construction can fail (e.g. an invalid FP_LOG_LEVEL).
    The Failure returned by the adapter must not be replaced by such an error.
    """
    try:
        if get_settings().log_caught_exceptions:
            get_logger().debug(
                "exception_converted_to_result",
                error_type=error_type,
                error_message=description,
            )
    except Exception:
        return


def _exception_to_error(exc: Exception) -> Error:
    """Build the EXCEPTION-kind Error for a caught exception."""
    error_type = type(exc).__name__
    description = _describe(exc)
    error = exception(f"[{error_type}: {description}]")
    _log_conversion(error_type, description)
    return error


def try_to_result[R](f: Callable[[], R]) -> Result[R]:
    """Call ``f`` and capture a raised exception as a failed Result.

    Only ``Exception`` subclasses are caught. KeyboardInterrupt, SystemExit
    and other BaseException subclasses propagate. Conversion itself never
    raises: an exception whose ``__str__`` fails is described as
    ``<unprintable TypeName>``, and logging problems are ignored.

    Args:
        f: Nullary callable to invoke.

    Returns:
        Result[R]: Success wrapping the return value, or Failure with kind
            EXCEPTION and message ``"[<TypeName>: <str(exc)>]"``.
    """
    try:
        return Success(value=f())
    except Exception as exc:
        return Failure(error=_exception_to_error(exc))


def lift[**P, R](f: Callable[P, R]) -> Callable[P, Result[R]]:
    """Decorator turning a raising function into one returning a Result.

    Same conversion rule as ``try_to_result``, for functions of any arity.

    Example:
        @lift
        def load(path: str) -> dict: ...

        load("missing.json")  # Failure(error=Error(kind=EXCEPTION, ...))
    """

    @wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[R]:
        return try_to_result(lambda: f(*args, **kwargs))

    return wrapper


def value_or[T, U](result: Result[T, Any], default: U) -> T | U:
    """Return the success value, or ``default`` for a Failure."""
    if isinstance(result, Success):
        return result.value
    return default


def unwrap[T](result: Result[T, Any]) -> T:
    """Return the success value.

    Raises:
        BadResultAccessError: If the result is a Failure. The held error is
            available as ``.error``.
    """
    if isinstance(result, Failure):
        raise BadResultAccessError(
            f"unwrap() called on {format_failure(result.error)}",
            error=result.error,
        )
    return result.value


def unwrap_error[E](result: Result[Any, E]) -> E:
    """Return the failure error.

    Raises:
        BadResultAccessError: If the result is a Success.
    """
    if isinstance(result, Success):
        raise BadResultAccessError(
            f"unwrap_error() called on {format_success(result.value)}"
        )
    return result.error


def map_value[T, U, E](result: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:
    """Apply ``fn`` to the success value; a Failure passes through."""
    if isinstance(result, Success):
        return Success(value=fn(result.value))
    return result


def map_error[T, E, F](result: Result[T, E], fn: Callable[[E], F]) -> Result[T, F]:
    """Apply ``fn`` to the error; a Success passes through."""
    if isinstance(result, Failure):
        return Failure(error=fn(result.error))
    return result


def and_then[T, U, E](
    result: Result[T, E], fn: Callable[[T], Result[U, E]]
) -> Result[U, E]:
    """Chain a fallible step onto a Success; a Failure short-circuits."""
    if isinstance(result, Success):
        return fn(result.value)
    return result


def or_else[T, E, F](
    result: Result[T, E], fn: Callable[[E], Result[T, F]]
) -> Result[T, F]:
    """Give a Failure a chance to recover; a Success passes through."""
    if isinstance(result, Failure):
        return fn(result.error)
    return result