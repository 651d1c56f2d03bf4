"""Result monad for operations whose failure is an expected outcome.

Most of todokit signals failure with typed exceptions (see
``todokit.domain.todo.exceptions``). A few seams prefer returning the failure
as a value instead: the non-throwing ``safe_validate`` methods of the
validation service, and the low-level JSON file I/O used by the file
repository, which chains decoding onto it with ``flat_map``. Those seams
return ``Ok``/``Err``.

Example usage:
    >>> def parse_level(raw: str) -> Result[str, str]:
    ...     if raw not in ("low", "medium", "high"):
    ...         return Err(f"Unknown priority: {raw}")
    ...     return Ok(raw)
    ...
    >>> result = parse_level("high")
    >>> if is_ok(result):
    ...     print(result.value)
    high
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result.

    Attributes:
        error: The failure value (a message or an exception instance).
    """

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    """Return True if the result is an ``Ok``."""
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    """Return True if the result is an ``Err``."""
    return isinstance(result, Err)


def flat_map(result: Ok[T] | Err[E], fn: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
    """Chain a result-returning function onto an ``Ok``.

    Args:
        result: The result to chain from.
        fn: Function taking the success value and returning a new Result.

    Returns:
        The Result produced by ``fn``, or the original ``Err``.
    """
    if is_ok(result):
        return fn(result.value)
    return result
