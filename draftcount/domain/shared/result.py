"""Result monad for expected failures in storage and validation.

Storage and input validation return a Result instead of raising, so the
caller decides how the failure is surfaced (a notification, a log line, a
fallback value). Nothing in the tracker should ever crash the host editor.

Example usage:
    >>> def parse_goal(text: str) -> Result[int, str]:
    ...     if not text.isdigit():
    ...         return Err("Goal must be a number")
    ...     return Ok(int(text))
    ...
    >>> result = parse_goal("500")
    >>> if is_ok(result):
    ...     print(f"Goal: {result.value}")
    Goal: 500
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result carrying a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result carrying an error (usually a user-facing message)."""

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    """Check if a result is successful."""
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    """Check if a result is an error."""
    return isinstance(result, Err)


def unwrap_or(result: Ok[T] | Err[E], default: T) -> T:
    """Extract the value from a Result, falling back to a default on Err.

    Args:
        result: The result to unwrap.
        default: The value to return if result is Err.

    Returns:
        The Ok value if successful, otherwise the default.
    """
    if isinstance(result, Ok):
        return result.value
    return default
