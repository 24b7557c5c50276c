"""Shared domain building blocks.

- Result monad for explicit error handling
- Base domain event

Example usage:
    >>> from draftcount.domain.shared import Ok, Err, Result, is_ok
    >>>
    >>> def check_goal(goal: int) -> Result[int, str]:
    ...     if goal <= 0:
    ...         return Err("Goal must be positive")
    ...     return Ok(goal)
"""

from draftcount.domain.shared.events import DomainEvent
from draftcount.domain.shared.result import (
    Err,
    Ok,
    Result,
    is_err,
    is_ok,
    unwrap_or,
)

__all__ = [
    # Result monad
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    "unwrap_or",
    # Domain events
    "DomainEvent",
]
