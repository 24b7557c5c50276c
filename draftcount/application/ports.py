"""Ports the application layer needs from its host.

A host (the Textual editor, the CLI, the watch loop, or a test) provides a
clock, a way to show messages, and a way to ask the user things. Prompts are
async request/response calls that resolve to ``Answered`` or ``Cancelled``;
a cancelled prompt is a no-op, never an error.
"""

import datetime as dt
from dataclasses import dataclass
from typing import Generic, Literal, Protocol, TypeVar, Union

T = TypeVar("T")

Severity = Literal["information", "warning", "error"]


@dataclass(frozen=True, slots=True)
class Answered(Generic[T]):
    """The user answered a prompt."""

    value: T


@dataclass(frozen=True, slots=True)
class Cancelled:
    """The user dismissed a prompt."""


PromptResult = Union[Answered[T], Cancelled]  # noqa: UP007


class Clock(Protocol):
    def now(self) -> float:
        """Current time in epoch seconds."""
        ...

    def today(self) -> dt.date:
        """Current local calendar date."""
        ...


class Notifier(Protocol):
    def notify(self, message: str, severity: Severity = "information") -> None:
        """Show a one-line transient message."""
        ...

    def show_lines(self, title: str, lines: list[str]) -> None:
        """Show a block of text in a dismissible surface."""
        ...


class Prompter(Protocol):
    async def select(self, title: str, options: list[str]) -> PromptResult[str]:
        """Ask the user to pick one of ``options``."""
        ...

    async def ask_text(self, title: str, placeholder: str = "") -> PromptResult[str]:
        """Ask the user for a line of text."""
        ...

    async def confirm(self, question: str) -> PromptResult[bool]:
        """Ask a yes/no question."""
        ...
