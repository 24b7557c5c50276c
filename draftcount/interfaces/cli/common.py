"""Shared utilities for Draftcount CLI commands.

- Project root resolution (-p/--project, DRAFTCOUNT_PROJECT, cwd)
- Formatted output helpers (error, success, info, warning)
- Console implementations of the Notifier and Prompter ports
- Running a named command against a freshly opened session, unless a
  long-running session holds the project lock
"""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.panel import Panel

from draftcount.application import (
    Answered,
    Cancelled,
    PromptResult,
    Severity,
    TrackerSession,
    get_command,
)
from draftcount.infrastructure.clock import SystemClock
from draftcount.infrastructure.config import load_config
from draftcount.infrastructure.storage import ProgressRepository, SessionLock

PROJECT_ENV_VAR = "DRAFTCOUNT_PROJECT"

# Usage: def my_command(project: ProjectOption = None) -> None:
ProjectOption = Annotated[
    Optional[Path],
    typer.Option(
        "--project",
        "-p",
        help=f"Project root directory (or set {PROJECT_ENV_VAR}; default: current directory)",
        envvar=PROJECT_ENV_VAR,
    ),
]


def resolve_project_root(explicit: Path | None = None) -> Path:
    """Get the project root, exiting with an error if it is not a directory.

    Args:
        explicit: Root given via -p/--project or the environment variable.

    Returns:
        Absolute path of the project root.

    Raises:
        typer.Exit: If the path does not exist or is not a directory.
    """
    root = (explicit or Path.cwd()).expanduser()
    if not root.is_dir():
        print_error(f"Project directory not found: {root}")
        raise typer.Exit(1)
    return root.resolve()


def print_error(msg: str) -> None:
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_warning(msg: str) -> None:
    typer.echo(typer.style(f"Warning: {msg}", fg=typer.colors.YELLOW), err=True)


class ConsoleNotifier:
    """Notifier that prints to the terminal."""

    def notify(self, message: str, severity: Severity = "information") -> None:
        if severity == "error":
            print_error(message)
        elif severity == "warning":
            print_warning(message)
        else:
            print_success(message)

    def show_lines(self, title: str, lines: list[str]) -> None:
        Console().print(Panel("\n".join(lines), title=title, expand=False))


class ConsolePrompter:
    """Prompter that asks on the terminal.

    A blank answer, Ctrl+C or end of input cancels the prompt.
    """

    async def select(self, title: str, options: list[str]) -> PromptResult[str]:
        typer.echo(title)
        for index, option in enumerate(options, start=1):
            typer.echo(f"  {index}. {option}")

        raw = self._prompt("Choice (blank to cancel)")
        if raw is None:
            return Cancelled()

        if raw.isdigit() and 1 <= int(raw) <= len(options):
            return Answered(options[int(raw) - 1])
        if raw in options:
            return Answered(raw)

        print_error(f"Not a valid choice: {raw}")
        return Cancelled()

    async def ask_text(self, title: str, placeholder: str = "") -> PromptResult[str]:
        label = f"{title} ({placeholder})" if placeholder else title
        raw = self._prompt(label)
        if raw is None:
            return Cancelled()
        return Answered(raw)

    async def confirm(self, question: str) -> PromptResult[bool]:
        try:
            return Answered(typer.confirm(question, default=False))
        except typer.Abort:
            return Cancelled()

    def _prompt(self, label: str) -> str | None:
        try:
            raw = typer.prompt(label, default="", show_default=False)
        except typer.Abort:
            return None
        raw = raw.strip()
        return raw or None


def build_session(project: Path | None) -> TrackerSession:
    """Create a session for a project root with console ports."""
    root = resolve_project_root(project)
    return TrackerSession(
        repository=ProgressRepository(root),
        config=load_config(root),
        clock=SystemClock(),
        notifier=ConsoleNotifier(),
    )


def run_command(name: str, project: Path | None) -> None:
    """Open the project and run one named command on the console.

    Commands that change progress are refused while a watch or write
    session holds the project lock.

    Raises:
        typer.Exit: With code 1 if a session holds the lock or the resulting
            state could not be saved.
    """
    command = get_command(name)
    if command is None:
        print_error(f"Unknown command: {name}")
        raise typer.Exit(1)

    root = resolve_project_root(project)
    if command.changes_progress:
        owner = SessionLock(root).owner()
        if owner is not None:
            print_error(
                f"A draftcount session (pid {owner}) is tracking this project; "
                f"stop it before running {name}"
            )
            raise typer.Exit(1)

    session = build_session(root)
    session.open()
    asyncio.run(command.run(session, ConsolePrompter()))

    if session.last_save_error:
        raise typer.Exit(1)


__all__ = [
    "ProjectOption",
    "ConsoleNotifier",
    "ConsolePrompter",
    "build_session",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "resolve_project_root",
    "run_command",
]
