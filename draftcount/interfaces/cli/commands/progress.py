"""Progress CLI commands.

Inspecting, correcting and resetting a project's counts, and pausing
tracking.
"""

import typer
from rich.console import Console
from rich.table import Table

from draftcount.infrastructure.config import load_config
from draftcount.infrastructure.storage import state_file
from draftcount.interfaces.cli.common import (
    ProjectOption,
    build_session,
    resolve_project_root,
    run_command,
)


def status(project: ProjectOption = None) -> None:
    """Print the one-line status (for shell prompts and status bars)."""
    session = build_session(project)
    session.open()
    typer.echo(session.status_line())


def show_stats(project: ProjectOption = None) -> None:
    """Show project, challenge, lifetime total and full history."""
    run_command("show-stats", project)


def reset_today(project: ProjectOption = None) -> None:
    """Reset today's count to 0 (asks for confirmation)."""
    run_command("reset-today", project)


def reset_all(project: ProjectOption = None) -> None:
    """Discard all progress including history (asks for confirmation)."""
    run_command("reset-all", project)


def pause(project: ProjectOption = None) -> None:
    """Pause tracking; pending characters still commit."""
    run_command("pause", project)


def resume(project: ProjectOption = None) -> None:
    """Resume tracking."""
    run_command("resume", project)


def correct_count(project: ProjectOption = None) -> None:
    """Subtract characters from today's count (never below 0)."""
    run_command("correct-count", project)


def show_config(project: ProjectOption = None) -> None:
    """Show the effective configuration for a project."""
    root = resolve_project_root(project)
    config = load_config(root)

    table = Table(title=f"Draftcount settings for {root.name}")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("state file", str(state_file(root)))
    table.add_row("tracked_file_types", " ".join(sorted(config.tracked_file_types)))
    table.add_row("undo_grace_period_seconds", str(config.undo_grace_period_seconds))
    table.add_row("max_tracked_chars_per_event", str(config.max_tracked_chars_per_event))
    table.add_row("sweep_interval_seconds", str(config.sweep_interval_seconds))
    table.add_row("poll_interval_seconds", str(config.poll_interval_seconds))
    Console().print(table)
