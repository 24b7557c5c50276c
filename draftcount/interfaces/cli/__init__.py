"""CLI interface for Draftcount using Typer.

Usage:
    draftcount start-challenge    # Pick a daily goal
    draftcount status             # One-line progress
    draftcount watch              # Track files edited in any editor
    draftcount write notes.md     # Built-in editor with live tracking

The CLI is structured as:
- app: Main Typer application
- commands/: Command functions (challenge, progress, session)
- common.py: Shared utilities and console ports
- main.py: Entry point that runs the app
"""

import logging
from typing import Optional

import typer

from draftcount import __version__
from draftcount.interfaces.cli.commands import challenge, progress, session

app = typer.Typer(
    name="draftcount",
    help="Daily writing-progress tracking for local projects",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"draftcount version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
) -> None:
    """Draftcount - count what you write against a daily goal.

    Additions stay pending for an undo grace period and are then committed
    to today's count.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# =============================================================================
# Register Commands
# =============================================================================

app.command("start-challenge")(challenge.start_challenge)
app.command("add-revision-time")(challenge.add_revision_time)
app.command("add-citation")(challenge.add_citation)

app.command("status")(progress.status)
app.command("show-stats")(progress.show_stats)
app.command("reset-today")(progress.reset_today)
app.command("reset-all")(progress.reset_all)
app.command("pause")(progress.pause)
app.command("resume")(progress.resume)
app.command("correct-count")(progress.correct_count)
app.command("config")(progress.show_config)

app.command("watch")(session.watch)
app.command("write")(session.write)


__all__ = ["app"]
