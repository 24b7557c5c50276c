"""CLI command modules for Draftcount.

- challenge: start-challenge, add-revision-time, add-citation
- progress: status, show-stats, reset-today, reset-all, pause, resume,
  correct-count, config
- session: watch, write

The functions are registered with the main Typer app under their
hyphenated command names.
"""

from draftcount.interfaces.cli.commands import challenge, progress, session

__all__ = ["challenge", "progress", "session"]
