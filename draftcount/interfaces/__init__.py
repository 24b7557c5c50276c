"""Interfaces layer for Draftcount.

Adapters for user interaction:
- CLI: command-line interface using Typer
- TUI: terminal editor using Textual (draftcount.interfaces.tui)

The interfaces layer accepts user input, calls the application layer and
formats output. The TUI is imported lazily by ``draftcount write``.
"""

from draftcount.interfaces.cli import app

__all__ = ["app"]
