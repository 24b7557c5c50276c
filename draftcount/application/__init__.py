"""Application service layer for Draftcount.

Orchestrates the domain for a host:

    tracker_service - TrackerSession, the per-project handle (load, ledger, commands)
    commands - the user commands as async functions over a Prompter
    sweeper - the periodic commit sweep
    status - status line and stats projections
    ports - Clock / Notifier / Prompter protocols

Example usage:
    >>> from draftcount.application import TrackerSession, format_status
    >>> session.initialize_for_buffer("draft.md", 0)
    >>> session.on_text_changed("draft.md", 12)
    >>> print(session.status_line())
"""

from draftcount.application.commands import COMMANDS, Command, get_command
from draftcount.application.ports import (
    Answered,
    Cancelled,
    Clock,
    Notifier,
    PromptResult,
    Prompter,
    Severity,
)
from draftcount.application.status import (
    display_count,
    format_status,
    percentage,
    stats_lines,
)
from draftcount.application.sweeper import CommitSweeper
from draftcount.application.tracker_service import TrackerSession, describe_event

__all__ = [
    # Session
    "TrackerSession",
    "describe_event",
    "CommitSweeper",
    # Commands
    "COMMANDS",
    "Command",
    "get_command",
    # Ports
    "Answered",
    "Cancelled",
    "Clock",
    "Notifier",
    "PromptResult",
    "Prompter",
    "Severity",
    # Status
    "display_count",
    "format_status",
    "percentage",
    "stats_lines",
]
