"""Tracking session CLI commands.

Two hosts that drive the tracker continuously:

- watch: polls tracked files under the project root (use with any editor)
- write: opens a file in the built-in terminal editor
"""

import logging
import time
from pathlib import Path

import typer

from draftcount.application import CommitSweeper, TrackerSession
from draftcount.domain.shared import Err
from draftcount.infrastructure.clock import SystemClock
from draftcount.infrastructure.config import load_config
from draftcount.infrastructure.scheduler import PollingScheduler
from draftcount.infrastructure.storage import ProgressRepository, SessionLock
from draftcount.infrastructure.watcher import BufferEvent, DirectoryWatcher
from draftcount.interfaces.cli.common import (
    ConsoleNotifier,
    ProjectOption,
    print_error,
    print_info,
    print_warning,
    resolve_project_root,
)

logger = logging.getLogger(__name__)


def dispatch_buffer_events(session: TrackerSession, events: list[BufferEvent]) -> None:
    """Feed watcher events into the session."""
    for event in events:
        if event.kind == "entered":
            session.initialize_for_buffer(event.buffer_id, event.char_count)
        elif event.kind == "changed":
            session.on_text_changed(event.buffer_id, event.char_count)
        elif event.kind == "closed":
            session.close_buffer(event.buffer_id)


def watch(
    project: ProjectOption = None,
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not print status changes"),
) -> None:
    """Track writing done in any editor by polling tracked files.

    Every file with a tracked extension under the project root counts as a
    buffer. While it runs, one-shot commands that change progress are
    refused. Press Ctrl+C to stop.

    Example:
        draftcount watch -p ~/novel
    """
    root = resolve_project_root(project)
    config = load_config(root)
    clock = SystemClock()
    session = TrackerSession(ProgressRepository(root), config, clock, ConsoleNotifier())
    watcher = DirectoryWatcher(root, config)
    scheduler = PollingScheduler(clock)
    sweeper = CommitSweeper(session, config.sweep_interval_seconds)

    lock = SessionLock(root)
    acquired = lock.acquire()
    if isinstance(acquired, Err):
        print_error(acquired.error)
        raise typer.Exit(1)

    session.open()
    sweeper.start(scheduler.set_interval)
    print_info(f"Watching {root} ({', '.join(sorted(config.tracked_file_types))})")
    print_info("Press Ctrl+C to stop")

    last_status = ""
    try:
        while True:
            dispatch_buffer_events(session, watcher.poll())
            scheduler.run_pending()

            current = session.status_line()
            if not quiet and current != last_status:
                typer.echo(current)
            last_status = current

            time.sleep(config.poll_interval_seconds)
    except KeyboardInterrupt:
        typer.echo("")
    finally:
        sweeper.stop()
        lock.release()
        logger.debug("Watch loop stopped")

    print_info("Stopped watching")


def write(
    file: Path = typer.Argument(..., help="Document to edit (created if missing)"),
    project: ProjectOption = None,
) -> None:
    """Open a document in the built-in terminal editor with live tracking.

    Example:
        draftcount write chapter1.md
    """
    root = resolve_project_root(project)
    path = file if file.is_absolute() else Path.cwd() / file
    if path.exists() and not path.is_file():
        print_error(f"Not a file: {path}")
        raise typer.Exit(1)

    config = load_config(root)
    if not config.is_tracked(path):
        print_warning(f"{path.suffix or 'Files without an extension'} is not a tracked file type")

    from draftcount.interfaces.tui.app import DraftApp

    lock = SessionLock(root)
    acquired = lock.acquire()
    if isinstance(acquired, Err):
        print_error(acquired.error)
        raise typer.Exit(1)

    try:
        DraftApp(path=path, project_root=root, config=config).run()
    finally:
        lock.release()
