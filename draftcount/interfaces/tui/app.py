"""Draftcount editor.

A minimal Textual editor for one document. Every edit is fed to the
tracker session, the status line shows the live daily progress, and the
tracker commands are bound to function keys.
"""

import logging
from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.logging import TextualHandler
from textual.widgets import Footer, Static, TextArea

from draftcount.application import (
    COMMANDS,
    Answered,
    Cancelled,
    Clock,
    CommitSweeper,
    PromptResult,
    Severity,
    TrackerSession,
    get_command,
)
from draftcount.infrastructure import ProgressRepository, SystemClock, TrackerConfig
from draftcount.interfaces.tui.screens import (
    ConfirmModal,
    SelectModal,
    StatsModal,
    TextInputModal,
)

logger = logging.getLogger(__name__)


class TuiNotifier:
    """Notifier that shows toasts and modals in a running App."""

    def __init__(self, app: App) -> None:
        self.app = app

    def notify(self, message: str, severity: Severity = "information") -> None:
        self.app.notify(message, severity=severity)

    def show_lines(self, title: str, lines: list[str]) -> None:
        self.app.push_screen(StatsModal(title, lines))


class TuiPrompter:
    """Prompter backed by modal screens.

    Must be awaited from a worker, since it waits for the modal to be
    dismissed.
    """

    def __init__(self, app: App) -> None:
        self.app = app

    async def select(self, title: str, options: list[str]) -> PromptResult[str]:
        choice = await self.app.push_screen_wait(SelectModal(title, options))
        return Cancelled() if choice is None else Answered(choice)

    async def ask_text(self, title: str, placeholder: str = "") -> PromptResult[str]:
        text = await self.app.push_screen_wait(TextInputModal(title, placeholder))
        return Cancelled() if text is None else Answered(text)

    async def confirm(self, question: str) -> PromptResult[bool]:
        answer = await self.app.push_screen_wait(ConfirmModal(question))
        return Cancelled() if answer is None else Answered(answer)


class DraftApp(App):
    """Single-document editor with live progress tracking."""

    TITLE = "Draftcount"

    CSS = """
    Screen {
        background: $surface;
    }

    #editor {
        height: 1fr;
        border: solid $primary;
    }

    #status-line {
        height: 1;
        padding: 0 1;
        background: $primary-background;
        color: $text;
    }
    """

    BINDINGS = [
        Binding("ctrl+s", "save_file", "Save", priority=True),
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("f1", "command_list", "Commands"),
        Binding("f2", "command('start-challenge')", "Challenge"),
        Binding("f3", "command('show-stats')", "Stats"),
        Binding("f4", "command('correct-count')", "Correct", show=False),
        Binding("f5", "command('pause')", "Pause"),
        Binding("f6", "command('resume')", "Resume"),
        Binding("f7", "command('add-revision-time')", "Revision", show=False),
        Binding("f8", "command('add-citation')", "Citation", show=False),
        Binding("f9", "command('reset-today')", "Reset today", show=False),
        Binding("f10", "command('reset-all')", "Reset all", show=False),
    ]

    def __init__(
        self,
        path: Path,
        project_root: Path,
        config: TrackerConfig,
        clock: Optional[Clock] = None,
    ) -> None:
        """Initialize the editor.

        Args:
            path: Document to edit. Created on first save if missing.
            project_root: Root whose progress file is updated.
            config: Tracker configuration for the project.
            clock: Time source (defaults to the system clock).
        """
        super().__init__()
        self.document_path = path
        self.project_root = project_root
        self.tracker_config = config
        self.sub_title = path.name

        try:
            self.buffer_id = path.resolve().relative_to(project_root.resolve()).as_posix()
        except ValueError:
            self.buffer_id = path.resolve().as_posix()
        self.tracked = config.is_tracked(path.name)

        self._initial_text = path.read_text(encoding="utf-8") if path.exists() else ""

        self.session = TrackerSession(
            ProgressRepository(project_root),
            config,
            clock or SystemClock(),
            TuiNotifier(self),
        )
        self.prompter = TuiPrompter(self)
        self.sweeper = CommitSweeper(
            self.session,
            config.sweep_interval_seconds,
            after_tick=lambda _committed: self.refresh_status(),
        )
        self.status_text = ""
        self._log_handler = TextualHandler()

    def compose(self) -> ComposeResult:
        yield TextArea(self._initial_text, id="editor")
        yield Static("", id="status-line", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        logging.getLogger("draftcount").addHandler(self._log_handler)

        self.query_one("#editor", TextArea).focus()
        if self.tracked:
            self.session.initialize_for_buffer(self.buffer_id, len(self._initial_text))
        else:
            self.session.open()
            self.notify(f"{self.document_path.name} is not a tracked file type", severity="warning")
        self.sweeper.start(self.set_interval)
        self.refresh_status()

    def on_unmount(self) -> None:
        self.sweeper.stop()
        self.session.close_buffer(self.buffer_id)
        logging.getLogger("draftcount").removeHandler(self._log_handler)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if self.tracked:
            self.session.on_text_changed(self.buffer_id, len(event.text_area.text))
        self.refresh_status()

    def refresh_status(self) -> None:
        """Redraw the status line from the live state."""
        self.status_text = self.session.status_line()
        self.query_one("#status-line", Static).update(self.status_text)

    # =========================================================================
    # Actions
    # =========================================================================

    def action_save_file(self) -> bool:
        text = self.query_one("#editor", TextArea).text
        try:
            self.document_path.parent.mkdir(parents=True, exist_ok=True)
            self.document_path.write_text(text, encoding="utf-8")
        except OSError as e:
            logger.error(f"Saving {self.document_path} failed: {e}")
            self.notify(f"Could not save {self.document_path.name}: {e}", severity="error")
            return False

        self.notify(f"Saved {self.document_path.name}")
        return True

    async def action_quit(self) -> None:
        if self.action_save_file():
            self.exit()
            return
        self.run_worker(self._confirm_quit(), exclusive=True, group="quit")

    async def _confirm_quit(self) -> None:
        question = f"Could not save {self.document_path.name}. Quit without saving?"
        if await self.push_screen_wait(ConfirmModal(question)):
            self.exit()

    def action_command(self, name: str) -> None:
        command = get_command(name)
        if command is None:
            self.notify(f"Unknown command: {name}", severity="error")
            return
        self.run_worker(self._run_command(name), exclusive=True, group="commands")

    def action_command_list(self) -> None:
        self.run_worker(self._pick_command(), exclusive=True, group="commands")

    async def _pick_command(self) -> None:
        labels = [f"{command.name}: {command.description}" for command in COMMANDS]
        choice = await self.prompter.select("Commands", labels)
        if isinstance(choice, Cancelled):
            return
        await self._run_command(choice.value.split(":", 1)[0])

    async def _run_command(self, name: str) -> None:
        command = get_command(name)
        if command is None:
            return
        logger.debug(f"Running command {name}")
        await command.run(self.session, self.prompter)
        self.refresh_status()
