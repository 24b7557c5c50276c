"""Tests for the directory watcher and event dispatch."""

from pathlib import Path

from draftcount.application import TrackerSession
from draftcount.infrastructure.config import TrackerConfig
from draftcount.infrastructure.watcher import BufferEvent, DirectoryWatcher, count_chars
from draftcount.interfaces.cli.commands.session import dispatch_buffer_events


class TestDirectoryWatcher:
    """Tests for DirectoryWatcher.poll."""

    def test_first_poll_enters_tracked_files(self, project_dir: Path) -> None:
        (project_dir / "ch1.md").write_text("hello")
        (project_dir / "script.py").write_text("print()")

        events = DirectoryWatcher(project_dir, TrackerConfig()).poll()

        assert events == [BufferEvent("entered", "ch1.md", 5)]

    def test_change_and_close(self, project_dir: Path) -> None:
        doc = project_dir / "ch1.md"
        doc.write_text("hello")
        watcher = DirectoryWatcher(project_dir, TrackerConfig())
        watcher.poll()

        doc.write_text("hello world")
        assert watcher.poll() == [BufferEvent("changed", "ch1.md", 11)]
        assert watcher.poll() == []

        doc.unlink()
        assert watcher.poll() == [BufferEvent("closed", "ch1.md")]

    def test_skips_hidden_directories(self, project_dir: Path) -> None:
        hidden = project_dir / ".draftcount"
        hidden.mkdir()
        (hidden / "notes.md").write_text("x")

        assert DirectoryWatcher(project_dir, TrackerConfig()).poll() == []

    def test_count_chars_counts_characters(self, tmp_path: Path) -> None:
        path = tmp_path / "unicode.md"
        path.write_text("héllo ✍", encoding="utf-8")

        assert count_chars(path) == 7
        assert count_chars(tmp_path / "missing.md") is None


class TestDispatch:
    """Tests for feeding watcher events into a session."""

    def test_existing_text_is_not_counted(self, session: TrackerSession, project_dir: Path) -> None:
        doc = project_dir / "ch1.md"
        doc.write_text("x" * 400)
        watcher = DirectoryWatcher(project_dir, session.config)

        dispatch_buffer_events(session, watcher.poll())
        doc.write_text("x" * 410)
        dispatch_buffer_events(session, watcher.poll())

        assert session.state.pending_total == 10

    def test_closed_buffer_is_forgotten(self, session: TrackerSession) -> None:
        dispatch_buffer_events(
            session,
            [BufferEvent("entered", "a.md", 10), BufferEvent("closed", "a.md")],
        )

        assert session.ledger.baseline("a.md") is None
