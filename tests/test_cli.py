"""Tests for the Typer CLI."""

import datetime as dt
import json
import os
from pathlib import Path

import pytest
from typer.testing import CliRunner

from draftcount import __version__
from draftcount.domain.progress import HistoryEntry, ProjectState
from draftcount.infrastructure.storage import ProgressRepository, SessionLock
from draftcount.infrastructure.storage import session_lock
from draftcount.interfaces.cli import app
from draftcount.interfaces.cli.commands import session as session_commands

runner = CliRunner()


def seed(project_dir: Path, **fields) -> None:
    fields.setdefault("last_update_date", dt.date.today())
    ProgressRepository(project_dir).save(ProjectState(**fields))


def saved(project_dir: Path) -> dict:
    return json.loads((project_dir / ".draftcount" / "progress.json").read_text())


class TestBasics:
    """Tests for the app callback and read-only commands."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_status_without_challenge(self, project_dir: Path) -> None:
        result = runner.invoke(app, ["status", "-p", str(project_dir)])

        assert result.exit_code == 0
        assert result.output.strip() == "✍ No active challenge"

    def test_status_with_challenge(self, project_dir: Path) -> None:
        seed(project_dir, goal=500, challenge_name="Warm-up", daily_count=125)

        result = runner.invoke(app, ["status", "-p", str(project_dir)])

        assert result.output.strip() == "✍ 125/500 (25%)"

    def test_project_from_environment(self, project_dir: Path) -> None:
        seed(project_dir, goal=1000, daily_count=10)

        result = runner.invoke(app, ["status"], env={"DRAFTCOUNT_PROJECT": str(project_dir)})

        assert "10/1000" in result.output

    def test_missing_project_dir(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["status", "-p", str(tmp_path / "nowhere")])

        assert result.exit_code == 1
        assert "Project directory not found" in result.output

    def test_show_stats(self, project_dir: Path) -> None:
        seed(
            project_dir,
            goal=1000,
            challenge_name="Steady Writer",
            daily_count=40,
            history=[HistoryEntry(date=dt.date(2024, 1, 2), count=900)],
        )

        result = runner.invoke(app, ["show-stats", "-p", str(project_dir)])

        assert result.exit_code == 0
        assert "Project: novel" in result.output
        assert "Lifetime total: 940 characters" in result.output
        assert "2024-01-02" in result.output

    def test_config(self, project_dir: Path) -> None:
        result = runner.invoke(app, ["config", "-p", str(project_dir)])

        assert result.exit_code == 0
        assert "settings" in result.output


class TestChallengeCommands:
    """Tests for start-challenge and the bonuses."""

    def test_pick_preset(self, project_dir: Path) -> None:
        result = runner.invoke(app, ["start-challenge", "-p", str(project_dir)], input="2\n")

        assert result.exit_code == 0
        assert saved(project_dir)["goal"] == 1000
        assert saved(project_dir)["challengeName"] == "Steady Writer"

    def test_custom_goal(self, project_dir: Path) -> None:
        result = runner.invoke(
            app, ["start-challenge", "-p", str(project_dir)], input="6\n1500\n"
        )

        assert result.exit_code == 0
        assert saved(project_dir)["goal"] == 1500
        assert saved(project_dir)["challengeName"] == "Custom"

    def test_invalid_custom_goal(self, project_dir: Path) -> None:
        result = runner.invoke(app, ["start-challenge", "-p", str(project_dir)], input="6\nzero\n")

        assert result.exit_code == 0
        assert "whole number" in result.output
        assert saved(project_dir)["goal"] == 0

    def test_blank_choice_cancels(self, project_dir: Path) -> None:
        result = runner.invoke(app, ["start-challenge", "-p", str(project_dir)], input="\n")

        assert result.exit_code == 0
        assert saved(project_dir)["goal"] == 0

    def test_bonus_gate(self, project_dir: Path) -> None:
        seed(project_dir, goal=1000)

        result = runner.invoke(app, ["add-revision-time", "-p", str(project_dir)])

        assert result.exit_code == 0
        assert "requires a daily goal of at least 3,000" in result.output
        assert saved(project_dir)["dailyCount"] == 0

    def test_citation(self, project_dir: Path) -> None:
        seed(project_dir, goal=2000)

        result = runner.invoke(app, ["add-citation", "-p", str(project_dir)])

        assert result.exit_code == 0
        assert saved(project_dir)["dailyCount"] == 50


class TestProgressCommands:
    """Tests for pause, corrections and resets."""

    def test_pause_then_status(self, project_dir: Path) -> None:
        seed(project_dir, goal=500, daily_count=100)

        runner.invoke(app, ["pause", "-p", str(project_dir)])
        result = runner.invoke(app, ["status", "-p", str(project_dir)])

        assert result.output.strip() == "✍ 100/500 (20%) (Paused)"

    def test_resume(self, project_dir: Path) -> None:
        seed(project_dir, tracking_paused=True)

        result = runner.invoke(app, ["resume", "-p", str(project_dir)])

        assert "Tracking resumed" in result.output
        assert saved(project_dir)["trackingPaused"] is False

    def test_correct_count(self, project_dir: Path) -> None:
        seed(project_dir, daily_count=300)

        result = runner.invoke(app, ["correct-count", "-p", str(project_dir)], input="50\n")

        assert result.exit_code == 0
        assert saved(project_dir)["dailyCount"] == 250

    @pytest.mark.parametrize("answer,expected", [("y\n", 0), ("n\n", 300)])
    def test_reset_today(self, project_dir: Path, answer: str, expected: int) -> None:
        seed(project_dir, daily_count=300)

        runner.invoke(app, ["reset-today", "-p", str(project_dir)], input=answer)

        assert saved(project_dir)["dailyCount"] == expected

    def test_reset_all(self, project_dir: Path) -> None:
        seed(
            project_dir,
            goal=500,
            daily_count=30,
            history=[HistoryEntry(date=dt.date(2024, 1, 2), count=900)],
        )

        runner.invoke(app, ["reset-all", "-p", str(project_dir)], input="y\n")

        assert saved(project_dir)["history"] == []
        assert saved(project_dir)["goal"] == 0

    def test_save_failure_exits_nonzero(self, tmp_path: Path) -> None:
        root = tmp_path / "broken"
        root.mkdir()
        (root / ".draftcount").write_text("")

        result = runner.invoke(app, ["pause", "-p", str(root)])

        assert result.exit_code == 1
        assert "Could not save progress" in result.output


class TestSessionLock:
    """Tests for one-shot commands while a watch or write session runs."""

    def test_pause_refused_while_session_runs(self, project_dir: Path) -> None:
        seed(project_dir, daily_count=100)
        SessionLock(project_dir).acquire()

        result = runner.invoke(app, ["pause", "-p", str(project_dir)])

        assert result.exit_code == 1
        assert "is tracking this project" in result.output
        assert saved(project_dir)["trackingPaused"] is False

    def test_correct_count_refused_while_session_runs(self, project_dir: Path) -> None:
        seed(project_dir, daily_count=300)
        SessionLock(project_dir).acquire()

        result = runner.invoke(app, ["correct-count", "-p", str(project_dir)], input="50\n")

        assert result.exit_code == 1
        assert saved(project_dir)["dailyCount"] == 300

    def test_show_stats_allowed_while_session_runs(self, project_dir: Path) -> None:
        seed(project_dir, daily_count=40)
        SessionLock(project_dir).acquire()

        result = runner.invoke(app, ["show-stats", "-p", str(project_dir)])

        assert result.exit_code == 0
        assert "Lifetime total: 40 characters" in result.output

    def test_stale_lock_is_ignored(
        self, project_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        seed(project_dir)
        lock = SessionLock(project_dir)
        lock.path.write_text("4242")
        monkeypatch.setattr(session_lock, "_process_alive", lambda pid: False)

        result = runner.invoke(app, ["pause", "-p", str(project_dir)])

        assert result.exit_code == 0
        assert saved(project_dir)["trackingPaused"] is True
        assert not lock.path.exists()

    def test_watch_holds_lock_until_stopped(
        self, project_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        owners: list = []

        def stop_after_one_poll(seconds: float) -> None:
            owners.append(SessionLock(project_dir).owner())
            raise KeyboardInterrupt

        monkeypatch.setattr(session_commands.time, "sleep", stop_after_one_poll)

        result = runner.invoke(app, ["watch", "-q", "-p", str(project_dir)])

        assert result.exit_code == 0
        assert owners == [os.getpid()]
        assert SessionLock(project_dir).owner() is None

    def test_watch_refused_while_another_session_runs(
        self, project_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        lock = SessionLock(project_dir)
        lock.path.parent.mkdir(parents=True)
        lock.path.write_text("4242")
        monkeypatch.setattr(session_lock, "_process_alive", lambda pid: True)

        result = runner.invoke(app, ["watch", "-q", "-p", str(project_dir)])

        assert result.exit_code == 1
        assert "already running" in result.output
        assert lock.path.read_text() == "4242"
