"""
Pytest configuration and shared fixtures.

Provides a controllable clock, recording notifier, scripted prompter and a
tracker session bound to a temporary project directory.
"""

import datetime as dt
from pathlib import Path

import pytest

from draftcount.application import Answered, Cancelled, PromptResult, Severity, TrackerSession
from draftcount.infrastructure.config import TrackerConfig
from draftcount.infrastructure.storage import ProgressRepository

START_TIME = 1_700_000_000.0
START_DATE = dt.date(2024, 3, 14)


# ==============================================================================
# Ports
# ==============================================================================


class FakeClock:
    """Clock whose time and date only move when a test says so."""

    def __init__(self, now: float = START_TIME, today: dt.date = START_DATE) -> None:
        self._now = now
        self._today = today

    def now(self) -> float:
        return self._now

    def today(self) -> dt.date:
        return self._today

    def advance(self, seconds: float) -> None:
        self._now += seconds

    def next_day(self, days: int = 1) -> None:
        self._today += dt.timedelta(days=days)


class RecordingNotifier:
    """Notifier that keeps every message for assertions."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, Severity]] = []
        self.panels: list[tuple[str, list[str]]] = []

    def notify(self, message: str, severity: Severity = "information") -> None:
        self.messages.append((message, severity))

    def show_lines(self, title: str, lines: list[str]) -> None:
        self.panels.append((title, lines))

    @property
    def texts(self) -> list[str]:
        return [message for message, _ in self.messages]

    def with_severity(self, severity: Severity) -> list[str]:
        return [message for message, sev in self.messages if sev == severity]


class ScriptedPrompter:
    """Prompter answering from a queue; None in the queue means cancel."""

    def __init__(self, *answers: object) -> None:
        self.answers = list(answers)
        self.asked: list[str] = []

    def _next(self, title: str) -> PromptResult:
        self.asked.append(title)
        if not self.answers:
            return Cancelled()
        answer = self.answers.pop(0)
        return Cancelled() if answer is None else Answered(answer)

    async def select(self, title: str, options: list[str]) -> PromptResult[str]:
        return self._next(title)

    async def ask_text(self, title: str, placeholder: str = "") -> PromptResult[str]:
        return self._next(title)

    async def confirm(self, question: str) -> PromptResult[bool]:
        return self._next(question)


# ==============================================================================
# Fixtures
# ==============================================================================


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def prompter_factory():
    """Build a ScriptedPrompter from the answers it should give."""
    return ScriptedPrompter


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Provide an empty project root."""
    project = tmp_path / "novel"
    project.mkdir()
    return project


@pytest.fixture
def config() -> TrackerConfig:
    return TrackerConfig()


@pytest.fixture
def repository(project_dir: Path) -> ProgressRepository:
    return ProgressRepository(project_dir)


@pytest.fixture
def session(
    repository: ProgressRepository,
    config: TrackerConfig,
    clock: FakeClock,
    notifier: RecordingNotifier,
) -> TrackerSession:
    """A session on a fresh project, already opened."""
    tracker = TrackerSession(repository, config, clock, notifier)
    tracker.open()
    return tracker


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep global config lookups away from the real home directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("DRAFTCOUNT_HOME", str(home))
    monkeypatch.delenv("DRAFTCOUNT_PROJECT", raising=False)
    return home
