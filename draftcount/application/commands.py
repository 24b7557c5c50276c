"""User commands.

Each command is an async function taking the session and a Prompter. Hosts
(the CLI, the Textual editor) only supply the prompter; the mutations behind
a confirmed prompt are the same TrackerSession methods used everywhere else.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from draftcount.application.ports import Answered, Cancelled, Prompter
from draftcount.application.tracker_service import TrackerSession
from draftcount.domain.challenge import (
    CITATION,
    CUSTOM_CHALLENGE_NAME,
    CUSTOM_GOAL_LABEL,
    REVISION_TIME,
    challenge_options,
    find_preset,
    parse_correction,
    parse_custom_goal,
)
from draftcount.domain.shared import Err

CommandFn = Callable[[TrackerSession, Prompter], Awaitable[None]]


async def start_challenge(session: TrackerSession, prompter: Prompter) -> None:
    """Pick a preset goal or enter a custom one."""
    choice = await prompter.select("Start a writing challenge", challenge_options())
    if isinstance(choice, Cancelled):
        return

    preset = find_preset(choice.value)
    if preset is not None:
        session.start_challenge(preset.name, preset.goal)
        return

    if choice.value != CUSTOM_GOAL_LABEL:
        session.notifier.notify(f"Unknown challenge: {choice.value}", "error")
        return

    answer = await prompter.ask_text("Daily character goal", placeholder="e.g. 1500")
    if isinstance(answer, Cancelled):
        return

    goal = parse_custom_goal(answer.value)
    if isinstance(goal, Err):
        session.notifier.notify(goal.error, "error")
        return

    session.start_challenge(CUSTOM_CHALLENGE_NAME, goal.value)


async def show_stats(session: TrackerSession, prompter: Prompter) -> None:
    """Render project, challenge, totals and history."""
    session.notifier.show_lines("Writing stats", session.stats())


async def reset_today(session: TrackerSession, prompter: Prompter) -> None:
    """Zero today's count after confirmation."""
    count = session.state.daily_count
    answer = await prompter.confirm(f"Reset today's count of {count:,} characters to 0?")
    if isinstance(answer, Answered) and answer.value:
        session.reset_today()


async def reset_all(session: TrackerSession, prompter: Prompter) -> None:
    """Discard all progress, history included, after confirmation."""
    answer = await prompter.confirm(
        "Reset ALL progress for this project, including history? This cannot be undone."
    )
    if isinstance(answer, Answered) and answer.value:
        session.reset_all()


async def pause(session: TrackerSession, prompter: Prompter) -> None:
    session.set_paused(True)


async def resume(session: TrackerSession, prompter: Prompter) -> None:
    session.set_paused(False)


async def correct_count(session: TrackerSession, prompter: Prompter) -> None:
    """Subtract a user-supplied amount from today's count (never below 0)."""
    answer = await prompter.ask_text("Characters to subtract from today", placeholder="e.g. 200")
    if isinstance(answer, Cancelled):
        return

    amount = parse_correction(answer.value)
    if isinstance(amount, Err):
        session.notifier.notify(amount.error, "error")
        return

    session.correct_count(amount.value)


async def add_revision_time(session: TrackerSession, prompter: Prompter) -> None:
    session.grant_bonus(REVISION_TIME)


async def add_citation(session: TrackerSession, prompter: Prompter) -> None:
    session.grant_bonus(CITATION)


@dataclass(frozen=True)
class Command:
    """A named, zero-argument user command."""

    name: str
    description: str
    run: CommandFn
    changes_progress: bool = True


COMMANDS: list[Command] = [
    Command("start-challenge", "Choose a daily goal", start_challenge),
    Command("show-stats", "Show totals and history", show_stats, changes_progress=False),
    Command("reset-today", "Reset today's count to 0", reset_today),
    Command("reset-all", "Reset all progress and history", reset_all),
    Command("pause", "Pause tracking", pause),
    Command("resume", "Resume tracking", resume),
    Command("correct-count", "Subtract characters from today", correct_count),
    Command(
        "add-revision-time",
        f"Add {REVISION_TIME.amount:,} chars (goal >= {REVISION_TIME.min_goal:,})",
        add_revision_time,
    ),
    Command(
        "add-citation",
        f"Add {CITATION.amount:,} chars (goal >= {CITATION.min_goal:,})",
        add_citation,
    ),
]


def get_command(name: str) -> Command | None:
    for command in COMMANDS:
        if command.name == name:
            return command
    return None
