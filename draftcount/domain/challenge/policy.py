"""Challenge policy.

Goal validation, the single mutator that increases the daily count, bonus
gating and manual corrections. All functions are pure - they update the
state passed in and return events or Results; persisting is the caller's job.
"""

import datetime as dt

from draftcount.domain.challenge.events import BonusGranted, ChallengeStarted, GoalReached
from draftcount.domain.challenge.presets import Bonus
from draftcount.domain.progress.models import ProjectState
from draftcount.domain.shared import DomainEvent, Err, Ok, Result


def _parse_positive_int(text: str, what: str) -> Result[int, str]:
    cleaned = text.strip().replace(",", "").replace("_", "")
    if not cleaned:
        return Err(f"{what} cannot be empty")

    try:
        value = int(cleaned)
    except ValueError:
        return Err(f"{what} must be a whole number, got '{text.strip()}'")

    if value <= 0:
        return Err(f"{what} must be positive")

    return Ok(value)


def parse_custom_goal(text: str) -> Result[int, str]:
    """Validate a user-typed daily goal.

    Args:
        text: Raw input, e.g. "1500" or "1,500".

    Returns:
        Ok(goal) for a positive integer, Err(str) with a message otherwise.
    """
    return _parse_positive_int(text, "Goal")


def parse_correction(text: str) -> Result[int, str]:
    """Validate a user-typed correction amount (a positive integer)."""
    return _parse_positive_int(text, "Correction")


def start_challenge(state: ProjectState, name: str, goal: int) -> ChallengeStarted:
    """Set the active goal and its display name.

    The current daily count is kept, so switching goals mid-day does not
    lose what was already written.
    """
    state.goal = goal
    state.challenge_name = name
    return ChallengeStarted(name=name, goal=goal)


def apply_daily_increment(state: ProjectState, amount: int) -> GoalReached | None:
    """Add committed characters to today's count.

    Every increase of ``daily_count`` goes through here (ledger commits and
    bonuses alike) so goal crossings are never missed.

    Args:
        state: Project state to update.
        amount: Characters to add; non-positive amounts are ignored.

    Returns:
        GoalReached if this call moved the count from below the goal to
        at-or-above it, otherwise None.
    """
    if amount <= 0:
        return None

    before = state.daily_count
    state.daily_count = before + amount

    if state.goal > 0 and before < state.goal <= state.daily_count:
        return GoalReached(
            challenge_name=state.challenge_name,
            goal=state.goal,
            daily_count=state.daily_count,
        )
    return None


def grant_bonus(state: ProjectState, bonus: Bonus) -> Result[list[DomainEvent], str]:
    """Credit a bonus if the active goal is high enough.

    Returns:
        Ok(events) with BonusGranted (and GoalReached if the bonus crossed
        the goal), or Err(str) when the goal is below the bonus threshold.
    """
    if state.goal < bonus.min_goal:
        return Err(
            f"Adding {bonus.name} requires a daily goal of at least "
            f"{bonus.min_goal:,} characters"
        )

    events: list[DomainEvent] = [BonusGranted(bonus_name=bonus.name, amount=bonus.amount)]
    reached = apply_daily_increment(state, bonus.amount)
    if reached:
        events.append(reached)
    return Ok(events)


def correct_count(state: ProjectState, amount: int) -> int:
    """Subtract a manual correction, clamped at zero.

    Returns:
        The number of characters actually removed.
    """
    removed = min(amount, state.daily_count)
    state.daily_count -= removed
    return removed


def reset_today(state: ProjectState) -> None:
    """Zero today's committed count; goal, history and pending stay."""
    state.daily_count = 0


def reset_all(today: dt.date) -> ProjectState:
    """Return a brand-new default state, discarding history as well."""
    return ProjectState.fresh(today)


def set_paused(state: ProjectState, paused: bool) -> bool:
    """Pause or resume tracking.

    Returns:
        True if the flag changed.
    """
    if state.tracking_paused == paused:
        return False
    state.tracking_paused = paused
    return True
