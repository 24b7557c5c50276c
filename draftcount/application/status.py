"""Read-only projections of a project's progress.

The status line shown by hosts and the lines rendered by show-stats.
"""

from draftcount.domain.progress.models import ProjectState

STATUS_ICON = "✍"
NO_CHALLENGE_STATUS = f"{STATUS_ICON} No active challenge"
PAUSED_SUFFIX = " (Paused)"


def display_count(state: ProjectState) -> int:
    """Committed plus pending characters - what the writer sees as today's total."""
    return state.daily_count + state.pending_total


def percentage(state: ProjectState) -> int | None:
    """Progress towards the goal, floored; None when no challenge is active."""
    if state.goal <= 0:
        return None
    return display_count(state) * 100 // state.goal


def format_status(state: ProjectState) -> str:
    """One-line status, e.g. ``"✍ 450/500 (90%)"``."""
    pct = percentage(state)
    if pct is None:
        return NO_CHALLENGE_STATUS

    status = f"{STATUS_ICON} {display_count(state)}/{state.goal} ({pct}%)"
    if state.tracking_paused:
        status += PAUSED_SUFFIX
    return status


def stats_lines(project_name: str, state: ProjectState) -> list[str]:
    """Lines for the show-stats surface: summary first, then full history."""
    if state.has_challenge:
        challenge = f"{state.challenge_name} ({state.goal:,} chars/day)"
    else:
        challenge = state.challenge_name

    lines = [
        f"Project: {project_name}",
        f"Challenge: {challenge}",
        f"Today: {state.daily_count:,} committed, {state.pending_total:,} pending",
        f"Lifetime total: {state.lifetime_total:,} characters",
        f"Days tracked: {len(state.history) + 1}",
    ]
    if state.tracking_paused:
        lines.append("Tracking is paused")

    lines.append("")
    if not state.history:
        lines.append("History: no completed days yet")
    else:
        lines.append("History:")
        for entry in state.history:
            lines.append(f"  {entry.date.isoformat()}  {entry.count:>8,}")
    return lines
