"""Daily rollover rule.

Moves the previous day's committed count into history once the calendar
date changes. Pure function over the state - the caller persists.
"""

import datetime as dt

from draftcount.domain.progress.events import NewDayStarted
from draftcount.domain.progress.models import HistoryEntry, ProjectState


def roll_over(state: ProjectState, today: dt.date) -> NewDayStarted | None:
    """Archive the last tracked day if ``today`` is a different date.

    Days with nothing committed are not written to history. Calling this
    again on the same day is a no-op.

    Args:
        state: Project state to update in place.
        today: Current local calendar date.

    Returns:
        NewDayStarted when a rollover happened, otherwise None.
    """
    if state.last_update_date == today:
        return None

    previous = state.last_update_date
    archived = state.daily_count
    if archived > 0:
        state.history.append(HistoryEntry(date=previous, count=archived))

    state.daily_count = 0
    state.last_update_date = today

    return NewDayStarted(previous_date=previous, today=today, archived_count=archived)
