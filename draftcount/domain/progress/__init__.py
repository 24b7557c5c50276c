"""Progress domain package.

The project state aggregate, its daily rollover rule and related events.
"""

from draftcount.domain.progress.events import NewDayStarted
from draftcount.domain.progress.models import (
    NO_CHALLENGE_NAME,
    HistoryEntry,
    PendingEntry,
    ProjectState,
)
from draftcount.domain.progress.rollover import roll_over

__all__ = [
    "NO_CHALLENGE_NAME",
    "HistoryEntry",
    "NewDayStarted",
    "PendingEntry",
    "ProjectState",
    "roll_over",
]
