"""Progress domain models.

The persisted shape of a project's writing progress. These are pure data
structures with no I/O; field names serialize as camelCase so the JSON file
keeps the documented contract (``dailyCount``, ``pendingChars``...).
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NO_CHALLENGE_NAME = "No challenge"


class PendingEntry(BaseModel):
    """Characters tentatively added, still revocable by an undo."""

    count: int = Field(gt=0)
    timestamp: int = Field(description="Epoch seconds when the addition was seen")


class HistoryEntry(BaseModel):
    """Committed characters of one completed day."""

    date: dt.date
    count: int = Field(ge=0)


class ProjectState(BaseModel):
    """Daily and historical writing progress of one project.

    ``history`` only ever holds past days; today's committed characters live
    in ``daily_count`` until the next rollover moves them into history.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    goal: int = Field(default=0, ge=0, description="Characters per day, 0 = no challenge")
    challenge_name: str = NO_CHALLENGE_NAME
    daily_count: int = Field(default=0, ge=0)
    last_update_date: dt.date = Field(default_factory=dt.date.today)
    history: list[HistoryEntry] = Field(default_factory=list)
    pending_chars: list[PendingEntry] = Field(default_factory=list)
    tracking_paused: bool = False

    @classmethod
    def fresh(cls, today: dt.date) -> "ProjectState":
        """Create the default state of a project that has never been tracked."""
        return cls(last_update_date=today)

    @property
    def has_challenge(self) -> bool:
        return self.goal > 0

    @property
    def pending_total(self) -> int:
        """Sum of all pending (not yet committed) characters."""
        return sum(entry.count for entry in self.pending_chars)

    @property
    def lifetime_total(self) -> int:
        """Committed characters over all days, today included."""
        return sum(entry.count for entry in self.history) + self.daily_count

    def to_json_dict(self) -> dict:
        """Serialize with camelCase keys and ISO dates for the state file."""
        return self.model_dump(mode="json", by_alias=True)
