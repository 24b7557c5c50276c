"""Progress domain events."""

import datetime as dt

from draftcount.domain.shared.events import DomainEvent


class NewDayStarted(DomainEvent):
    """Event raised when the daily counter rolls over to a new date.

    ``archived_count`` is what moved into history (0 when the previous day
    had nothing committed and no history entry was written).
    """

    previous_date: dt.date
    today: dt.date
    archived_count: int = 0
