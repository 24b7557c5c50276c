"""Base domain event infrastructure.

Domain events are immutable records of something that happened to a
project's progress (a new day started, a goal was reached). Domain functions
return them instead of notifying anyone directly; the application layer
decides how to present them.

All events are pure data structures - no I/O, no side effects.
"""

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, Field


class DomainEvent(BaseModel):
    """Base class for all domain events.

    Each event has a unique ID and the UTC time it was raised.
    """

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config = {"frozen": True}
