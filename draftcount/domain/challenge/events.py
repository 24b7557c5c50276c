"""Challenge domain events."""

from draftcount.domain.shared.events import DomainEvent


class ChallengeStarted(DomainEvent):
    """Event raised when a daily goal is set."""

    name: str
    goal: int


class GoalReached(DomainEvent):
    """Event raised when the daily count crosses the goal.

    Raised once per crossing: only an increment that moves the count from
    below the goal to at-or-above it produces this event.
    """

    challenge_name: str
    goal: int
    daily_count: int


class BonusGranted(DomainEvent):
    """Event raised when a bonus command credits characters."""

    bonus_name: str
    amount: int
