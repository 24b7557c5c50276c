"""Pending-delta ledger models."""

from pydantic import BaseModel, Field


class LedgerSettings(BaseModel):
    """Tuning for how buffer deltas become pending and committed characters.

    Attributes:
        max_tracked_chars_per_event: Cap on what one addition may contribute;
            larger insertions (pastes, generated text) are only partly counted.
        undo_grace_period_seconds: How long an addition stays revocable.
    """

    max_tracked_chars_per_event: int = Field(default=50, gt=0)
    undo_grace_period_seconds: int = Field(default=30, gt=0)


class DeltaOutcome(BaseModel):
    """What one text-change event did to the pending list.

    ``dropped`` counts characters beyond the per-event cap; ``unreconciled``
    counts deleted characters that had no young pending entry to retract.
    """

    delta: int = 0
    added: int = 0
    dropped: int = 0
    retracted: int = 0
    unreconciled: int = 0
    paused: bool = False

    @property
    def changed_pending(self) -> bool:
        return self.added > 0 or self.retracted > 0
