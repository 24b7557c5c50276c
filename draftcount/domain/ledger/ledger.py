"""Pending-delta ledger.

Turns raw buffer character-count changes into tentative pending entries,
retracts recent entries when text is deleted, and commits entries that
survived the undo grace period into the daily count.

An entry is "young" while ``now - timestamp < grace`` and is committed once
``now - timestamp >= grace``, so every entry is always on exactly one side.
"""

import math

from draftcount.domain.challenge.policy import apply_daily_increment
from draftcount.domain.ledger.models import DeltaOutcome, LedgerSettings
from draftcount.domain.progress.models import PendingEntry, ProjectState
from draftcount.domain.shared import DomainEvent


class PendingLedger:
    """Per-session ledger holding the last observed size of each buffer.

    Baselines live only in memory: they are reset whenever a buffer is
    (re)entered and are never persisted.

    Example:
        ledger = PendingLedger(LedgerSettings())
        ledger.enter_buffer("notes.md", 120)
        ledger.on_text_changed(state, "notes.md", 125, now=1_700_000_000)
        # state.pending_chars now holds one entry of 5 characters
    """

    def __init__(self, settings: LedgerSettings | None = None) -> None:
        self.settings = settings or LedgerSettings()
        self._baselines: dict[str, int] = {}

    def enter_buffer(self, buffer_id: str, char_count: int) -> None:
        """Reset the baseline of a buffer that just became active."""
        self._baselines[buffer_id] = max(char_count, 0)

    def forget_buffer(self, buffer_id: str) -> None:
        self._baselines.pop(buffer_id, None)

    def baseline(self, buffer_id: str) -> int | None:
        return self._baselines.get(buffer_id)

    def on_text_changed(
        self,
        state: ProjectState,
        buffer_id: str,
        new_count: int,
        now: float,
    ) -> DeltaOutcome:
        """Interpret one observed change of a buffer's character count.

        The baseline is updated on every event, even while paused, so that
        resuming does not read everything typed during the pause as one delta.

        Args:
            state: Project state whose pending list is updated.
            buffer_id: Identity of the changed buffer.
            new_count: Buffer's total character count after the change.
            now: Current time in epoch seconds.

        Returns:
            DeltaOutcome describing what was added, retracted or dropped.
        """
        new_count = max(new_count, 0)
        previous = self._baselines.get(buffer_id)
        self._baselines[buffer_id] = new_count

        if previous is None:
            # Never entered: this event only establishes the baseline.
            return DeltaOutcome()

        delta = new_count - previous
        if state.tracking_paused:
            return DeltaOutcome(delta=delta, paused=True)

        if delta > 0:
            return self._record_addition(state, delta, now)
        if delta < 0:
            return self._retract(state, -delta, now)
        return DeltaOutcome()

    def _record_addition(self, state: ProjectState, delta: int, now: float) -> DeltaOutcome:
        tracked = min(delta, self.settings.max_tracked_chars_per_event)
        state.pending_chars.append(PendingEntry(count=tracked, timestamp=math.ceil(now)))
        return DeltaOutcome(delta=delta, added=tracked, dropped=delta - tracked)

    def _retract(self, state: ProjectState, amount: int, now: float) -> DeltaOutcome:
        grace = self.settings.undo_grace_period_seconds
        to_remove = amount

        # Newest first; stop at the first entry that is already past its grace period.
        while to_remove > 0 and state.pending_chars:
            entry = state.pending_chars[-1]
            if now - entry.timestamp >= grace:
                break

            if to_remove >= entry.count:
                to_remove -= entry.count
                state.pending_chars.pop()
            else:
                entry.count -= to_remove
                to_remove = 0

        return DeltaOutcome(
            delta=-amount,
            retracted=amount - to_remove,
            unreconciled=to_remove,
        )

    def commit_aged(self, state: ProjectState, now: float) -> tuple[int, list[DomainEvent]]:
        """Commit every pending entry that outlived the grace period.

        Args:
            state: Project state to update.
            now: Current time in epoch seconds.

        Returns:
            (committed character count, events raised by the increment).
            (0, []) means nothing changed and there is nothing to persist.
        """
        grace = self.settings.undo_grace_period_seconds
        aged = [e for e in state.pending_chars if now - e.timestamp >= grace]
        committed = sum(e.count for e in aged)
        if committed == 0:
            return 0, []

        state.pending_chars = [e for e in state.pending_chars if now - e.timestamp < grace]

        events: list[DomainEvent] = []
        reached = apply_daily_increment(state, committed)
        if reached:
            events.append(reached)
        return committed, events
