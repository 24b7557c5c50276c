"""Tracker application service.

TrackerSession is the explicit per-project handle every host talks to. It
owns the in-memory ProjectState, the pending-delta ledger and the ports
(clock, notifier), and writes the state through to disk after every
mutation.

The in-memory state is a cache of the state file that is re-read only when
a buffer is activated (``initialize_for_buffer``) or a one-shot command
opens the project (``open``). Edits made to the file by anything else in
between are not observed.
"""

import logging

from draftcount.application.ports import Clock, Notifier, Severity
from draftcount.application.status import format_status, stats_lines
from draftcount.domain.challenge import (
    Bonus,
    BonusGranted,
    ChallengeStarted,
    GoalReached,
    correct_count,
    grant_bonus,
    reset_all,
    reset_today,
    set_paused,
    start_challenge,
)
from draftcount.domain.ledger import DeltaOutcome, PendingLedger
from draftcount.domain.progress import NewDayStarted, ProjectState, roll_over
from draftcount.domain.shared import DomainEvent, Err
from draftcount.infrastructure.config import TrackerConfig
from draftcount.infrastructure.storage.repositories import ProgressRepository

logger = logging.getLogger(__name__)


def describe_event(event: DomainEvent) -> tuple[str, Severity] | None:
    """User-facing message for a domain event, or None for silent events."""
    if isinstance(event, GoalReached):
        return (
            f"Goal reached! {event.daily_count:,}/{event.goal:,} characters "
            f"({event.challenge_name})",
            "information",
        )
    if isinstance(event, NewDayStarted):
        if event.archived_count > 0:
            return (
                f"New day! {event.archived_count:,} characters from "
                f"{event.previous_date.isoformat()} saved to history",
                "information",
            )
        return ("New day! Daily count reset", "information")
    if isinstance(event, ChallengeStarted):
        return (f"Challenge started: {event.name} ({event.goal:,} chars/day)", "information")
    if isinstance(event, BonusGranted):
        return (f"Added {event.amount:,} characters for {event.bonus_name}", "information")
    return None


class TrackerSession:
    """Progress tracking for one project root.

    Example:
        session = TrackerSession(ProgressRepository(root), config, SystemClock(), notifier)
        session.initialize_for_buffer("chapter1.md", 1200)
        session.on_text_changed("chapter1.md", 1205)
        session.sweep()  # commits additions older than the grace period
        print(session.status_line())
    """

    def __init__(
        self,
        repository: ProgressRepository,
        config: TrackerConfig,
        clock: Clock,
        notifier: Notifier,
        ledger: PendingLedger | None = None,
    ) -> None:
        self.repository = repository
        self.config = config
        self.clock = clock
        self.notifier = notifier
        self.ledger = ledger or PendingLedger(config.ledger_settings())
        self.last_save_error: str | None = None
        self._state: ProjectState | None = None

    # =========================================================================
    # State lifecycle
    # =========================================================================

    @property
    def state(self) -> ProjectState:
        """The live state, opening the project on first access."""
        if self._state is None:
            return self.open()
        return self._state

    @property
    def project_name(self) -> str:
        return self.repository.project_name

    def open(self) -> ProjectState:
        """Re-read the state file, apply the daily rollover and persist.

        Returns:
            The freshly loaded state (also kept as the live state).
        """
        self._state = self.repository.load(self.clock.today())
        event = roll_over(self._state, self.clock.today())
        self.save()
        if event:
            logger.info(f"Rolled over {event.previous_date} -> {event.today}")
            self._publish([event])
        return self._state

    def initialize_for_buffer(self, buffer_id: str, char_count: int) -> ProjectState:
        """Entry point for a tracked document becoming active.

        Reloads the state from disk and resets the buffer's baseline to its
        current size, so text that existed before activation is never counted.
        """
        state = self.open()
        self.ledger.enter_buffer(buffer_id, char_count)
        logger.debug(f"Entered buffer {buffer_id} with {char_count} chars")
        return state

    def close_buffer(self, buffer_id: str) -> None:
        self.ledger.forget_buffer(buffer_id)

    def is_tracked(self, path: str) -> bool:
        return self.config.is_tracked(path)

    def save(self) -> bool:
        """Persist the live state.

        A failed write is reported to the user; the in-memory state stays the
        source of truth until the next successful save.
        """
        if self._state is None:
            return True

        result = self.repository.save(self._state)
        if isinstance(result, Err):
            self.last_save_error = result.error
            logger.error(f"Saving progress failed: {result.error}")
            self.notifier.notify(f"Could not save progress: {result.error}", "error")
            return False

        self.last_save_error = None
        return True

    def _publish(self, events: list[DomainEvent]) -> None:
        for event in events:
            message = describe_event(event)
            if message:
                text, severity = message
                self.notifier.notify(text, severity)

    # =========================================================================
    # Ledger
    # =========================================================================

    def on_text_changed(self, buffer_id: str, char_count: int) -> DeltaOutcome:
        """Feed one observed buffer size into the ledger and persist."""
        state = self.state
        outcome = self.ledger.on_text_changed(state, buffer_id, char_count, self.clock.now())

        if outcome.dropped:
            logger.debug(f"{buffer_id}: counted {outcome.added} of {outcome.delta} inserted chars")
        if outcome.unreconciled:
            logger.debug(f"{buffer_id}: {outcome.unreconciled} deleted chars not retractable")

        if outcome.changed_pending:
            self.save()
        return outcome

    def sweep(self) -> int:
        """Commit pending entries that outlived the grace period.

        Also applies the rollover rule first, so a session that runs past
        midnight archives the previous day before committing.

        Returns:
            Characters committed by this sweep.
        """
        if self._state is None:
            return 0

        state = self._state
        events: list[DomainEvent] = []
        rolled = roll_over(state, self.clock.today())
        if rolled:
            events.append(rolled)

        committed, commit_events = self.ledger.commit_aged(state, self.clock.now())
        events.extend(commit_events)

        if rolled or committed:
            if committed:
                logger.debug(f"Committed {committed} chars, daily count {state.daily_count}")
            self.save()
            self._publish(events)
        return committed

    # =========================================================================
    # Commands
    # =========================================================================

    def start_challenge(self, name: str, goal: int) -> None:
        event = start_challenge(self.state, name, goal)
        self.save()
        self._publish([event])

    def set_paused(self, paused: bool) -> None:
        changed = set_paused(self.state, paused)
        if changed:
            self.save()
        if paused:
            self.notifier.notify("Tracking paused" if changed else "Tracking is already paused")
        else:
            self.notifier.notify("Tracking resumed" if changed else "Tracking is not paused")

    def correct_count(self, amount: int) -> int:
        removed = correct_count(self.state, amount)
        self.save()
        self.notifier.notify(
            f"Removed {removed:,} characters, today is now {self.state.daily_count:,}"
        )
        return removed

    def grant_bonus(self, bonus: Bonus) -> bool:
        result = grant_bonus(self.state, bonus)
        if isinstance(result, Err):
            self.notifier.notify(result.error, "warning")
            return False

        self.save()
        self._publish(result.value)
        return True

    def reset_today(self) -> None:
        reset_today(self.state)
        self.save()
        self.notifier.notify("Today's count reset to 0")

    def reset_all(self) -> None:
        self._state = reset_all(self.clock.today())
        self.save()
        self.notifier.notify("All progress reset")

    # =========================================================================
    # Projections
    # =========================================================================

    def status_line(self) -> str:
        return format_status(self.state)

    def stats(self) -> list[str]:
        return stats_lines(self.project_name, self.state)
