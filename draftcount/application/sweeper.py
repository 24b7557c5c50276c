"""Periodic commit sweep.

The sweep is a task owned by the host's lifecycle: it is started once the
host is running and stopped on shutdown. Each tick is idempotent, so a
skipped or doubled tick never changes the result.
"""

import logging
from collections.abc import Callable
from typing import Protocol

from draftcount.application.tracker_service import TrackerSession

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def stop(self) -> None: ...


# e.g. textual's App.set_interval or PollingScheduler.set_interval
ScheduleFn = Callable[[float, Callable[[], None]], TimerHandle]


class CommitSweeper:
    """Runs TrackerSession.sweep at a fixed interval."""

    def __init__(
        self,
        session: TrackerSession,
        interval: float,
        after_tick: Callable[[int], None] | None = None,
    ) -> None:
        """Initialize the sweeper.

        Args:
            session: Session whose pending entries are committed.
            interval: Seconds between sweeps.
            after_tick: Called with the committed count after every sweep,
                e.g. to refresh a status display.
        """
        self.session = session
        self.interval = interval
        self.after_tick = after_tick
        self._handle: TimerHandle | None = None

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start(self, schedule: ScheduleFn) -> None:
        """Register the sweep with the host's scheduler (no-op if running)."""
        if self._handle is not None:
            return
        self._handle = schedule(self.interval, self.tick)
        logger.debug(f"Commit sweep every {self.interval}s")

    def stop(self) -> None:
        """Cancel the scheduled sweep."""
        if self._handle is None:
            return
        self._handle.stop()
        self._handle = None

    def tick(self) -> int:
        committed = self.session.sweep()
        if self.after_tick is not None:
            self.after_tick(committed)
        return committed
