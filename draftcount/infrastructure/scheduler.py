"""Single-threaded interval scheduler for the polling watch loop.

Mirrors the shape of Textual's ``set_interval`` (returns a handle with
``stop()``) so the same sweeper can run under either host.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from draftcount.application.ports import Clock


class ScheduledJob:
    """Handle for a callback registered with PollingScheduler."""

    def __init__(self, interval: float, callback: Callable[[], None], next_run: float) -> None:
        self.interval = interval
        self.callback = callback
        self.next_run = next_run
        self.active = True

    def stop(self) -> None:
        self.active = False


class PollingScheduler:
    """Runs due callbacks whenever the owner calls ``run_pending``.

    Nothing runs in the background; the watch loop calls ``run_pending``
    once per iteration.
    """

    def __init__(self, clock: "Clock") -> None:
        self._clock = clock
        self._jobs: list[ScheduledJob] = []

    def set_interval(self, interval: float, callback: Callable[[], None]) -> ScheduledJob:
        job = ScheduledJob(interval, callback, self._clock.now() + interval)
        self._jobs.append(job)
        return job

    def run_pending(self) -> int:
        """Run every job whose time has come.

        A job that fell several intervals behind runs once, not once per
        missed interval.

        Returns:
            Number of callbacks run.
        """
        self._jobs = [job for job in self._jobs if job.active]
        now = self._clock.now()
        ran = 0
        for job in list(self._jobs):
            if job.active and now >= job.next_run:
                job.callback()
                job.next_run = now + job.interval
                ran += 1
        return ran

    @property
    def active_jobs(self) -> int:
        return sum(1 for job in self._jobs if job.active)
