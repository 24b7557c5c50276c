"""Wall clock used outside of tests."""

import datetime as dt
import time


class SystemClock:
    """Clock backed by the system time and the local calendar date."""

    def now(self) -> float:
        return time.time()

    def today(self) -> dt.date:
        return dt.date.today()
