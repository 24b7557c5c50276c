"""Infrastructure layer for Draftcount.

Adapters for the outside world: JSON persistence, configuration files, the
system clock, and the polling scheduler/watcher used by ``draftcount watch``.

Exports:
    Storage:
        - JsonStorage: Low-level JSON file I/O
        - ProgressRepository: Project state persistence

    Runtime:
        - SystemClock: Wall clock
        - PollingScheduler: Interval callbacks driven by a loop
        - DirectoryWatcher: Tracked files as buffer events
"""

from draftcount.infrastructure.clock import SystemClock
from draftcount.infrastructure.config import TrackerConfig, load_config
from draftcount.infrastructure.scheduler import PollingScheduler
from draftcount.infrastructure.storage import JsonStorage, ProgressRepository
from draftcount.infrastructure.watcher import BufferEvent, DirectoryWatcher

__all__ = [
    # Storage
    "JsonStorage",
    "ProgressRepository",
    # Config
    "TrackerConfig",
    "load_config",
    # Runtime
    "SystemClock",
    "PollingScheduler",
    "DirectoryWatcher",
    "BufferEvent",
]
