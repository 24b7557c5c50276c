"""Storage infrastructure for Draftcount.

Persistence for the progress state, using Result types for explicit
error handling, and the pid lock held by long-running sessions.
"""

from draftcount.infrastructure.storage.json_storage import JsonStorage
from draftcount.infrastructure.storage.repositories import (
    STATE_DIR_NAME,
    STATE_FILE_NAME,
    ProgressRepository,
    state_dir,
    state_file,
)
from draftcount.infrastructure.storage.session_lock import SESSION_LOCK_NAME, SessionLock

__all__ = [
    "JsonStorage",
    "ProgressRepository",
    "STATE_DIR_NAME",
    "STATE_FILE_NAME",
    "SESSION_LOCK_NAME",
    "SessionLock",
    "state_dir",
    "state_file",
]
