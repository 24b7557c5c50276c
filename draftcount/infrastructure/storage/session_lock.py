"""Pid file marking a running tracking session.

``draftcount watch`` and ``draftcount write`` keep the progress state in
memory and save it on their own schedule. While one of them runs, a
one-shot command writing the same file would be overwritten at the next
save, so the hosts hold this lock and the one-shot commands check it.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from draftcount.domain.shared.result import Err, Ok, Result
from draftcount.infrastructure.storage.repositories import state_dir

logger = logging.getLogger(__name__)

SESSION_LOCK_NAME = "session.pid"


def _process_alive(pid: int) -> bool:
    try:
        os.kill(pid, 0)
    except (ProcessLookupError, OverflowError):
        return False
    except PermissionError:
        # Exists, owned by another user.
        return True
    return True


class SessionLock:
    """The ``.draftcount/session.pid`` file of one project root.

    Example:
        lock = SessionLock(root)
        result = lock.acquire()
        if isinstance(result, Err):
            print(result.error)
        try:
            ...
        finally:
            lock.release()
    """

    def __init__(self, project_root: Path) -> None:
        self.path = state_dir(project_root) / SESSION_LOCK_NAME

    def owner(self) -> Optional[int]:
        """Pid of the live session holding the lock, or None.

        Stale and corrupt pid files are removed.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning(f"Could not read session lock {self.path}: {e}")
            return None

        try:
            pid = int(raw.strip())
        except ValueError:
            pid = 0

        if pid <= 0 or not _process_alive(pid):
            logger.info(f"Removing stale session lock {self.path}")
            self._remove()
            return None
        return pid

    def acquire(self) -> Result[int, str]:
        """Write the current pid, unless another live session holds the lock."""
        pid = self.owner()
        if pid is not None and pid != os.getpid():
            return Err(f"A draftcount session is already running for this project (pid {pid})")

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(os.getpid()), encoding="utf-8")
        except OSError as e:
            return Err(f"Could not write {self.path}: {e}")

        logger.debug(f"Acquired session lock {self.path}")
        return Ok(os.getpid())

    def release(self) -> None:
        """Remove the pid file if this process holds it."""
        if self.owner() == os.getpid():
            self._remove()
            logger.debug(f"Released session lock {self.path}")

    def _remove(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove session lock {self.path}: {e}")
