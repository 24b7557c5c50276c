"""Polling watcher that turns tracked files into buffer events.

Used by ``draftcount watch`` to track writing done in any external editor:
each tracked file under the project root is a buffer, and its character
count on disk is compared between polls.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from draftcount.infrastructure.config import TrackerConfig

logger = logging.getLogger(__name__)

BufferEventKind = Literal["entered", "changed", "closed"]


@dataclass(frozen=True)
class BufferEvent:
    """A tracked file appeared, changed size, or disappeared."""

    kind: BufferEventKind
    buffer_id: str
    char_count: int = 0


def count_chars(path: Path) -> int | None:
    """Total character count of a text file, None if it cannot be read."""
    try:
        return len(path.read_text(encoding="utf-8", errors="replace"))
    except OSError as e:
        logger.debug(f"Skipping unreadable file {path}: {e}")
        return None


class DirectoryWatcher:
    """Polls the tracked documents of a project root."""

    def __init__(self, root: Path, config: TrackerConfig) -> None:
        self.root = root
        self.config = config
        self._counts: dict[str, int] = {}

    def _tracked_files(self) -> list[Path]:
        files = []
        for path in self.root.rglob("*"):
            rel = path.relative_to(self.root)
            if any(part.startswith(".") for part in rel.parts):
                continue
            if path.is_file() and self.config.is_tracked(path):
                files.append(path)
        return sorted(files)

    def poll(self) -> list[BufferEvent]:
        """Compare the tracked files with the previous poll.

        Returns:
            "entered" for files seen for the first time, "changed" for files
            whose character count differs, "closed" for files that vanished.
        """
        events: list[BufferEvent] = []
        seen: set[str] = set()

        for path in self._tracked_files():
            buffer_id = str(path.relative_to(self.root))
            count = count_chars(path)
            if count is None:
                continue
            seen.add(buffer_id)

            previous = self._counts.get(buffer_id)
            if previous is None:
                events.append(BufferEvent("entered", buffer_id, count))
            elif previous != count:
                events.append(BufferEvent("changed", buffer_id, count))
            self._counts[buffer_id] = count

        for buffer_id in sorted(set(self._counts) - seen):
            del self._counts[buffer_id]
            events.append(BufferEvent("closed", buffer_id))

        return events
