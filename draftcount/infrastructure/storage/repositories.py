"""Repository for a project's progress state.

One state file per project, at a fixed path under the project root.
"""

import datetime as dt
import logging
from pathlib import Path

from pydantic import ValidationError

from draftcount.domain.progress.models import ProjectState
from draftcount.domain.shared.result import Err, Result
from draftcount.infrastructure.storage.json_storage import JsonStorage

logger = logging.getLogger(__name__)

STATE_DIR_NAME = ".draftcount"
STATE_FILE_NAME = "progress.json"


def state_dir(project_root: Path) -> Path:
    """Directory holding a project's Draftcount files."""
    return project_root / STATE_DIR_NAME


def state_file(project_root: Path) -> Path:
    """Path of a project's persisted progress."""
    return state_dir(project_root) / STATE_FILE_NAME


class ProgressRepository:
    """Loads and saves the ProjectState of one project root.

    Loading never fails: a missing file is a fresh project, and a file that
    cannot be read or does not match the schema is replaced by the default
    state (logged as a warning). Saving returns a Result so the caller can
    surface the failure.
    """

    def __init__(self, project_root: Path, storage: JsonStorage | None = None) -> None:
        """Initialize the repository.

        Args:
            project_root: Root directory of the tracked project.
            storage: JsonStorage instance to use. Creates new one if not provided.
        """
        self.project_root = project_root
        self._storage = storage or JsonStorage()

    @property
    def path(self) -> Path:
        return state_file(self.project_root)

    @property
    def project_name(self) -> str:
        return self.project_root.resolve().name or str(self.project_root)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self, today: dt.date) -> ProjectState:
        """Load the project's state, or the default state for ``today``.

        Args:
            today: Date used for the default state's ``last_update_date``.

        Returns:
            The decoded ProjectState, or ProjectState.fresh(today).
        """
        if not self.path.exists():
            logger.debug(f"No progress file at {self.path}, starting fresh")
            return ProjectState.fresh(today)

        result = self._storage.load_json(self.path)
        if isinstance(result, Err):
            logger.warning(f"Could not read progress, starting fresh: {result.error}")
            return ProjectState.fresh(today)

        try:
            return ProjectState.model_validate(result.value)
        except ValidationError as e:
            logger.warning(
                f"Progress file {self.path} does not match the expected format, "
                f"starting fresh: {e.error_count()} error(s)"
            )
            return ProjectState.fresh(today)

    def save(self, state: ProjectState) -> Result[None, str]:
        """Persist the full state, overwriting prior content.

        Returns:
            Ok(None) if successful, Err(str) with error message if failed.
        """
        return self._storage.save_json(self.path, state.to_json_dict())
