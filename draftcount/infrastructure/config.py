"""Configuration for Draftcount.

Settings are layered, later sources win:

1. Built-in defaults
2. Global preferences in ~/.draftcount/config.json (or $DRAFTCOUNT_HOME)
3. Project overrides in <project>/.draftcount/config.json
"""

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from draftcount.domain.ledger.models import LedgerSettings
from draftcount.domain.shared.result import Err
from draftcount.infrastructure.storage.json_storage import JsonStorage
from draftcount.infrastructure.storage.repositories import state_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"
HOME_ENV_VAR = "DRAFTCOUNT_HOME"

DEFAULT_FILE_TYPES = [".md", ".markdown", ".txt", ".rst", ".tex", ".org", ".fountain"]


class TrackerConfig(BaseModel):
    """Recognized tracker options.

    Config files use the camelCase names (``trackedFileTypes``,
    ``undoGracePeriodSeconds``, ``maxTrackedCharsPerEvent``...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    tracked_file_types: set[str] = Field(default_factory=lambda: set(DEFAULT_FILE_TYPES))
    undo_grace_period_seconds: int = Field(default=30, gt=0)
    max_tracked_chars_per_event: int = Field(default=50, gt=0)
    sweep_interval_seconds: float = Field(default=5.0, gt=0)
    poll_interval_seconds: float = Field(default=1.0, gt=0)

    @field_validator("tracked_file_types", mode="before")
    @classmethod
    def _normalise_extensions(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = [value]
        if isinstance(value, (list, tuple, set)):
            return {
                ext if ext.startswith(".") else f".{ext}"
                for ext in (str(v).strip().lower() for v in value)
                if ext
            }
        return value

    def ledger_settings(self) -> LedgerSettings:
        return LedgerSettings(
            max_tracked_chars_per_event=self.max_tracked_chars_per_event,
            undo_grace_period_seconds=self.undo_grace_period_seconds,
        )

    def is_tracked(self, path: Path | str) -> bool:
        """Check whether a document's extension activates tracking."""
        return Path(path).suffix.lower() in self.tracked_file_types


def get_config_dir() -> Path:
    """Get the Draftcount global config directory."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".draftcount"


def _read_overrides(path: Path, storage: JsonStorage) -> dict[str, Any]:
    if not path.exists():
        return {}
    result = storage.load_json(path)
    if isinstance(result, Err):
        logger.warning(f"Ignoring config file: {result.error}")
        return {}
    return result.value


def load_config(project_root: Path | None = None) -> TrackerConfig:
    """Load the effective configuration.

    Args:
        project_root: Project whose .draftcount/config.json overrides the
            global settings. None loads global settings only.

    Returns:
        TrackerConfig; invalid files fall back to the previous layer.
    """
    storage = JsonStorage()
    data: dict[str, Any] = {}

    sources = [get_config_dir() / CONFIG_FILE_NAME]
    if project_root is not None:
        sources.append(state_dir(project_root) / CONFIG_FILE_NAME)

    for source in sources:
        overrides = _read_overrides(source, storage)
        if not overrides:
            continue
        try:
            layer = TrackerConfig.model_validate(overrides)
        except ValidationError as e:
            logger.warning(f"Ignoring invalid settings in {source}: {e.error_count()} error(s)")
            continue
        # Only the keys the file set, under one spelling
        data.update(layer.model_dump(exclude_unset=True, by_alias=True))
        logger.debug(f"Loaded settings from {source}")

    return TrackerConfig.model_validate(data)
