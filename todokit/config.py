"""Configuration for todokit.

Settings live in ~/.todokit/config.json. Environment variables override the
file:

    TODOKIT_DATA_FILE   path of the JSON todo store
    TODOKIT_STORAGE     "json" or "memory"
    TODOKIT_LOG_LEVEL   logging level name (e.g. DEBUG)
"""

import json
import logging
import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

ENV_PREFIX = "TODOKIT"


class StorageKind(str, Enum):
    JSON = "json"
    MEMORY = "memory"


def get_config_dir() -> Path:
    """Get the todokit config directory, creating it if needed."""
    config_dir = Path(os.environ.get(f"{ENV_PREFIX}_HOME", Path.home() / ".todokit"))
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def _default_data_file() -> Path:
    return get_config_dir() / "todos.json"


class TodokitConfig(BaseModel):
    """User-level settings."""

    data_file: Path = Field(default_factory=_default_data_file)
    storage: StorageKind = StorageKind.JSON
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


def _env_overrides() -> dict[str, str]:
    overrides = {}
    for field_name in ("data_file", "storage", "log_level"):
        value = os.environ.get(f"{ENV_PREFIX}_{field_name.upper()}")
        if value:
            overrides[field_name] = value
    return overrides


def get_config() -> TodokitConfig:
    """Load configuration: file values, then environment overrides.

    An unreadable or invalid config file falls back to defaults.
    """
    data: dict = {}
    config_file = get_config_dir() / "config.json"
    if config_file.exists():
        try:
            data = json.loads(config_file.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable config {config_file}: {e}")

    try:
        return TodokitConfig(**{**data, **_env_overrides()})
    except (TypeError, ValidationError) as e:
        logger.warning(f"Ignoring invalid config: {e}")
        return TodokitConfig()


def save_config(config: TodokitConfig) -> None:
    """Save configuration to ~/.todokit/config.json."""
    config_file = get_config_dir() / "config.json"
    config_file.write_text(
        json.dumps(config.model_dump(mode="json"), indent=2),
        encoding="utf-8",
    )
