import logging
import os
from pathlib import Path

import yaml

TRACKER_DIR = Path(os.environ.get("TRACKER_HOME", Path.home() / ".tracker")).expanduser()
DB_PATH = TRACKER_DIR / "tracker.db"
CONFIG_PATH = TRACKER_DIR / "config.yaml"
BACKUP_DIR = TRACKER_DIR / "backups"

DEFAULT_LOG_LEVEL = "WARNING"


class Config:
    """Single-instance config manager. Load once, cache in memory."""

    _instance: "Config | None" = None
    _data: dict[str, object]

    def __new__(cls) -> "Config":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._data = {}
            cls._instance._load()
        return cls._instance

    def _load(self) -> None:
        """Load config from disk."""
        if not CONFIG_PATH.exists():
            self._data = {}
            return
        try:
            with CONFIG_PATH.open() as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError):
            self._data = {}
            return
        self._data = loaded if isinstance(loaded, dict) else {}

    def reload(self) -> None:
        self._load()

    def get(self, key: str, default: object = None) -> object:
        """Get config value."""
        return self._data.get(key, default)


_config = Config()


def get_log_level() -> int:
    """Resolve the configured log level name to a logging constant."""
    name = str(_config.get("log_level", DEFAULT_LOG_LEVEL)).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def seed_enabled() -> bool:
    """Whether missing collections are filled with the starter dataset."""
    val = _config.get("seed", True)
    return val if isinstance(val, bool) else True


def reload() -> None:
    _config.reload()
