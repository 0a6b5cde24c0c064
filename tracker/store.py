"""Key-value persistence for the tracker collections.

Each collection is stored whole, as one JSON blob per key, in the ``store``
table. Reads never fail: a missing, corrupt or unreadable value falls back to
the starter dataset. Writes that fail put the store into degraded mode and the
session carries on in memory.
"""

import json
import logging
import sqlite3
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from . import config, db
from .core.errors import ValidationError
from .core.models import THEMES, Habit, Reminder, Task
from .lib import converters
from .seed import seed_habits, seed_reminders, seed_tasks

__all__ = [
    "HABITS_KEY",
    "KEYS",
    "REMINDERS_KEY",
    "TASKS_KEY",
    "THEME_KEY",
    "Store",
]

logger = logging.getLogger(__name__)

HABITS_KEY = "habits"
TASKS_KEY = "tasks"
REMINDERS_KEY = "reminders"
THEME_KEY = "theme"
KEYS = (HABITS_KEY, TASKS_KEY, REMINDERS_KEY, THEME_KEY)

DEFAULT_THEME = "light"

_MALFORMED = (ValueError, TypeError, KeyError)


@dataclass(frozen=True)
class _Codec:
    decode: Callable[[dict[str, Any]], Any]
    encode: Callable[[Any], dict[str, Any]]
    seed: Callable[[], list[Any]]


_CODECS: dict[str, _Codec] = {
    HABITS_KEY: _Codec(converters.dict_to_habit, converters.habit_to_dict, seed_habits),
    TASKS_KEY: _Codec(converters.dict_to_task, converters.task_to_dict, seed_tasks),
    REMINDERS_KEY: _Codec(converters.dict_to_reminder, converters.reminder_to_dict, seed_reminders),
}


class Store:
    def __init__(self, db_path: Path | None = None) -> None:
        self.db_path = db_path
        self.degraded = False

    def _codec(self, key: str) -> _Codec:
        try:
            return _CODECS[key]
        except KeyError:
            raise ValueError(f"unknown collection key: {key!r}") from None

    def read(self, key: str) -> object | None:
        """Decoded JSON under ``key``, or None when absent, corrupt or unreadable."""
        try:
            with db.get_db(self.db_path) as conn:
                row = conn.execute("SELECT value FROM store WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as e:
            logger.warning("could not read %s: %s", key, e)
            return None
        if row is None:
            return None
        try:
            return json.loads(row[0])
        except (ValueError, RecursionError):
            logger.warning("stored %s is not decodable JSON, ignoring it", key)
            return None

    def write(self, key: str, value: object) -> bool:
        """Overwrite ``key``. Returns False when the write was skipped or failed."""
        if self.degraded:
            return False
        payload = json.dumps(value, ensure_ascii=False)
        try:
            with db.get_db(self.db_path) as conn:
                conn.execute(
                    "INSERT INTO store (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP) "
                    "ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at",
                    (key, payload),
                )
        except (sqlite3.Error, OSError) as e:
            self.degraded = True
            logger.warning("storage unavailable (%s); keeping changes in memory only", e)
            return False
        return True

    def _fallback(self, codec: _Codec) -> list[Any]:
        return codec.seed() if config.seed_enabled() else []

    def load(self, key: str) -> list[Any]:
        codec = self._codec(key)
        raw = self.read(key)
        if raw is None:
            return self._fallback(codec)
        try:
            return [codec.decode(item) for item in converters.records_from(raw)]
        except _MALFORMED as e:
            logger.warning("stored %s is malformed (%s), using defaults", key, e)
            return self._fallback(codec)

    def save(self, key: str, records: Sequence[Habit | Task | Reminder]) -> bool:
        codec = self._codec(key)
        return self.write(key, [codec.encode(r) for r in records])

    def load_theme(self) -> str:
        raw = self.read(THEME_KEY)
        if raw in THEMES:
            return str(raw)
        if raw is not None:
            logger.warning("stored theme %r is not recognised, using %s", raw, DEFAULT_THEME)
        return DEFAULT_THEME

    def save_theme(self, theme: str) -> bool:
        if theme not in THEMES:
            raise ValidationError(f"unknown theme {theme!r}, expected one of: {', '.join(THEMES)}")
        return self.write(THEME_KEY, theme)
