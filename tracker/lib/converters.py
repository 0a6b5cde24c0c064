"""Translate between persisted JSON records and model objects.

Persisted keys keep the camelCase names the records were first stored with
(``completedDates``, ``dueDate``). Readers are strict: anything malformed raises
``ValueError`` or ``TypeError`` and the caller decides how to recover.
"""

import re
from datetime import date
from typing import Any, cast

from tracker.core.models import CATEGORIES, PRIORITIES, Habit, Reminder, Task

__all__ = [
    "dict_to_habit",
    "dict_to_reminder",
    "dict_to_task",
    "habit_to_dict",
    "parse_due_date",
    "parse_time",
    "records_from",
    "reminder_to_dict",
    "task_to_dict",
]

Record = dict[str, Any]

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def _require_id(raw: Record) -> int:
    val = raw["id"]
    if isinstance(val, bool) or not isinstance(val, int):
        raise TypeError(f"id must be an integer, got {val!r}")
    return val


def _require_str(raw: Record, key: str) -> str:
    val = raw[key]
    if not isinstance(val, str):
        raise TypeError(f"{key} must be a string, got {val!r}")
    return val


def _require_bool(raw: Record, key: str) -> bool:
    val = raw[key]
    if not isinstance(val, bool):
        raise TypeError(f"{key} must be a boolean, got {val!r}")
    return val


def parse_due_date(val: object) -> date | None:
    """Empty or missing due dates are None; anything else must be YYYY-MM-DD."""
    if val is None or val == "":
        return None
    if not isinstance(val, str):
        raise TypeError(f"due date must be a string, got {val!r}")
    return date.fromisoformat(val.strip())


def parse_time(val: object) -> str:
    if not isinstance(val, str):
        raise TypeError(f"time must be a string, got {val!r}")
    text = val.strip()
    if len(text) == 4 and text[1] == ":":
        text = "0" + text
    if not _TIME_RE.match(text):
        raise ValueError(f"time must be HH:MM, got {val!r}")
    return text


def _parse_completed_dates(val: object) -> frozenset[str]:
    # older payloads store {"YYYY-MM-DD": true}
    if isinstance(val, dict):
        keys = [k for k, done in val.items() if done is True]
    elif isinstance(val, list):
        keys = val
    else:
        raise TypeError(f"completedDates must be a list, got {val!r}")
    days = set()
    for key in keys:
        if not isinstance(key, str):
            raise TypeError(f"completed date must be a string, got {key!r}")
        days.add(date.fromisoformat(key).isoformat())
    return frozenset(days)


def dict_to_habit(raw: Record) -> Habit:
    category = _require_str(raw, "category")
    if category not in CATEGORIES:
        raise ValueError(f"unknown category {category!r}")
    streak = raw.get("streak", 0)
    if isinstance(streak, bool) or not isinstance(streak, int) or streak < 0:
        raise ValueError(f"streak must be a non-negative integer, got {streak!r}")
    return Habit(
        id=_require_id(raw),
        name=_require_str(raw, "name"),
        category=category,
        streak=streak,
        completed_dates=_parse_completed_dates(raw.get("completedDates", [])),
    )


def habit_to_dict(habit: Habit) -> Record:
    return {
        "id": habit.id,
        "name": habit.name,
        "category": habit.category,
        "streak": habit.streak,
        "completedDates": sorted(habit.completed_dates),
    }


def dict_to_task(raw: Record) -> Task:
    priority = _require_str(raw, "priority")
    if priority not in PRIORITIES:
        raise ValueError(f"unknown priority {priority!r}")
    return Task(
        id=_require_id(raw),
        name=_require_str(raw, "name"),
        completed=_require_bool(raw, "completed"),
        priority=priority,
        due_date=parse_due_date(raw.get("dueDate")),
    )


def task_to_dict(task: Task) -> Record:
    return {
        "id": task.id,
        "name": task.name,
        "completed": task.completed,
        "priority": task.priority,
        "dueDate": task.due_date.isoformat() if task.due_date else None,
    }


def dict_to_reminder(raw: Record) -> Reminder:
    return Reminder(
        id=_require_id(raw),
        text=_require_str(raw, "text"),
        time=parse_time(raw["time"]),
        enabled=_require_bool(raw, "enabled"),
    )


def reminder_to_dict(reminder: Reminder) -> Record:
    return {
        "id": reminder.id,
        "text": reminder.text,
        "time": reminder.time,
        "enabled": reminder.enabled,
    }


def records_from(value: object) -> list[Record]:
    if not isinstance(value, list):
        raise TypeError(f"collection must be a list, got {type(value).__name__}")
    for item in value:
        if not isinstance(item, dict):
            raise TypeError(f"record must be an object, got {item!r}")
    return cast(list[Record], value)
