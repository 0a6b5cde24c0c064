"""Derived statistics, recomputed from the current records on every call."""

from collections.abc import Sequence
from datetime import date, timedelta

from .core.models import DayPoint, Habit, Reminder, StreakEntry, Task
from .lib import clock

__all__ = [
    "ELLIPSIS",
    "NAME_WIDTH",
    "active_reminder_count",
    "active_task_count",
    "completed_task_count",
    "computed_streak",
    "last_7_days",
    "longest_streak",
    "streak_board",
    "today_completed",
    "today_completion_rate",
    "truncate_name",
    "weekly_series",
]

NAME_WIDTH = 15
ELLIPSIS = "..."


def _percent(part: int, whole: int) -> int:
    """Round half up, matching how the dashboard has always displayed it."""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


def today_completed(habits: Sequence[Habit], today: date | None = None) -> int:
    today = today or clock.today()
    return sum(1 for h in habits if h.done_on(today))


def today_completion_rate(habits: Sequence[Habit], today: date | None = None) -> int:
    return _percent(today_completed(habits, today), len(habits))


def active_task_count(tasks: Sequence[Task]) -> int:
    return sum(1 for t in tasks if not t.completed)


def completed_task_count(tasks: Sequence[Task]) -> int:
    return sum(1 for t in tasks if t.completed)


def active_reminder_count(reminders: Sequence[Reminder]) -> int:
    return sum(1 for r in reminders if r.enabled)


def last_7_days(today: date | None = None) -> list[date]:
    today = today or clock.today()
    return [today - timedelta(days=i) for i in range(6, -1, -1)]


def weekly_series(habits: Sequence[Habit], today: date | None = None) -> list[DayPoint]:
    """Completions per day for the week ending today, oldest first.

    ``total`` is the current habit count on every point, not the count that
    existed on that day.
    """
    total = len(habits)
    return [
        DayPoint(day=day, completed=sum(1 for h in habits if h.done_on(day)), total=total)
        for day in last_7_days(today)
    ]


def truncate_name(name: str, width: int = NAME_WIDTH) -> str:
    return name[:width] + ELLIPSIS if len(name) > width else name


def streak_board(habits: Sequence[Habit]) -> list[StreakEntry]:
    return [StreakEntry(name=truncate_name(h.name), streak=h.streak) for h in habits]


def longest_streak(habits: Sequence[Habit]) -> int:
    return max((h.streak for h in habits), default=0)


def computed_streak(habit: Habit, today: date | None = None) -> int:
    """Consecutive marked days ending today, or yesterday if today is still open."""
    today = today or clock.today()
    day = today if habit.done_on(today) else today - timedelta(days=1)
    streak = 0
    while habit.done_on(day):
        streak += 1
        day -= timedelta(days=1)
    return streak
