"""Starter collections used when nothing has been stored yet."""

from datetime import date

from .core.models import Habit, Reminder, Task

__all__ = ["seed_habits", "seed_reminders", "seed_tasks"]


def seed_habits() -> list[Habit]:
    return [
        Habit(id=1, name="Morning Exercise", category="Health", streak=7),
        Habit(id=2, name="Read 30 minutes", category="Learning", streak=5),
        Habit(id=3, name="Meditate", category="Wellness", streak=3),
    ]


def seed_tasks() -> list[Task]:
    return [
        Task(id=1, name="Complete project proposal", priority="high", due_date=date(2026, 1, 13)),
        Task(id=2, name="Call dentist", priority="medium", due_date=date(2026, 1, 12)),
    ]


def seed_reminders() -> list[Reminder]:
    return [
        Reminder(id=1, text="Morning Exercise", time="07:00"),
        Reminder(id=2, text="Evening Reading", time="20:00"),
    ]
