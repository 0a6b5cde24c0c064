import dataclasses
from datetime import date
from typing import Literal, get_args

Category = Literal["Health", "Learning", "Wellness", "Productivity", "Social"]
Priority = Literal["low", "medium", "high"]
ThemeName = Literal["light", "dark"]

CATEGORIES: tuple[str, ...] = get_args(Category)
PRIORITIES: tuple[str, ...] = get_args(Priority)
THEMES: tuple[str, ...] = get_args(ThemeName)


@dataclasses.dataclass(frozen=True)
class Habit:
    id: int
    name: str
    category: str = "Health"
    streak: int = 0
    completed_dates: frozenset[str] = dataclasses.field(default_factory=frozenset, hash=False)

    def done_on(self, day: date) -> bool:
        return day.isoformat() in self.completed_dates


@dataclasses.dataclass(frozen=True)
class Task:
    id: int
    name: str
    completed: bool = False
    priority: str = "medium"
    due_date: date | None = None


@dataclasses.dataclass(frozen=True)
class Reminder:
    id: int
    text: str
    time: str = "09:00"
    enabled: bool = True


@dataclasses.dataclass(frozen=True)
class DayPoint:
    day: date
    completed: int
    total: int


@dataclasses.dataclass(frozen=True)
class StreakEntry:
    name: str
    streak: int
