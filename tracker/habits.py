import dataclasses
from datetime import date

from fncli import cli

from .core.models import Habit
from .lib import clock
from .lib.errors import echo
from .lib.format import format_habit, format_status
from .lib.parsing import parse_category, require_text
from .lib.resolve import resolve
from .state import State, open_state

__all__ = [
    "add_habit",
    "delete_habit",
    "get_habits",
    "toggle_day",
    "toggle_habit",
]


# ── domain ───────────────────────────────────────────────────────────────────


def toggle_day(habit: Habit, day: date) -> Habit:
    """Mark or unmark ``day``, moving the streak counter with it (never below zero)."""
    key = day.isoformat()
    if key in habit.completed_dates:
        return dataclasses.replace(
            habit,
            completed_dates=habit.completed_dates - {key},
            streak=max(0, habit.streak - 1),
        )
    return dataclasses.replace(
        habit,
        completed_dates=habit.completed_dates | {key},
        streak=habit.streak + 1,
    )


def get_habits(state: State) -> list[Habit]:
    return state.habits.list()


def add_habit(state: State, name: str, category: str = "Health") -> int:
    name = require_text(name, "habit name")
    category = parse_category(category)
    return state.habits.add(lambda habit_id: Habit(id=habit_id, name=name, category=category))


def toggle_habit(state: State, habit_id: int, today: date | None = None) -> Habit:
    day = today or clock.today()
    return state.habits.update(habit_id, lambda habit: toggle_day(habit, day))


def delete_habit(state: State, habit_id: int) -> None:
    state.habits.remove(habit_id)


# ── cli ──────────────────────────────────────────────────────────────────────


@cli("tracker habit", name="add")
def add(name: str, category: str = "Health"):
    """Add a habit (--category Health|Learning|Wellness|Productivity|Social)"""
    state = open_state()
    habit_id = add_habit(state, name, category)
    echo(format_status("+", state.habits.get(habit_id).name, habit_id))


@cli("tracker habit", name="check")
def check(ref: str):
    """Toggle today's completion for a habit"""
    state = open_state()
    habit = toggle_habit(state, resolve(ref, state.habits).id)
    symbol = "✓" if habit.done_on(clock.today()) else "□"
    echo(format_status(symbol, f"{habit.name}  {habit.streak}d streak", habit.id))


@cli("tracker habit", name="rm")
def rm(ref: str):
    """Delete a habit"""
    state = open_state()
    habit = resolve(ref, state.habits)
    delete_habit(state, habit.id)
    echo(format_status("×", habit.name, habit.id))


@cli("tracker habit", name="ls", default=True)
def ls():
    """List habits"""
    state = open_state()
    habits = get_habits(state)
    if not habits:
        echo("no habits")
        return
    today = clock.today()
    for habit in habits:
        echo(format_habit(habit, today, show_id=True))
