import dataclasses

from fncli import cli

from .core.models import Reminder
from .lib.errors import echo
from .lib.format import format_reminder, format_status
from .lib.parsing import parse_reminder_time, require_text
from .lib.resolve import resolve
from .state import State, open_state

__all__ = [
    "add_reminder",
    "delete_reminder",
    "get_reminders",
    "toggle_reminder",
]


# ── domain ───────────────────────────────────────────────────────────────────

# Reminders are labels with a time of day; nothing fires them.


def get_reminders(state: State) -> list[Reminder]:
    return state.reminders.list()


def add_reminder(state: State, text: str, time: str = "09:00") -> int:
    text = require_text(text, "reminder text")
    time = parse_reminder_time(time)
    return state.reminders.add(lambda reminder_id: Reminder(id=reminder_id, text=text, time=time))


def toggle_reminder(state: State, reminder_id: int) -> Reminder:
    return state.reminders.update(
        reminder_id, lambda r: dataclasses.replace(r, enabled=not r.enabled)
    )


def delete_reminder(state: State, reminder_id: int) -> None:
    state.reminders.remove(reminder_id)


# ── cli ──────────────────────────────────────────────────────────────────────


@cli("tracker reminder", name="add")
def add(text: str, time: str = "09:00"):
    """Add a reminder (--time HH:MM)"""
    state = open_state()
    reminder_id = add_reminder(state, text, time)
    reminder = state.reminders.get(reminder_id)
    echo(format_status("+", f"{reminder.time} {reminder.text}", reminder_id))


@cli("tracker reminder", name="toggle")
def toggle(ref: str):
    """Enable or disable a reminder"""
    state = open_state()
    reminder = toggle_reminder(state, resolve(ref, state.reminders).id)
    status = "on" if reminder.enabled else "off"
    echo(format_status("●" if reminder.enabled else "○", f"{reminder.text} {status}", reminder.id))


@cli("tracker reminder", name="rm")
def rm(ref: str):
    """Delete a reminder"""
    state = open_state()
    reminder = resolve(ref, state.reminders)
    delete_reminder(state, reminder.id)
    echo(format_status("×", reminder.text, reminder.id))


@cli("tracker reminder", name="ls", default=True)
def ls():
    """List reminders"""
    state = open_state()
    reminders = get_reminders(state)
    if not reminders:
        echo("no reminders")
        return
    for reminder in reminders:
        echo(format_reminder(reminder, show_id=True))
