from datetime import date

from tracker.core.models import Habit, Reminder, Task

from . import ansi

__all__ = [
    "format_due",
    "format_habit",
    "format_priority",
    "format_reminder",
    "format_status",
    "format_task",
]

_PRIORITY_COLORS = {"high": "red", "medium": "yellow", "low": "green"}


def format_due(due_date: date | None, today: date, colorize: bool = True) -> str:
    if not due_date:
        return ""
    date_str = due_date.strftime("%d/%m")
    if not colorize:
        return date_str
    if due_date < today:
        return ansi.red(date_str)
    return ansi.muted(date_str)


def format_priority(priority: str) -> str:
    color = getattr(ansi, _PRIORITY_COLORS.get(priority, "gray"))
    return color(priority)


def format_habit(habit: Habit, today: date, show_id: bool = False) -> str:
    """Format a habit for display. Returns: [✓|□] name  category  streak [id]"""
    checked = habit.done_on(today)
    parts = [ansi.green("✓") if checked else "□", habit.name]
    parts.append(ansi.muted(habit.category.lower()))
    parts.append(ansi.indigo(f"{habit.streak}d streak"))
    if show_id:
        parts.append(ansi.muted(f"[{habit.id}]"))
    return " ".join(parts)


def format_task(task: Task, today: date, show_id: bool = False) -> str:
    """Format a task for display. Returns: [✓|□] name priority [due] [id]"""
    parts = [ansi.green("✓") if task.completed else "□"]
    parts.append(ansi.strikethrough(task.name) if task.completed else task.name)
    parts.append(format_priority(task.priority))
    if task.due_date:
        parts.append(format_due(task.due_date, today, colorize=not task.completed))
    if show_id:
        parts.append(ansi.muted(f"[{task.id}]"))
    return " ".join(parts)


def format_reminder(reminder: Reminder, show_id: bool = False) -> str:
    bell = ansi.green("●") if reminder.enabled else ansi.muted("○")
    text = reminder.text if reminder.enabled else ansi.muted(reminder.text)
    parts = [bell, ansi.bold(reminder.time), text]
    if show_id:
        parts.append(ansi.muted(f"[{reminder.id}]"))
    return " ".join(parts)


def format_status(symbol: str, content: str, item_id: int | None = None) -> str:
    """Format status message for action confirmations."""
    if item_id is not None:
        return f"{symbol} {content} {ansi.muted(f'[{item_id}]')}"
    return f"{symbol} {content}"
