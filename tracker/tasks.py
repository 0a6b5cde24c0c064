import dataclasses
from datetime import date

from fncli import cli

from .core.models import Task
from .lib import clock
from .lib.errors import echo
from .lib.format import format_status, format_task
from .lib.parsing import parse_due, parse_priority, require_text
from .lib.resolve import resolve
from .state import State, open_state

__all__ = [
    "add_task",
    "delete_task",
    "get_tasks",
    "toggle_task",
]


# ── domain ───────────────────────────────────────────────────────────────────


def get_tasks(state: State, include_completed: bool = True) -> list[Task]:
    tasks = state.tasks.list()
    if include_completed:
        return tasks
    return [t for t in tasks if not t.completed]


def add_task(
    state: State,
    name: str,
    priority: str = "medium",
    due_date: str | date | None = None,
) -> int:
    name = require_text(name, "task name")
    priority = parse_priority(priority)
    due = parse_due(due_date)
    return state.tasks.add(
        lambda task_id: Task(id=task_id, name=name, priority=priority, due_date=due)
    )


def toggle_task(state: State, task_id: int) -> Task:
    return state.tasks.update(task_id, lambda t: dataclasses.replace(t, completed=not t.completed))


def delete_task(state: State, task_id: int) -> None:
    state.tasks.remove(task_id)


# ── cli ──────────────────────────────────────────────────────────────────────


@cli("tracker task", name="add")
def add(name: str, priority: str = "medium", due: str | None = None):
    """Add a task (--priority low|medium|high, --due YYYY-MM-DD)"""
    state = open_state()
    task_id = add_task(state, name, priority, due)
    echo(format_status("+", state.tasks.get(task_id).name, task_id))


@cli("tracker task", name="check")
def check(ref: str):
    """Toggle a task between open and done"""
    state = open_state()
    task = toggle_task(state, resolve(ref, state.tasks).id)
    echo(format_status("✓" if task.completed else "□", task.name, task.id))


@cli("tracker task", name="rm")
def rm(ref: str):
    """Delete a task"""
    state = open_state()
    task = resolve(ref, state.tasks)
    delete_task(state, task.id)
    echo(format_status("×", task.name, task.id))


@cli("tracker task", name="ls", default=True)
def ls(pending: bool = False):
    """List tasks (--pending hides completed ones)"""
    state = open_state()
    tasks = get_tasks(state, include_completed=not pending)
    if not tasks:
        echo("no tasks")
        return
    today = clock.today()
    for task in tasks:
        echo(format_task(task, today, show_id=True))
