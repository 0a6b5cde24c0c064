import json as _json

from fncli import cli

from . import stats as _stats
from .lib import ansi, clock
from .lib.errors import echo
from .lib.render import render_dashboard, render_progress, render_streak_check
from .state import open_state


@cli("tracker")
def dashboard() -> None:
    """Today's habits, open tasks and headline numbers"""
    state = open_state()
    echo(
        render_dashboard(
            state.habits.list(), state.tasks.list(), state.reminders.list(), clock.today()
        )
    )


@cli("tracker")
def progress() -> None:
    """Weekly chart, streaks and totals"""
    state = open_state()
    echo(render_progress(state.habits.list(), state.tasks.list(), clock.today()))


@cli("tracker")
def stats(json: bool = False) -> None:
    """Headline statistics (--json for machine-readable output)"""
    state = open_state()
    habits = state.habits.list()
    tasks = state.tasks.list()
    reminders = state.reminders.list()
    day = clock.today()
    snapshot = {
        "date": day.isoformat(),
        "completion_rate": _stats.today_completion_rate(habits, day),
        "habits_done_today": _stats.today_completed(habits, day),
        "habits": len(habits),
        "active_tasks": _stats.active_task_count(tasks),
        "completed_tasks": _stats.completed_task_count(tasks),
        "tasks": len(tasks),
        "active_reminders": _stats.active_reminder_count(reminders),
        "reminders": len(reminders),
        "longest_streak": _stats.longest_streak(habits),
        "weekly": [
            {"date": p.day.isoformat(), "completed": p.completed, "total": p.total}
            for p in _stats.weekly_series(habits, day)
        ],
        "streaks": [{"name": e.name, "streak": e.streak} for e in _stats.streak_board(habits)],
    }
    if json:
        echo(_json.dumps(snapshot))
        return
    echo(f"completion {snapshot['completion_rate']}%  ({snapshot['habits_done_today']}/{len(habits)} habits)")
    echo(f"tasks {snapshot['active_tasks']} open, {snapshot['completed_tasks']} done")
    echo(f"reminders {snapshot['active_reminders']} of {len(reminders)} enabled")
    echo(f"longest streak {snapshot['longest_streak']} days")


@cli("tracker")
def streaks() -> None:
    """Compare stored streak counters with the marked days"""
    state = open_state()
    echo(render_streak_check(state.habits.list(), clock.today()))


@cli("tracker theme", name="show", default=True)
def theme_show() -> None:
    """Show the colour theme"""
    echo(open_state().theme)


@cli("tracker theme", name="set")
def theme_set(name: str) -> None:
    """Set the colour theme (dark or light)"""
    state = open_state()
    state.set_theme(name.strip().lower())
    ansi.use(state.theme)
    echo(f"theme: {state.theme}")
