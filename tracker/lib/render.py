from collections.abc import Sequence
from datetime import date

from tracker import stats
from tracker.core.models import DayPoint, Habit, Reminder, StreakEntry, Task

from .ansi import bold, gray, indigo, muted, white
from .format import format_habit, format_task

__all__ = [
    "render_dashboard",
    "render_progress",
    "render_streak_bars",
    "render_streak_check",
    "render_weekly_chart",
]

BAR_WIDTH = 20
DASHBOARD_LIMIT = 5


def _bar(value: int, scale: int, width: int = BAR_WIDTH) -> str:
    if scale <= 0 or value <= 0:
        return ""
    filled = max(1, round(width * value / scale))
    return "█" * min(filled, width)


def _header(title: str) -> str:
    return f"\n{bold(white(title))}"


def render_weekly_chart(series: Sequence[DayPoint]) -> list[str]:
    lines = [_header("WEEKLY PROGRESS")]
    for point in series:
        day = point.day.strftime("%a").lower()
        done = indigo(_bar(point.completed, point.total))
        rest = gray("░" * (BAR_WIDTH - len(_bar(point.completed, point.total))))
        lines.append(f"  {day} {done}{rest} {point.completed}/{point.total}")
    return lines


def render_streak_bars(board: Sequence[StreakEntry]) -> list[str]:
    lines = [_header("HABIT STREAKS")]
    if not board:
        lines.append(muted("  no habits"))
        return lines
    scale = max(e.streak for e in board)
    width = stats.NAME_WIDTH + len(stats.ELLIPSIS)
    for entry in board:
        lines.append(f"  {entry.name:<{width}} {indigo(_bar(entry.streak, scale))} {entry.streak}d")
    return lines


def render_progress(habits: Sequence[Habit], tasks: Sequence[Task], today: date) -> str:
    lines = render_weekly_chart(stats.weekly_series(habits, today))
    lines.extend(render_streak_bars(stats.streak_board(habits)))
    lines.append(_header("STATISTICS"))
    lines.append(f"  completion rate  {stats.today_completion_rate(habits, today)}%")
    lines.append(f"  longest streak   {stats.longest_streak(habits)} days")
    lines.append(f"  total habits     {len(habits)}")
    lines.append(f"  tasks completed  {stats.completed_task_count(tasks)}")
    return "\n".join(lines).lstrip("\n")


def render_dashboard(
    habits: Sequence[Habit],
    tasks: Sequence[Task],
    reminders: Sequence[Reminder],
    today: date,
) -> str:
    done = stats.today_completed(habits, today)
    rate = stats.today_completion_rate(habits, today)
    active_tasks = stats.active_task_count(tasks)
    active_reminders = stats.active_reminder_count(reminders)

    lines = [bold(today.strftime("%a %d %b %Y").lower())]
    lines.append(
        f"today {indigo(f'{rate}%')} {muted(f'({done}/{len(habits)} habits)')}"
        f"  tasks {active_tasks} {muted(f'of {len(tasks)}')}"
        f"  reminders {active_reminders} {muted(f'of {len(reminders)}')}"
    )

    lines.append(_header("TODAY'S HABITS"))
    if not habits:
        lines.append(muted("  no habits"))
    lines.extend(f"  {format_habit(h, today, show_id=True)}" for h in habits[:DASHBOARD_LIMIT])

    upcoming = [t for t in tasks if not t.completed][:DASHBOARD_LIMIT]
    lines.append(_header("UPCOMING TASKS"))
    if not upcoming:
        lines.append(muted("  nothing open"))
    lines.extend(f"  {format_task(t, today, show_id=True)}" for t in upcoming)
    return "\n".join(lines)


def render_streak_check(habits: Sequence[Habit], today: date) -> str:
    """Stored streak counters next to the run recomputed from marked days."""
    if not habits:
        return "no habits"
    width = stats.NAME_WIDTH + len(stats.ELLIPSIS)
    lines = [f"{'habit':<{width}} stored  computed"]
    for habit in habits:
        computed = stats.computed_streak(habit, today)
        flag = "" if computed == habit.streak else muted("  drift")
        name = stats.truncate_name(habit.name)
        lines.append(f"{name:<{width}} {habit.streak:>6}  {computed:>8}{flag}")
    return "\n".join(lines)
