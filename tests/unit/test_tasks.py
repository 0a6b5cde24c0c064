from datetime import date

import pytest

from tracker.core.errors import NotFoundError, ValidationError
from tracker.state import State
from tracker.store import Store
from tracker.tasks import add_task, delete_task, get_tasks, toggle_task


@pytest.fixture
def state(tmp_tracker_dir):
    return State.load(Store())


def _by_name(state, name):
    return next(t for t in get_tasks(state) if t.name == name)


def test_toggle_call_dentist_twice(state):
    original = _by_name(state, "Call dentist")
    assert not original.completed

    done = toggle_task(state, original.id)
    assert done.completed
    assert (done.name, done.priority, done.due_date) == ("Call dentist", "medium", date(2026, 1, 12))

    undone = toggle_task(state, original.id)
    assert undone == original


def test_add_task_defaults(state):
    task_id = add_task(state, "Water plants")
    task = state.tasks.get(task_id)
    assert task.priority == "medium"
    assert task.due_date is None
    assert not task.completed


def test_add_task_with_due_date(state):
    task_id = add_task(state, "Renew passport", "HIGH", "2026-02-01")
    task = state.tasks.get(task_id)
    assert task.priority == "high"
    assert task.due_date == date(2026, 2, 1)


def test_add_task_blank_due_date_is_none(state):
    task_id = add_task(state, "Renew passport", due_date="")
    assert state.tasks.get(task_id).due_date is None


def test_add_task_rejects_bad_priority(state):
    with pytest.raises(ValidationError):
        add_task(state, "x", priority="urgent")
    assert len(state.tasks) == 2


def test_add_task_rejects_bad_due_date(state):
    with pytest.raises(ValidationError):
        add_task(state, "x", due_date="next tuesday")
    assert len(state.tasks) == 2


def test_add_task_rejects_blank_name(state):
    with pytest.raises(ValidationError):
        add_task(state, "   ")
    assert len(state.tasks) == 2


def test_pending_filter(state):
    toggle_task(state, 1)
    assert [t.name for t in get_tasks(state, include_completed=False)] == ["Call dentist"]


def test_toggle_missing_task_raises(state):
    with pytest.raises(NotFoundError):
        toggle_task(state, 42)


def test_delete_task_keeps_others(state):
    add_task(state, "Third")
    delete_task(state, 1)
    assert [(t.id, t.name) for t in get_tasks(state)] == [(2, "Call dentist"), (3, "Third")]
