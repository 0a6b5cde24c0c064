import pytest

from tracker.core.errors import NotFoundError, ValidationError
from tracker.reminders import add_reminder, delete_reminder, get_reminders, toggle_reminder
from tracker.state import State
from tracker.store import Store


@pytest.fixture
def state(tmp_tracker_dir):
    return State.load(Store())


def test_seed_reminders(state):
    assert [(r.text, r.time, r.enabled) for r in get_reminders(state)] == [
        ("Morning Exercise", "07:00", True),
        ("Evening Reading", "20:00", True),
    ]


def test_add_reminder_defaults(state):
    reminder_id = add_reminder(state, "Stand up")
    reminder = state.reminders.get(reminder_id)
    assert reminder.time == "09:00"
    assert reminder.enabled


def test_add_reminder_pads_hour(state):
    reminder_id = add_reminder(state, "Stand up", "7:05")
    assert state.reminders.get(reminder_id).time == "07:05"


@pytest.mark.parametrize("time", ["24:00", "7pm", "12:60", ""])
def test_add_reminder_rejects_bad_time(state, time):
    with pytest.raises(ValidationError):
        add_reminder(state, "Stand up", time)
    assert len(state.reminders) == 2


def test_add_reminder_rejects_blank_text(state):
    with pytest.raises(ValidationError):
        add_reminder(state, " ")


def test_toggle_reminder_flips_enabled_only(state):
    before = state.reminders.get(2)
    off = toggle_reminder(state, 2)
    assert not off.enabled
    assert (off.text, off.time) == (before.text, before.time)
    assert toggle_reminder(state, 2) == before


def test_toggle_missing_reminder_raises(state):
    with pytest.raises(NotFoundError):
        toggle_reminder(state, 7)


def test_delete_reminder(state):
    delete_reminder(state, 1)
    assert [r.text for r in State.load(Store()).reminders.list()] == ["Evening Reading"]
