import pytest

from tracker.core.errors import NotFoundError
from tracker.core.models import Habit, Task
from tracker.state import Collection, State
from tracker.store import TASKS_KEY, Store


def _tasks(*names: str) -> list[Task]:
    return [Task(id=i, name=n) for i, n in enumerate(names, start=1)]


def test_list_keeps_insertion_order():
    tasks = Collection(TASKS_KEY, _tasks("a", "b", "c"))
    assert [t.name for t in tasks.list()] == ["a", "b", "c"]


def test_list_returns_a_copy():
    tasks = Collection(TASKS_KEY, _tasks("a"))
    tasks.list().clear()
    assert len(tasks) == 1


def test_ids_continue_after_highest_existing():
    tasks = Collection(TASKS_KEY, [Task(id=40, name="a"), Task(id=7, name="b")])
    new_id = tasks.add(lambda task_id: Task(id=task_id, name="c"))
    assert new_id == 41


def test_ids_start_at_one_when_empty():
    tasks = Collection(TASKS_KEY, [])
    assert tasks.add(lambda task_id: Task(id=task_id, name="a")) == 1


def test_rapid_adds_never_collide():
    tasks = Collection(TASKS_KEY, [])
    ids = [tasks.add(lambda task_id: Task(id=task_id, name="x")) for _ in range(50)]
    assert len(set(ids)) == 50


def test_removed_id_is_not_reused_in_session():
    tasks = Collection(TASKS_KEY, _tasks("a", "b"))
    tasks.remove(2)
    assert tasks.add(lambda task_id: Task(id=task_id, name="c")) == 3


def test_remove_drops_exactly_one_and_keeps_order():
    tasks = Collection(TASKS_KEY, _tasks("a", "b", "c", "d"))
    tasks.remove(2)
    assert [(t.id, t.name) for t in tasks.list()] == [(1, "a"), (3, "c"), (4, "d")]


def test_remove_absent_is_noop():
    changes = []
    tasks = Collection(TASKS_KEY, _tasks("a"), lambda key, records: changes.append(records))
    tasks.remove(99)
    assert len(tasks) == 1
    assert changes == []


def test_update_missing_raises_not_found():
    tasks = Collection(TASKS_KEY, _tasks("a"))
    with pytest.raises(NotFoundError):
        tasks.update(99, lambda t: t)


def test_update_replaces_only_target():
    tasks = Collection(TASKS_KEY, _tasks("a", "b"))
    before = tasks.list()
    tasks.update(2, lambda t: Task(id=t.id, name="B"))
    after = tasks.list()
    assert after[0] is before[0]
    assert after[1].name == "B"
    assert before[1].name == "b"


def test_every_mutation_notifies_with_full_collection():
    changes = []
    tasks = Collection(TASKS_KEY, _tasks("a"), lambda key, records: changes.append((key, records)))
    tasks.add(lambda task_id: Task(id=task_id, name="b"))
    tasks.update(1, lambda t: Task(id=t.id, name="A"))
    tasks.remove(2)
    assert [key for key, _ in changes] == [TASKS_KEY] * 3
    assert [[t.name for t in records] for _, records in changes] == [["a", "b"], ["A", "b"], ["A"]]


def test_state_load_then_mutation_is_persisted(tmp_tracker_dir):
    state = State.load(Store())
    state.habits.add(lambda habit_id: Habit(id=habit_id, name="Stretch"))

    reloaded = State.load(Store())
    assert [h.name for h in reloaded.habits.list()][-1] == "Stretch"
    assert len(reloaded.habits) == 4


def test_state_persists_only_touched_collection(tmp_tracker_dir, monkeypatch):
    store = Store()
    state = State.load(store)
    saved = []
    monkeypatch.setattr(store, "save", lambda key, records: saved.append(key))
    state.tasks.remove(1)
    assert saved == [TASKS_KEY]


def test_state_keeps_working_when_storage_fails(tmp_tracker_dir, monkeypatch):
    store = Store()
    state = State.load(store)
    monkeypatch.setattr(store, "write", lambda key, value: False)
    state.habits.add(lambda habit_id: Habit(id=habit_id, name="Stretch"))
    assert "Stretch" in [h.name for h in state.habits.list()]


def test_state_theme_roundtrip(tmp_tracker_dir):
    state = State.load(Store())
    assert state.theme == "light"
    state.set_theme("dark")
    assert State.load(Store()).theme == "dark"


def test_seeded_state_hands_out_fresh_ids(tmp_tracker_dir):
    state = State.load(Store())
    new_id = state.habits.add(lambda habit_id: Habit(id=habit_id, name="Stretch"))
    assert new_id == 4
