"""In-memory session state.

A ``State`` is loaded once per session from a ``Store`` and owns the three
collections. Every mutation replaces the collection's record list and then
writes that collection back through the store.
"""

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from .core.errors import NotFoundError
from .core.models import Habit, Reminder, Task
from .store import HABITS_KEY, REMINDERS_KEY, TASKS_KEY, Store

__all__ = ["Collection", "State", "open_state"]


R = TypeVar("R", Habit, Task, Reminder)


class Collection(Generic[R]):
    """Ordered records with integer ids handed out by a monotonic counter."""

    def __init__(
        self,
        key: str,
        records: Iterable[R],
        on_change: Callable[[str, list[R]], None] | None = None,
    ) -> None:
        self.key = key
        self._records: list[R] = list(records)
        self._on_change = on_change
        self._next_id = max((r.id for r in self._records), default=0) + 1

    def __len__(self) -> int:
        return len(self._records)

    def _commit(self, records: list[R]) -> None:
        self._records = records
        if self._on_change is not None:
            self._on_change(self.key, list(records))

    def next_id(self) -> int:
        record_id = self._next_id
        self._next_id += 1
        return record_id

    def find(self, record_id: int) -> R | None:
        return next((r for r in self._records if r.id == record_id), None)

    def get(self, record_id: int) -> R:
        record = self.find(record_id)
        if record is None:
            raise NotFoundError(f"no {self.key[:-1]} with id {record_id}")
        return record

    def add(self, build: Callable[[int], R]) -> int:
        record = build(self.next_id())
        self._commit([*self._records, record])
        return record.id

    def update(self, record_id: int, change: Callable[[R], R]) -> R:
        updated = change(self.get(record_id))
        self._commit([updated if r.id == record_id else r for r in self._records])
        return updated

    def remove(self, record_id: int) -> None:
        if self.find(record_id) is None:
            return
        self._commit([r for r in self._records if r.id != record_id])

    def list(self) -> list[R]:
        return list(self._records)


class State:
    def __init__(
        self,
        store: Store,
        habits: Iterable[Habit] = (),
        tasks: Iterable[Task] = (),
        reminders: Iterable[Reminder] = (),
        theme: str = "light",
    ) -> None:
        self.store = store
        self.theme = theme
        self.habits: Collection[Habit] = Collection(HABITS_KEY, habits, self._persist)
        self.tasks: Collection[Task] = Collection(TASKS_KEY, tasks, self._persist)
        self.reminders: Collection[Reminder] = Collection(REMINDERS_KEY, reminders, self._persist)

    @classmethod
    def load(cls, store: Store) -> "State":
        return cls(
            store,
            habits=store.load(HABITS_KEY),
            tasks=store.load(TASKS_KEY),
            reminders=store.load(REMINDERS_KEY),
            theme=store.load_theme(),
        )

    def _persist(self, key: str, records: list) -> None:
        self.store.save(key, records)

    def set_theme(self, theme: str) -> None:
        self.store.save_theme(theme)
        self.theme = theme


def open_state() -> State:
    """Load a session from the configured database."""
    return State.load(Store())
