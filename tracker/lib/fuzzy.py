from collections.abc import Sequence
from difflib import get_close_matches
from typing import TypeVar

from tracker.core.errors import AmbiguousError
from tracker.core.models import Habit, Reminder, Task

__all__ = ["find_in_pool", "label"]

FUZZY_MATCH_CUTOFF = 0.8

T = TypeVar("T", Habit, Task, Reminder)


def label(item: Habit | Task | Reminder) -> str:
    return item.text if isinstance(item, Reminder) else item.name


def _match_id(ref: str, pool: Sequence[T]) -> T | None:
    if not ref.isdigit():
        return None
    record_id = int(ref)
    return next((item for item in pool if item.id == record_id), None)


def _match_substring(ref: str, pool: Sequence[T]) -> T | None:
    ref_lower = ref.lower()
    exact = next((item for item in pool if label(item).lower() == ref_lower), None)
    if exact:
        return exact
    matches = [item for item in pool if ref_lower in label(item).lower()]
    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        sample = [label(item) for item in matches[:3]]
        raise AmbiguousError(ref, count=len(matches), sample=sample)
    return None


def _match_fuzzy(ref: str, pool: Sequence[T]) -> T | None:
    labels = [label(item).lower() for item in pool]
    matches = get_close_matches(ref.lower(), labels, n=1, cutoff=FUZZY_MATCH_CUTOFF)
    if matches:
        return pool[labels.index(matches[0])]
    return None


def find_in_pool(ref: str, pool: Sequence[T]) -> T | None:
    """Resolve ``ref`` by id, then exact or substring name, then close spelling."""
    ref = ref.strip()
    if not pool or not ref:
        return None
    return _match_id(ref, pool) or _match_substring(ref, pool) or _match_fuzzy(ref, pool)
