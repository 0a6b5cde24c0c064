from tracker.core.errors import NotFoundError
from tracker.state import Collection

from .fuzzy import find_in_pool

__all__ = ["resolve"]


def resolve(ref: str, collection: Collection):
    item = find_in_pool(ref, collection.list())
    if item is None:
        raise NotFoundError(f"no {collection.key[:-1]} found: '{ref}'")
    return item
