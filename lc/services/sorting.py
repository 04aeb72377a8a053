from __future__ import annotations

from typing import Any, Callable

from lc.models.enums import SortMode
from lc.models.listing import ClassCollection, ClassRegistry, Entry

_SORT_KEYS: dict[SortMode, Callable[[Entry], Any]] = {
    SortMode.NAME: lambda entry: entry.name.lower(),
    SortMode.TIME: lambda entry: entry.mtime,
}


def sort_collection(collection: ClassCollection, mode: SortMode) -> None:
    if collection.count < 2:
        return
    collection.entries.sort(key=_SORT_KEYS[mode])


def sort_registry(registry: ClassRegistry, mode: SortMode) -> None:
    """Sort every collection in place with the same strategy."""
    for collection in registry.collections.values():
        sort_collection(collection, mode)
