from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from result import Result

from lc.models.enums import EntryClass

DEFAULT_MAX_ENTRIES = 2048


class CapacityExceededError(Exception):
    """Raised when a class collection is asked to hold more than its capacity."""

    def __init__(self, entry_class: EntryClass, capacity: int) -> None:
        super().__init__(f"Files maximum of {capacity} has been exceeded for class '{entry_class.value}'")
        self.entry_class = entry_class
        self.capacity = capacity


@dataclass(slots=True, frozen=True)
class Entry:
    name: str
    size: int
    link_count: int
    mtime: float
    mode: int


@dataclass(slots=True)
class ClassCollection:
    """Append-only store of entries for a single class.

    ``max_name_length`` only ever grows, so it stays a valid column width
    for every entry inserted so far.
    """

    entry_class: EntryClass
    capacity: int | None = DEFAULT_MAX_ENTRIES
    entries: list[Entry] = field(default_factory=list)
    max_name_length: int = 0

    @property
    def count(self) -> int:
        return len(self.entries)

    def insert(self, entry: Entry) -> None:
        if not entry.name:
            raise ValueError("Entry name must not be empty")
        if self.capacity is not None and self.count >= self.capacity:
            raise CapacityExceededError(self.entry_class, self.capacity)
        self.entries.append(entry)
        self.max_name_length = max(self.max_name_length, len(entry.name))


@dataclass(slots=True)
class ClassRegistry:
    collections: dict[EntryClass, ClassCollection]
    access_errors: int = 0

    @classmethod
    def create(cls, capacity: int | None = DEFAULT_MAX_ENTRIES) -> ClassRegistry:
        return cls(collections={kind: ClassCollection(kind, capacity=capacity) for kind in EntryClass})

    def insert(self, kind: EntryClass, entry: Entry) -> None:
        self.collections[kind].insert(entry)

    def __getitem__(self, kind: EntryClass) -> ClassCollection:
        return self.collections[kind]

    @property
    def total(self) -> int:
        return sum(c.count for c in self.collections.values())


class ListingErrorCode(str, Enum):
    NOT_FOUND = "not_found"
    NOT_DIRECTORY = "not_directory"
    ROOT_STAT_FAILED = "root_stat_failed"
    OPEN_FAILED = "open_failed"
    CAPACITY_EXCEEDED = "capacity_exceeded"


@dataclass(slots=True, frozen=True)
class ListingError:
    code: ListingErrorCode
    path: str
    message: str


ListingResult = Result[ClassRegistry, ListingError]
