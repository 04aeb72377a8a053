from __future__ import annotations

from enum import Enum


class EntryClass(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    CHARACTER_DEVICE = "character_device"
    FIFO = "fifo"
    OTHER = "other"


class SortMode(str, Enum):
    NAME = "name"
    TIME = "time"


class ReportPhase(str, Enum):
    INIT = "init"
    ENUMERATING = "enumerating"
    SORTING = "sorting"
    REPORTING = "reporting"
    DONE = "done"
