from __future__ import annotations

import logging
from dataclasses import dataclass

from result import Err, Ok, Result

from lc.models.enums import EntryClass, ReportPhase, SortMode
from lc.models.listing import (
    DEFAULT_MAX_ENTRIES,
    CapacityExceededError,
    ClassRegistry,
    Entry,
    ListingError,
    ListingErrorCode,
    ListingResult,
)
from lc.services.classify import classify
from lc.services.columns import DEFAULT_MAX_LINE_WIDTH, render_collection
from lc.services.fs import DEFAULT_FS, FileSystem
from lc.services.sorting import sort_registry

logger = logging.getLogger(__name__)

REPORT_ORDER: tuple[tuple[EntryClass, str], ...] = (
    (EntryClass.FILE, "Files"),
    (EntryClass.DIRECTORY, "Directories"),
    (EntryClass.CHARACTER_DEVICE, "Character Devices"),
    (EntryClass.OTHER, "Misc"),
    (EntryClass.FIFO, "FIFO"),
)


@dataclass(slots=True, frozen=True)
class ReportOptions:
    sort_mode: SortMode = SortMode.NAME
    max_line_width: int = DEFAULT_MAX_LINE_WIDTH
    max_entries_per_class: int | None = DEFAULT_MAX_ENTRIES


def resolve_root(path: str, fs: FileSystem) -> str | ListingError:
    """Validate a listing target.

    Returns the absolute path, or a ``ListingError`` on failure.
    """
    expanded = fs.expanduser(path)
    if not fs.exists(expanded):
        return ListingError(
            code=ListingErrorCode.NOT_FOUND,
            path=expanded,
            message="Path does not exist",
        )

    resolved = fs.absolute(expanded)
    try:
        root_stat = fs.stat(resolved)
    except OSError as exc:
        return ListingError(
            code=ListingErrorCode.ROOT_STAT_FAILED,
            path=resolved,
            message=f"Cannot stat directory: {exc}",
        )
    if classify(root_stat.mode) is not EntryClass.DIRECTORY:
        return ListingError(
            code=ListingErrorCode.NOT_DIRECTORY,
            path=resolved,
            message="Path is not a directory",
        )
    return resolved


def list_directory(
    path: str,
    capacity: int | None = DEFAULT_MAX_ENTRIES,
    fs: FileSystem = DEFAULT_FS,
) -> ListingResult:
    """Read every entry of *path* into a fresh registry, unsorted."""
    logger.debug("list_directory(%s)", path)
    registry = ClassRegistry.create(capacity=capacity)
    try:
        for dir_entry in fs.scandir(path):
            logger.debug("list_directory(%s) found file '%s'", path, dir_entry.name)
            st = dir_entry.stat
            if st is None:
                registry.access_errors += 1
                logger.warning("stat() failed for '%s': %s", dir_entry.path, dir_entry.error or "unknown error")
                continue
            entry = Entry(
                name=dir_entry.name,
                size=st.size,
                link_count=st.nlink,
                mtime=st.mtime,
                mode=st.mode,
            )
            kind = classify(st.mode)
            logger.debug("add %s to %s", entry.name, kind.value)
            registry.insert(kind, entry)
    except CapacityExceededError as exc:
        return Err(ListingError(code=ListingErrorCode.CAPACITY_EXCEEDED, path=path, message=str(exc)))
    except OSError as exc:
        return Err(ListingError(code=ListingErrorCode.OPEN_FAILED, path=path, message=f"Cannot open directory: {exc}"))
    logger.debug("list_directory(%s) ; all entries processed", path)
    return Ok(registry)


def render_report(registry: ClassRegistry, max_line_width: int = DEFAULT_MAX_LINE_WIDTH) -> str:
    return "".join(
        render_collection(registry[kind], title, max_line_width) for kind, title in REPORT_ORDER
    )


class ReportDriver:
    """Runs one listing from directory path to report text.

    The driver walks its phases strictly in order. A failure before
    ``REPORTING`` leaves it in the failing phase and produces no text.
    """

    def __init__(self, options: ReportOptions | None = None, fs: FileSystem = DEFAULT_FS) -> None:
        self._options = options or ReportOptions()
        self._fs = fs
        self.phase = ReportPhase.INIT
        self.registry: ClassRegistry | None = None

    def _enter(self, phase: ReportPhase) -> None:
        logger.debug("phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    def run(self, path: str = ".") -> Result[str, ListingError]:
        resolved = resolve_root(path, self._fs)
        if isinstance(resolved, ListingError):
            return Err(resolved)

        self._enter(ReportPhase.ENUMERATING)
        listed = list_directory(resolved, capacity=self._options.max_entries_per_class, fs=self._fs)
        if isinstance(listed, Err):
            return listed
        registry = listed.unwrap()
        self.registry = registry

        self._enter(ReportPhase.SORTING)
        sort_registry(registry, self._options.sort_mode)

        self._enter(ReportPhase.REPORTING)
        text = render_report(registry, self._options.max_line_width)

        self._enter(ReportPhase.DONE)
        return Ok(text)
