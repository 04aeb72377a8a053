from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Protocol


@dataclass(slots=True, frozen=True)
class StatResult:
    size: int
    mtime: float
    mode: int
    nlink: int


@dataclass(slots=True, frozen=True)
class DirEntry:
    path: str
    name: str
    stat: StatResult | None = None
    error: str | None = None


class FileSystem(Protocol):
    def expanduser(self, path: str) -> str: ...

    def exists(self, path: str) -> bool: ...

    def absolute(self, path: str) -> str: ...

    def stat(self, path: str) -> StatResult: ...

    def scandir(self, path: str) -> Iterable[DirEntry]: ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str: ...


def _to_stat_result(st: os.stat_result) -> StatResult:
    return StatResult(size=st.st_size, mtime=st.st_mtime, mode=st.st_mode, nlink=st.st_nlink)


class OsFileSystem:
    def expanduser(self, path: str) -> str:
        return str(Path(path).expanduser())

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def absolute(self, path: str) -> str:
        return str(Path(path).absolute())

    def stat(self, path: str) -> StatResult:
        return _to_stat_result(os.stat(path))

    def scandir(self, path: str) -> Iterable[DirEntry]:
        # Symlinks are followed, so a link to a directory lists as a directory.
        with os.scandir(path) as entries:
            for e in entries:
                try:
                    sr = _to_stat_result(e.stat())
                except OSError as exc:
                    yield DirEntry(path=e.path, name=e.name, error=str(exc))
                    continue
                yield DirEntry(path=e.path, name=e.name, stat=sr)

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        return Path(path).read_text(encoding=encoding)


DEFAULT_FS: FileSystem = OsFileSystem()
