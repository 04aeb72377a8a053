from __future__ import annotations

import stat as statmod

from lc.models.enums import EntryClass

_CLASS_BY_FORMAT: dict[int, EntryClass] = {
    statmod.S_IFDIR: EntryClass.DIRECTORY,
    statmod.S_IFCHR: EntryClass.CHARACTER_DEVICE,
    statmod.S_IFIFO: EntryClass.FIFO,
    statmod.S_IFREG: EntryClass.FILE,
}


def classify(mode: int) -> EntryClass:
    """Bucket a ``st_mode`` value by its file-type bits.

    Block devices, sockets, symlinks and unknown types all land in ``OTHER``.
    """
    return _CLASS_BY_FORMAT.get(statmod.S_IFMT(mode), EntryClass.OTHER)
