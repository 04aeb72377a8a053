from __future__ import annotations

import os
import tempfile

import pytest
from result import Ok

from lc.models.enums import EntryClass
from lc.services.report import list_directory


def test_real_directory_listing() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        os.makedirs(os.path.join(tmpdir, "sub"))
        with open(os.path.join(tmpdir, "a.txt"), "wb") as f:
            f.write(b"x" * 100)

        result = list_directory(tmpdir)

        assert isinstance(result, Ok)
        registry = result.unwrap()
        files = registry[EntryClass.FILE].entries
        assert [e.name for e in files] == ["a.txt"]
        assert files[0].size == 100
        assert files[0].link_count >= 1
        assert [e.name for e in registry[EntryClass.DIRECTORY].entries] == ["sub"]


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requires mkfifo")
def test_real_fifo_is_classified() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        os.mkfifo(os.path.join(tmpdir, "pipe"))

        result = list_directory(tmpdir)

        assert isinstance(result, Ok)
        assert [e.name for e in result.unwrap()[EntryClass.FIFO].entries] == ["pipe"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="requires symlinks")
def test_dangling_symlink_counts_as_access_error() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        os.symlink(os.path.join(tmpdir, "missing"), os.path.join(tmpdir, "dangling"))

        result = list_directory(tmpdir)

        assert isinstance(result, Ok)
        registry = result.unwrap()
        assert registry.access_errors == 1
        assert registry.total == 0
