from __future__ import annotations

import json
import logging

import pytest
from result import Err, Ok

from lc.config.loader import load_config, sample_config_json
from lc.models.enums import SortMode
from tests.fs_mock import MemoryFileSystem


def test_load_config_missing_uses_defaults() -> None:
    fs = MemoryFileSystem()
    result = load_config(path="/missing.json", fs=fs)
    assert isinstance(result, Ok)
    cfg = result.unwrap()
    assert cfg.max_line_width == 118
    assert cfg.max_entries_per_class == 2048
    assert cfg.sort_mode is SortMode.NAME


def test_load_config_overrides() -> None:
    payload = {"maxLineWidth": 80, "maxEntriesPerClass": 0, "sortMode": "time"}
    fs = MemoryFileSystem().add_file("/config.json", content=json.dumps(payload))
    result = load_config(path="/config.json", fs=fs)
    assert isinstance(result, Ok)
    cfg = result.unwrap()
    assert cfg.max_line_width == 80
    assert cfg.max_entries_per_class is None
    assert cfg.sort_mode is SortMode.TIME


def test_load_config_invalid_returns_warning() -> None:
    fs = MemoryFileSystem().add_file("/config.json", content="not-json")
    result = load_config(path="/config.json", fs=fs)
    assert isinstance(result, Err)
    warning = result.unwrap_err()
    assert "failed reading config" in warning.lower()


def test_load_config_non_object_rejected() -> None:
    fs = MemoryFileSystem().add_file("/config.json", content="[1, 2]")
    result = load_config(path="/config.json", fs=fs)
    assert isinstance(result, Err)
    assert "json object" in result.unwrap_err().lower()


def test_sample_config_round_trips_defaults() -> None:
    data = json.loads(sample_config_json())
    assert data == {"maxLineWidth": 118, "maxEntriesPerClass": 2048, "sortMode": "name"}


@pytest.mark.parametrize(
    ("payload", "key"),
    [
        ({"sortMode": "size"}, "sortMode"),
        ({"maxLineWidth": 0}, "maxLineWidth"),
        ({"maxLineWidth": "wide"}, "maxLineWidth"),
        ({"maxLineWidth": True}, "maxLineWidth"),
        ({"maxEntriesPerClass": "lots"}, "maxEntriesPerClass"),
    ],
)
def test_load_config_bad_value_names_key(payload: dict[str, object], key: str) -> None:
    fs = MemoryFileSystem().add_file("/config.json", content=json.dumps(payload))
    result = load_config(path="/config.json", fs=fs)
    assert isinstance(result, Err)
    message = result.unwrap_err()
    assert f"'{key}'" in message
    assert message.startswith("Invalid config at /config.json")


def test_load_config_bad_sort_mode_lists_choices() -> None:
    fs = MemoryFileSystem().add_file("/config.json", content=json.dumps({"sortMode": "size"}))
    result = load_config(path="/config.json", fs=fs)
    assert isinstance(result, Err)
    assert "name, time" in result.unwrap_err()


def test_load_config_unknown_keys_warn(caplog: pytest.LogCaptureFixture) -> None:
    payload = {"maxLineWidth": 90, "colour": "blue"}
    fs = MemoryFileSystem().add_file("/config.json", content=json.dumps(payload))

    with caplog.at_level(logging.WARNING, logger="lc"):
        result = load_config(path="/config.json", fs=fs)

    assert isinstance(result, Ok)
    assert result.unwrap().max_line_width == 90
    assert "colour" in caplog.text
