from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from lc.models.enums import SortMode
from lc.models.listing import DEFAULT_MAX_ENTRIES
from lc.services.columns import DEFAULT_MAX_LINE_WIDTH

T = TypeVar("T")

CONFIG_KEYS = frozenset({"maxLineWidth", "maxEntriesPerClass", "sortMode"})


class ConfigValueError(ValueError):
    """A config key holds a value that cannot be used."""

    def __init__(self, key: str, value: Any, reason: str) -> None:
        super().__init__(f"'{key}' has invalid value {value!r}: {reason}")
        self.key = key
        self.value = value


@dataclass(slots=True)
class AppConfig:
    max_line_width: int = DEFAULT_MAX_LINE_WIDTH
    max_entries_per_class: int | None = DEFAULT_MAX_ENTRIES
    sort_mode: SortMode = SortMode.NAME

    def to_dict(self) -> dict[str, Any]:
        return {
            "maxLineWidth": self.max_line_width,
            "maxEntriesPerClass": self.max_entries_per_class,
            "sortMode": self.sort_mode.value,
        }


def _parse_width(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("expected an integer")
    if value < 1:
        raise ValueError("must be at least 1")
    return value


def _parse_capacity(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("expected an integer or null")
    # Zero or a negative cap means unbounded.
    return value if value > 0 else None


def _parse_sort_mode(value: Any) -> SortMode:
    try:
        return SortMode(value)
    except ValueError:
        choices = ", ".join(mode.value for mode in SortMode)
        raise ValueError(f"expected one of {choices}") from None


def _field(data: dict[str, Any], key: str, parse: Callable[[Any], T], default: T) -> T:
    if key not in data:
        return default
    try:
        return parse(data[key])
    except ValueError as exc:
        raise ConfigValueError(key, data[key], str(exc)) from exc


def from_dict(data: dict[str, Any], defaults: AppConfig) -> AppConfig:
    return AppConfig(
        max_line_width=_field(data, "maxLineWidth", _parse_width, defaults.max_line_width),
        max_entries_per_class=_field(data, "maxEntriesPerClass", _parse_capacity, defaults.max_entries_per_class),
        sort_mode=_field(data, "sortMode", _parse_sort_mode, defaults.sort_mode),
    )
