from __future__ import annotations

from lc.config.schema import AppConfig


def default_config() -> AppConfig:
    return AppConfig()
