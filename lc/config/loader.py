from __future__ import annotations

import json
import logging

from result import Err, Ok, Result

from lc.config.defaults import default_config
from lc.config.schema import CONFIG_KEYS, AppConfig, ConfigValueError, from_dict
from lc.services.fs import DEFAULT_FS, FileSystem

CONFIG_PATH = "~/.config/lc/config.json"

logger = logging.getLogger(__name__)


def load_config(path: str | None = None, fs: FileSystem = DEFAULT_FS) -> Result[AppConfig, str]:
    """Read the JSON config at *path*, or the per-user default location.

    A missing file is not an error; the defaults apply. A file that cannot be
    read or parsed, or that holds a bad value, yields an ``Err`` message
    naming the file and, for bad values, the offending key.
    """
    resolved = path or fs.expanduser(CONFIG_PATH)
    if not fs.exists(resolved):
        return Ok(default_config())

    try:
        payload = json.loads(fs.read_text(resolved))
    except (OSError, ValueError) as exc:
        return Err(f"Failed reading config at {resolved}: {exc}.")
    if not isinstance(payload, dict):
        return Err(f"Config at {resolved} must be a JSON object.")

    unknown = sorted(set(payload) - CONFIG_KEYS)
    if unknown:
        logger.warning("Ignoring unknown config keys in %s: %s", resolved, ", ".join(unknown))

    try:
        return Ok(from_dict(payload, default_config()))
    except ConfigValueError as exc:
        return Err(f"Invalid config at {resolved}: {exc}.")


def sample_config_json() -> str:
    return json.dumps(default_config().to_dict(), indent=2)
