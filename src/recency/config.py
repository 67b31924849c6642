"""Capacity configuration loaded from TOML.

Only one setting exists today, the default bound for lists built with
``RecencyList.from_config``:

    version = 1

    [recency]
    capacity = 7
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from recency.errors import RecencyConfigError
from recency.recent import DEFAULT_CAPACITY

logger = logging.getLogger("recency.config")


@dataclass(frozen=True, slots=True)
class RecencyConfig:
    capacity: int = DEFAULT_CAPACITY


def _as_table(value: Any, *, name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise RecencyConfigError(f"Expected [{name}] to be a table.")
    return value


def _as_int(value: Any, *, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise RecencyConfigError(f"Expected {name} to be an integer.")
    return value


def load_config_text(text: str, *, source: str = "<string>") -> RecencyConfig:
    """Parse and validate configuration from TOML text."""

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise RecencyConfigError(f"Invalid TOML in {source}: {e}") from e

    version = data.get("version", None)
    if version is None:
        raise RecencyConfigError(f"Missing required `version = 1` in {source}.")
    version_i = _as_int(version, name="version")
    if version_i != 1:
        raise RecencyConfigError(f"Unsupported config version: {version_i} (expected 1).")

    tbl = _as_table(data.get("recency"), name="recency")
    if "capacity" in tbl:
        capacity = _as_int(tbl["capacity"], name="recency.capacity")
    else:
        capacity = DEFAULT_CAPACITY

    if capacity < 0:
        raise RecencyConfigError("recency.capacity must be >= 0.")

    logger.debug("Loaded recency config from %s: capacity=%d", source, capacity)
    return RecencyConfig(capacity=capacity)


def load_config(path: Path) -> RecencyConfig:
    """Load and validate a TOML config file."""

    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        raise RecencyConfigError(f"Missing config file at: {path}") from e
    except OSError as e:
        raise RecencyConfigError(f"Failed reading config file: {path}") from e

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise RecencyConfigError(f"Config is not valid UTF-8: {path}") from e

    return load_config_text(text, source=str(path))
