from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from recency.config import RecencyConfig, load_config, load_config_text
from recency.errors import RecencyConfigError, RecencyError, RecencyFormatError
from recency.recent import DEFAULT_CAPACITY, RecencyList
from recency.serde import RecencyListState, from_dict, from_json, to_dict, to_json


def _package_version() -> str:
    try:
        return version("recency")
    except PackageNotFoundError:
        # Running from a source checkout, or otherwise not installed.
        return "0.0.0"


__version__ = _package_version()

__all__ = [
    "DEFAULT_CAPACITY",
    "RecencyConfig",
    "RecencyConfigError",
    "RecencyError",
    "RecencyFormatError",
    "RecencyList",
    "RecencyListState",
    "__version__",
    "from_dict",
    "from_json",
    "load_config",
    "load_config_text",
    "to_dict",
    "to_json",
]
