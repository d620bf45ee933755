"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Where the data cache lives on the host
DEFAULT_CACHE_PATH = "cache.data"

# Default namespacing for loaded files
DEFAULT_NAMESPACE = None
DEFAULT_RENAME_KEY = None

# Default glob settings
DEFAULT_CWD = None
DEFAULT_DOT = False

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all option defaults as a flat dictionary for merging."""
    return {
        "namespace": DEFAULT_NAMESPACE,
        "rename_key": DEFAULT_RENAME_KEY,
        "cwd": DEFAULT_CWD,
        "ignore": [],
        "dot": DEFAULT_DOT,
    }
