"""Dot-path access into nested dictionaries."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

_MISSING = object()


def split_path(path: str) -> list[str]:
    """Split ``"a.b.c"`` into segments, dropping empty ones."""
    return [seg for seg in path.split(".") if seg]


def get_path(obj: Mapping[str, Any], path: str | None, default: Any = None) -> Any:
    """Return the value at ``path``, or ``default`` when any segment is missing."""
    if not path:
        return obj
    current: Any = obj
    for seg in split_path(path):
        if not isinstance(current, Mapping) or seg not in current:
            return default
        current = current[seg]
    return current


def has_path(obj: Mapping[str, Any], path: str) -> bool:
    return get_path(obj, path, _MISSING) is not _MISSING


def ensure_path(obj: MutableMapping[str, Any], path: str) -> MutableMapping[str, Any]:
    """Return the mapping at ``path``, creating intermediate dicts as needed.

    A non-mapping value found along the way is replaced by an empty dict.
    """
    current = obj
    for seg in split_path(path):
        child = current.get(seg)
        if not isinstance(child, MutableMapping):
            child = {}
            current[seg] = child
        current = child
    return current


def set_path(obj: MutableMapping[str, Any], path: str, value: Any) -> None:
    """Set ``value`` at ``path``, creating intermediate dicts as needed."""
    segs = split_path(path)
    if not segs:
        raise ValueError("Cannot set an empty path")
    parent = ensure_path(obj, ".".join(segs[:-1])) if len(segs) > 1 else obj
    parent[segs[-1]] = value
