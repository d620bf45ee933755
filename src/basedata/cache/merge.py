"""Merge and union rules for writes into the data cache."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from basedata.cache.paths import ensure_path, get_path, set_path, split_path

logger = logging.getLogger(__name__)


def deep_merge(target: MutableMapping[str, Any], source: Mapping[str, Any]) -> None:
    """Recursively merge ``source`` into ``target`` in place.

    Merge rules per key:
      mapping into mapping  -> recurse
      anything else         -> replace (lists and scalars are not merged)
    """
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(value, Mapping) and isinstance(existing, MutableMapping):
            deep_merge(existing, value)
        else:
            target[key] = copy.deepcopy(value)


def merge_value(root: MutableMapping[str, Any], path: str, value: Any) -> None:
    """Deep-merge a mapping at ``path``, or set any other value there."""
    if not split_path(path):
        if not isinstance(value, Mapping):
            raise TypeError(f"Cannot merge {type(value).__name__} onto the cache root")
        deep_merge(root, value)
        return
    if isinstance(value, Mapping) and isinstance(get_path(root, path), Mapping):
        deep_merge(ensure_path(root, path), value)
        return
    set_path(root, path, copy.deepcopy(value))


def union_value(root: MutableMapping[str, Any], path: str, value: Any) -> list[Any]:
    """Append ``value`` to the list at ``path`` and return the resulting list.

    Existing elements come first and nothing is de-duplicated. A missing
    value becomes a new list; a scalar is wrapped before appending.
    """
    existing = get_path(root, path)
    items = _arrayify(value)
    if existing is None:
        result = list(items)
    elif isinstance(existing, list):
        existing.extend(items)
        return existing
    else:
        logger.debug("Union onto non-list value at %s, wrapping %r", path, existing)
        result = [existing, *items]
    set_path(root, path, result)
    return result


def _arrayify(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return [copy.deepcopy(v) for v in value]
    return [copy.deepcopy(value)]
