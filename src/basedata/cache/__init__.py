"""Cache helpers: dot-path access plus merge and union rules."""

from basedata.cache.merge import deep_merge, merge_value, union_value
from basedata.cache.paths import ensure_path, get_path, has_path, set_path, split_path

__all__ = [
    "deep_merge",
    "merge_value",
    "union_value",
    "ensure_path",
    "get_path",
    "has_path",
    "set_path",
    "split_path",
]
