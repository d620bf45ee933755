"""Glob detection, expansion and file reading for data loads."""

from __future__ import annotations

import fnmatch
import glob
import logging
import os
import re
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

_GLOB_CHARS = re.compile(r"[*?\[\]{}]")
_BRACE_GROUP = re.compile(r"\{([^{}]*,[^{}]*)\}")


def has_glob(pattern: str) -> bool:
    """Return True if ``pattern`` contains glob metacharacters."""
    return bool(_GLOB_CHARS.search(pattern))


def has_separator(key: str) -> bool:
    return "/" in key or os.sep in key


def file_stem(path: str) -> str:
    """Basename of ``path`` without its extension."""
    return Path(path).stem


def extname(path: str) -> str:
    return os.path.splitext(path)[1]


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` groups: ``"*.{yml,yaml}"`` → ``["*.yml", "*.yaml"]``."""
    match = _BRACE_GROUP.search(pattern)
    if not match:
        return [pattern]
    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(head + option + tail))
    return expanded


def resolve_path(path: str, cwd: str | None = None) -> str:
    """Join a single, non-glob path onto ``cwd`` when one is given."""
    if cwd and not os.path.isabs(path):
        return os.path.join(cwd, path)
    return path


def resolve_files(
    pattern: str,
    cwd: str | None = None,
    ignore: Iterable[str] = (),
    dot: bool = False,
) -> list[str]:
    """Resolve a glob pattern to a sorted list of existing files.

    Matching is relative to ``cwd``; returned paths include the ``cwd``
    prefix. No matches yields an empty list.
    """
    ignore = list(ignore)
    found: set[str] = set()
    for expanded in expand_braces(pattern):
        for match in glob.glob(expanded, root_dir=cwd, recursive=True, include_hidden=dot):
            full = resolve_path(match, cwd)
            if not os.path.isfile(full):
                continue
            if _is_ignored(match, ignore) or _is_ignored(full, ignore):
                logger.debug("Ignoring %s", full)
                continue
            found.add(full)
    if not found:
        logger.debug("No files matched %r (cwd=%s)", pattern, cwd)
    return sorted(found)


def read_file(path: str) -> str:
    """Read a data file as UTF-8 text. Raises ``OSError`` on failure."""
    return Path(path).read_text(encoding="utf-8")


def _is_ignored(path: str, patterns: list[str]) -> bool:
    return any(fnmatch.fnmatch(path, p) for p in patterns)
