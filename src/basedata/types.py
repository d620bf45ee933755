"""Call shapes accepted by ``DataStore.data``.

Arguments are classified once at the call boundary into one of these
variants and then dispatched on type.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from basedata.config.options import DataOptions


@dataclass
class LiteralInput:
    """One or more mappings to deep-merge onto the cache root."""

    mappings: list[Mapping[str, Any]]


@dataclass
class FileRef:
    """A glob or file path to load through the loader chain.

    ``strict`` files raise when they cannot be read; globs never do.
    """

    pattern: str
    options: DataOptions | Mapping[str, Any] | None = None
    strict: bool = True


@dataclass
class KeyValue:
    key: str
    value: Any
    union: bool = False


@dataclass
class Many:
    """A list of arguments, each handled as its own ``data()`` call."""

    items: list[Any] = field(default_factory=list)


@dataclass
class Read:
    key: str


DataInput = LiteralInput | FileRef | KeyValue | Many | Read
