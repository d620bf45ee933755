"""Loader registry: ordered, extension-matched file parsers."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from typing import Any, NamedTuple

from basedata.errors.exceptions import LoaderError
from basedata.loaders.builtin import json_loader
from basedata.loaders.files import extname

logger = logging.getLogger(__name__)

Matcher = str | re.Pattern[str]
LoaderFn = Callable[[Any, str], Any]


def format_ext(ext: str) -> str:
    """Normalise an extension to have a leading dot: ``"json"`` → ``".json"``."""
    if not ext.startswith("."):
        return "." + ext
    return ext


class Loader(NamedTuple):
    name: Matcher
    fn: LoaderFn

    def matches(self, ext: str) -> bool:
        if isinstance(self.name, re.Pattern):
            return bool(self.name.search(ext))
        return ext == self.name


class LoaderRegistry:
    """Loaders kept in priority order; the first registered one is the fallback."""

    def __init__(self) -> None:
        self._loaders: list[Loader] = []

    @classmethod
    def with_defaults(cls) -> LoaderRegistry:
        registry = cls()
        registry.register("json", json_loader)
        return registry

    @property
    def loaders(self) -> list[Loader]:
        return list(self._loaders)

    def __len__(self) -> int:
        return len(self._loaders)

    def __iter__(self) -> Iterator[Loader]:
        return iter(list(self._loaders))

    def register(self, matcher: Matcher, fn: LoaderFn) -> Loader:
        """Append a loader for an extension string or a pattern.

        Loaders for the same extension run in registration order, each one
        receiving the previous loader's output.
        """
        if not callable(fn):
            raise LoaderError(f"Loader for {matcher!r} must be callable", matcher=matcher)
        if isinstance(matcher, str):
            if not matcher.strip("."):
                raise LoaderError("Loader extension must not be empty", matcher=matcher)
            loader = Loader(format_ext(matcher), fn)
        elif isinstance(matcher, re.Pattern):
            loader = Loader(matcher, fn)
        else:
            raise LoaderError(
                f"Expected an extension string or regex pattern, got {type(matcher).__name__}",
                matcher=matcher,
            )
        self._loaders.append(loader)
        logger.debug("Registered data loader for %r", loader.name)
        return loader

    def handles(self, path: str) -> bool:
        """True if some loader explicitly matches the extension of ``path``."""
        ext = extname(path)
        return bool(ext) and any(loader.matches(ext) for loader in self._loaders)

    def match(self, path: str) -> list[Loader]:
        """All loaders matching ``path`` in priority order, else the fallback."""
        if not self._loaders:
            raise LoaderError(f"No data loaders registered to load {path}")
        ext = extname(path)
        matched = [loader for loader in self._loaders if loader.matches(ext)]
        if not matched:
            logger.debug("No loader for %r, falling back to %r", ext, self._loaders[0].name)
            return [self._loaders[0]]
        return matched

    def apply(self, path: str, content: Any) -> Any:
        """Run ``content`` through every matching loader, piping each output on."""
        value = content
        for loader in self.match(path):
            value = loader.fn(value, path)
        return value
