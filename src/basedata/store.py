"""DataStore, a nested data cache fed by literal values and loaded files."""

from __future__ import annotations

import copy
import logging
import os
from collections.abc import Mapping, MutableMapping
from typing import Any

from basedata.cache.merge import deep_merge, merge_value, union_value
from basedata.cache.paths import get_path, has_path, set_path, split_path
from basedata.config.options import DataOptions, is_options, resolve_options
from basedata.errors.exceptions import FileReadError, InvalidKeyError, LoaderError
from basedata.events import EventBus
from basedata.loaders.files import (
    extname,
    file_stem,
    has_glob,
    has_separator,
    read_file,
    resolve_files,
    resolve_path,
)
from basedata.loaders.registry import Loader, LoaderFn, LoaderRegistry, Matcher
from basedata.types import DataInput, FileRef, KeyValue, LiteralInput, Many, Read

logger = logging.getLogger(__name__)

# Basename stem of files merged onto the cache root regardless of namespacing
_ROOT_FILE_STEM = "data"


class DataStore:
    """Nested key/value cache with file loading through pluggable loaders.

    ``store(...)`` is shorthand for ``store.data(...)``:

        store.data("a", "b")            # set a value
        store.data({"c": "d"})          # deep-merge a mapping
        store.data("a", ["x"], True)    # union onto a list
        store.data("fixtures/*.json")   # load files
        store.data("a")                 # read a value
    """

    def __init__(
        self,
        cache: MutableMapping[str, Any] | None = None,
        loaders: LoaderRegistry | None = None,
        defaults: Mapping[str, Any] | None = None,
        host_options: Mapping[str, Any] | None = None,
        events: EventBus | None = None,
    ) -> None:
        self._cache = cache if cache is not None else {}
        self._loaders = loaders if loaders is not None else LoaderRegistry.with_defaults()
        self._defaults = dict(defaults or {})
        self._host_options = host_options
        self._events = events

    def __call__(self, *args: Any) -> Any:
        return self.data(*args)

    @property
    def cache(self) -> MutableMapping[str, Any]:
        return self._cache

    @property
    def loaders(self) -> list[Loader]:
        return self._loaders.loaders

    # ── Core operations ──

    def data(self, *args: Any) -> Any:
        """Set, merge, union, load or read cache data depending on the arguments.

        Returns the stored value for a single-key read, otherwise the store.
        """
        if not args:
            return self
        if self._events is not None:
            self._events.emit("data", list(args))
        return self._dispatch(self.classify(*args))

    def data_loader(self, matcher: Matcher, fn: LoaderFn) -> DataStore:
        self._loaders.register(matcher, fn)
        return self

    def classify(self, *args: Any) -> DataInput:
        """Decide which call shape ``args`` describe."""
        if not args:
            raise InvalidKeyError(key=None)
        key = args[0]

        if isinstance(key, Mapping):
            return LiteralInput([key, *(a for a in args[1:] if isinstance(a, Mapping))])
        if isinstance(key, (list, tuple)):
            return Many(list(key))
        _check_key(key)

        if len(args) == 1:
            if has_glob(key):
                return FileRef(key, strict=False)
            if self._is_file(key) or has_separator(key):
                return FileRef(key)
            return Read(key)

        value = args[1]
        if (value is None or is_options(value)) and self._looks_like_file(key):
            return FileRef(key, value, strict=not has_glob(key))
        union = bool(args[2]) if len(args) > 2 else False
        return KeyValue(key, value, union)

    def load(
        self,
        pattern: str,
        options: DataOptions | Mapping[str, Any] | None = None,
        strict: bool | None = None,
    ) -> DataStore:
        """Load a glob or file path into the cache.

        Globs with no matches are a no-op. A single path that cannot be read
        raises ``FileReadError`` unless ``strict`` is False.
        """
        opts = resolve_options(self._defaults, self._host_options, options)
        is_glob = has_glob(pattern)
        if strict is None:
            strict = not is_glob

        if is_glob:
            files = resolve_files(pattern, cwd=opts.cwd, ignore=opts.ignore, dot=opts.dot)
        else:
            files = [resolve_path(pattern, opts.cwd)]

        for path in files:
            value = self._load_file(path, strict)
            if value is None:
                continue
            self._merge_loaded(path, value, opts)
        return self

    # ── Cache helpers ──

    def get(self, key: str | None = None, default: Any = None) -> Any:
        """Value at a dot path; no key returns the whole cache."""
        return get_path(self._cache, key, default)

    def has(self, key: str) -> bool:
        return has_path(self._cache, key)

    def set(self, key: str | Mapping[str, Any], value: Any = None) -> DataStore:
        """Overwrite values. A mapping sets each of its (dot-path) keys."""
        if isinstance(key, Mapping):
            for k, v in key.items():
                set_path(self._cache, _check_key(k), copy.deepcopy(v))
            return self
        set_path(self._cache, _check_key(key), copy.deepcopy(value))
        return self

    def merge(self, key: str | Mapping[str, Any], value: Any = None) -> DataStore:
        """Deep-merge a mapping onto the root, or a value at ``key``."""
        if isinstance(key, Mapping):
            deep_merge(self._cache, key)
            return self
        merge_value(self._cache, _check_key(key), value)
        return self

    def union(self, key: str, value: Any) -> DataStore:
        """Append ``value`` (or its elements) to the list at ``key``."""
        union_value(self._cache, _check_key(key), value)
        return self

    # ── Internal helpers ──

    def _dispatch(self, item: DataInput) -> Any:
        if isinstance(item, LiteralInput):
            for mapping in item.mappings:
                deep_merge(self._cache, mapping)
            return self
        if isinstance(item, Many):
            for arg in item.items:
                args = arg if isinstance(arg, tuple) else (arg,)
                self._dispatch(self.classify(*args))
            return self
        if isinstance(item, FileRef):
            return self.load(item.pattern, item.options, strict=item.strict)
        if isinstance(item, KeyValue):
            if item.union:
                union_value(self._cache, item.key, item.value)
            else:
                merge_value(self._cache, item.key, item.value)
            return self
        if isinstance(item, Read):
            return self.get(item.key)
        raise InvalidKeyError(key=item)

    def _cwd(self) -> str | None:
        return resolve_options(self._defaults, self._host_options).cwd

    def _is_file(self, key: str) -> bool:
        return bool(extname(key)) and os.path.isfile(resolve_path(key, self._cwd()))

    def _looks_like_file(self, key: str) -> bool:
        return (
            has_glob(key)
            or has_separator(key)
            or self._loaders.handles(key)
            or self._is_file(key)
        )

    def _load_file(self, path: str, strict: bool) -> Any:
        try:
            content = read_file(path)
        except OSError as e:
            if strict:
                raise FileReadError(path=path, original=e) from e
            logger.warning("Failed to read data file %s: %s", path, e)
            return None
        value = self._loaders.apply(path, content)
        logger.debug("Loaded data file %s", path)
        return value

    def _merge_loaded(self, path: str, value: Any, opts: DataOptions) -> None:
        if file_stem(path) != _ROOT_FILE_STEM and opts.namespaced:
            value = {namespace_key(path, opts): value}
        if not isinstance(value, Mapping):
            raise LoaderError(
                f"Data file {path} produced {type(value).__name__}; "
                "only mappings can be merged without a namespace"
            )
        deep_merge(self._cache, value)


def namespace_key(path: str, opts: DataOptions) -> str:
    """Key a loaded file is nested under.

    ``rename_key`` wins over a callable ``namespace``; a string namespace is
    used as-is; otherwise the basename without extension.
    """
    if callable(opts.rename_key):
        return opts.rename_key(path)
    if callable(opts.namespace):
        return opts.namespace(path)
    if isinstance(opts.namespace, str):
        return opts.namespace
    return file_stem(path)


def _check_key(key: Any) -> str:
    if not isinstance(key, str):
        raise InvalidKeyError(key=key)
    if not split_path(key):
        raise InvalidKeyError(f"expected a non-empty key, got {key!r}", key=key)
    return key
