"""Minimal host application that data stores attach to."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from basedata.cache.paths import get_path, has_path, set_path
from basedata.config.defaults import DEFAULT_CACHE_PATH
from basedata.errors.exceptions import BaseDataError
from basedata.events import EventBus, Listener
from basedata.loaders.registry import Loader, LoaderFn, LoaderRegistry, Matcher
from basedata.store import DataStore

logger = logging.getLogger(__name__)

Plugin = Callable[["App"], Any]


class App:
    """Host object with dot-path state, options, events and data stores.

    Stores are attached explicitly with ``use_data``; the most recently
    attached one is exposed as ``app.data``. All stores on an app share a
    single loader registry.
    """

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        self.options: dict[str, Any] = dict(options or {})
        self._state: dict[str, Any] = {"cache": {}}
        self._events = EventBus()
        self._stores: dict[str, DataStore] = {}
        self._loaders: LoaderRegistry | None = None
        self._data: DataStore | None = None

    # ── State ──

    def get(self, path: str, default: Any = None) -> Any:
        return get_path(self._state, path, default)

    def set(self, path: str, value: Any) -> App:
        set_path(self._state, path, value)
        return self

    def has(self, path: str) -> bool:
        return has_path(self._state, path)

    @property
    def cache(self) -> dict[str, Any]:
        return self._state["cache"]

    # ── Events ──

    @property
    def events(self) -> EventBus:
        return self._events

    def on(self, name: str, listener: Listener) -> App:
        self._events.on(name, listener)
        return self

    def off(self, name: str, listener: Listener | None = None) -> App:
        self._events.off(name, listener)
        return self

    def emit(self, name: str, *args: Any) -> App:
        self._events.emit(name, *args)
        return self

    # ── Plugins and data stores ──

    def use(self, plugin: Plugin) -> App:
        plugin(self)
        return self

    def is_registered(self, prop: str) -> bool:
        return prop in self._stores

    def use_data(
        self,
        prop: str | Mapping[str, Any] = DEFAULT_CACHE_PATH,
        defaults: Mapping[str, Any] | None = None,
    ) -> DataStore:
        """Attach a data store whose cache lives at ``prop``.

        A store already attached at ``prop`` is reused and becomes active
        again. An existing mapping at ``prop`` is kept as the cache.
        """
        if isinstance(prop, Mapping):
            prop, defaults = DEFAULT_CACHE_PATH, prop

        if self.is_registered(prop):
            logger.debug("Data store already registered at %s", prop)
            self._data = self._stores[prop]
            return self._data

        if not isinstance(self.get(prop), dict):
            self.set(prop, {})

        store = DataStore(
            cache=self.get(prop),
            loaders=self._registry(),
            defaults=defaults,
            host_options=self.options,
            events=self._events,
        )
        self._stores[prop] = store
        self._data = store
        logger.debug("Attached data store at %s", prop)
        return store

    @property
    def data(self) -> DataStore:
        if self._data is None:
            raise BaseDataError("No data store attached; call use_data() first")
        return self._data

    def data_loader(self, matcher: Matcher, fn: LoaderFn) -> App:
        self._registry().register(matcher, fn)
        return self

    @property
    def data_loaders(self) -> list[Loader]:
        return self._registry().loaders

    def _registry(self) -> LoaderRegistry:
        if self._loaders is None:
            self._loaders = LoaderRegistry.with_defaults()
        return self._loaders


def data_plugin(
    prop: str | Mapping[str, Any] = DEFAULT_CACHE_PATH,
    defaults: Mapping[str, Any] | None = None,
) -> Plugin:
    """Plugin for ``App.use`` that attaches a data store at ``prop``."""

    def plugin(app: App) -> DataStore:
        return app.use_data(prop, defaults)

    return plugin
