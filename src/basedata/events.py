"""Event bus: listener dispatch plus an append-only log of emitted events."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field

Listener = Callable[..., Any]


class DataEvent(BaseModel):
    """A single emitted event."""

    timestamp: float = Field(default_factory=time.monotonic)
    name: str
    args: list[Any] = Field(default_factory=list)


class EventBus:
    """Named events with ordered listeners. Every emit is logged."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}
        self._events: list[DataEvent] = []

    def on(self, name: str, listener: Listener) -> None:
        self._listeners.setdefault(name, []).append(listener)

    def off(self, name: str, listener: Listener | None = None) -> None:
        """Remove one listener, or every listener for ``name``."""
        if listener is None:
            self._listeners.pop(name, None)
            return
        listeners = self._listeners.get(name, [])
        if listener in listeners:
            listeners.remove(listener)

    def emit(self, name: str, *args: Any) -> None:
        self._events.append(DataEvent(name=name, args=list(args)))
        for listener in list(self._listeners.get(name, [])):
            listener(*args)

    def listeners(self, name: str) -> list[Listener]:
        return list(self._listeners.get(name, []))

    @property
    def events(self) -> list[DataEvent]:
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def query_by_name(self, name: str) -> list[DataEvent]:
        return [e for e in self._events if e.name == name]
