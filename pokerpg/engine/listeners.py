"""Ordered synchronous listener registries with cancellable subscriptions."""

from __future__ import annotations

import itertools
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Subscription:
    """Handle returned by ``ListenerRegistry.subscribe``; ``cancel()`` is idempotent."""

    __slots__ = ("_registry", "_key")

    def __init__(self, registry: ListenerRegistry, key: int) -> None:
        self._registry: ListenerRegistry | None = registry
        self._key = key

    @property
    def active(self) -> bool:
        return self._registry is not None

    def cancel(self) -> None:
        if self._registry is not None:
            self._registry._remove(self._key)
            self._registry = None

    def __call__(self) -> None:
        self.cancel()


class ListenerRegistry(Generic[T]):
    """Listeners are invoked in subscription order, synchronously."""

    __slots__ = ("_listeners", "_counter")

    def __init__(self) -> None:
        self._listeners: dict[int, Callable[[T], None]] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Callable[[T], None]) -> Subscription:
        key = next(self._counter)
        self._listeners[key] = listener
        return Subscription(self, key)

    def emit(self, value: T) -> None:
        # Snapshot so listeners may unsubscribe while being notified
        for listener in list(self._listeners.values()):
            listener(value)

    def clear(self) -> None:
        self._listeners.clear()

    def _remove(self, key: int) -> None:
        self._listeners.pop(key, None)
