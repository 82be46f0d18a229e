from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Generic, TypeVar

from .. import config

T = TypeVar("T")


class MemoryStore(Generic[T]):
    """In-process LRU store guarded by a lock; holds live objects, persists nothing."""

    def __init__(
        self,
        max_items: int = config.MAX_SESSIONS,
        evict_on_get: bool = config.EVICT_ON_GET,
    ) -> None:
        self._data: OrderedDict[str, T] = OrderedDict()
        self._lock = threading.Lock()
        self._max = max_items
        self._touch_on_get = evict_on_get

    def get(self, key: str) -> T | None:
        with self._lock:
            item = self._data.get(key)
            if item is not None and self._touch_on_get:
                self._data.move_to_end(key)
            return item

    def set(self, key: str, item: T) -> None:
        with self._lock:
            self._data[key] = item
            self._data.move_to_end(key)
            self._enforce_cap()

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def all(self) -> dict[str, T]:
        with self._lock:
            return dict(self._data)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def _enforce_cap(self) -> None:
        # oldest first
        while len(self._data) > self._max:
            self._data.popitem(last=False)
