"""Bounded per-engine result cache keyed by a text prefix."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

V = TypeVar("V")


class BoundedCache(Generic[V]):
    """Insertion-ordered cache with strict FIFO eviction on overflow.

    Entries are keyed by the first ``prefix_length`` characters of the text
    but also remember the full text, so two texts sharing a prefix never
    return each other's results. A capacity of 0 disables caching.
    """

    __slots__ = ("_capacity", "_prefix_length", "_entries", "_lock")

    def __init__(self, capacity: int, prefix_length: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        if prefix_length < 1:
            raise ValueError(f"prefix_length must be >= 1, got {prefix_length}")
        self._capacity = capacity
        self._prefix_length = prefix_length
        self._entries: dict[str, tuple[str, V]] = {}
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, text: str) -> V | None:
        if not self._capacity:
            return None
        with self._lock:
            entry = self._entries.get(text[:self._prefix_length])
        if entry is None or entry[0] != text:
            return None
        return entry[1]

    def put(self, text: str, value: V) -> None:
        if not self._capacity:
            return
        key = text[:self._prefix_length]
        with self._lock:
            if key not in self._entries and len(self._entries) >= self._capacity:
                # dicts iterate in insertion order: first key is the oldest
                del self._entries[next(iter(self._entries))]
            self._entries[key] = (text, value)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
