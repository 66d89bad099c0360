"""A bounded FIFO buffer that refuses new items when full."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 2000


class RingBufferEmpty(Exception):
    """Raised when popping from an empty ring buffer."""


class RingBuffer(Generic[T]):
    """Thread-safe bounded queue; ``push`` fails instead of overwriting."""

    DEFAULT_CAPACITY = DEFAULT_CAPACITY

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("Capacity must be greater than 0")
        self._capacity = capacity
        self._items: Deque[T] = deque()
        self._lock = threading.Lock()

    def push(self, item: T) -> bool:
        """Append ``item``; return False without storing it if the buffer is full."""
        with self._lock:
            if len(self._items) >= self._capacity:
                return False
            self._items.append(item)
            return True

    def pop(self) -> T:
        """Remove and return the oldest item, or raise RingBufferEmpty."""
        with self._lock:
            if not self._items:
                raise RingBufferEmpty("ring buffer is empty")
            return self._items.popleft()

    def is_empty(self) -> bool:
        with self._lock:
            return not self._items

    def is_full(self) -> bool:
        with self._lock:
            return len(self._items) >= self._capacity

    def capacity(self) -> int:
        return self._capacity

    def reset(self) -> None:
        """Discard every stored item."""
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)