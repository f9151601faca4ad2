"""A bounded ring buffer of unique keys."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)

DEFAULT_CAPACITY = 20


class RingSet(Generic[T]):
    """A ring buffer that ignores keys it already holds.

    When full, pushing a new key evicts the oldest one.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity cannot be negative")
        self._buffer: deque[T] = deque()
        self._keys: set[T] = set()
        self.capacity = capacity

    def push(self, item: T) -> T | None:
        """Add ``item`` at the back; return the evicted key, if any."""
        if item in self._keys:
            logger.debug("Key already in ring buffer: %r", item)
            return None
        popped = None
        if self._buffer and len(self._buffer) >= self.capacity:
            popped = self._buffer.popleft()
            logger.debug("Removing key from ring buffer: %r", popped)
            self._keys.discard(popped)
        self._buffer.append(item)
        self._keys.add(item)
        return popped

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._buffer)

    def back_to_front(self) -> Iterator[T]:
        """Iterate over a snapshot of the keys, newest first."""
        return reversed(list(self._buffer))

    def __repr__(self) -> str:
        return f"RingSet(capacity={self.capacity}, items={list(self._buffer)!r})"