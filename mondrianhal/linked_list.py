"""Doubly ended list: items are added at the head and removed from the tail."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Optional


class ListEmptyError(LookupError):
    """Raised when an item is requested from an empty list."""


@dataclass
class _Entry:
    data: Any
    dealloc: Optional[Callable[[Any], None]]


class LinkedList:
    """FIFO list whose items may carry a release function called on flush."""

    def __init__(self):
        self._items: deque[_Entry] = deque()

    def add(self, data, dealloc=None):
        """Add ``data`` at the head; ``dealloc`` is called on it when flushed."""
        if data is None:
            raise ValueError("data must not be None")
        self._items.appendleft(_Entry(data, dealloc))

    def remove(self):
        """Remove and return the item at the tail (the oldest one)."""
        if not self._items:
            raise ListEmptyError("list is empty")
        return self._items.pop().data

    def is_empty(self):
        return not self._items

    def flush(self):
        """Drop every item, calling each item's release function head first."""
        while self._items:
            entry = self._items.popleft()
            if entry.dealloc is not None:
                entry.dealloc(entry.data)

    def search(self, equal, key, remove=False, keep=True):
        """Return the first item, from the head, for which ``equal(key, item)`` holds.

        With ``remove`` the item is taken out of the list; if ``keep`` is false
        its release function is then called on it.  Returns None if none match.
        """
        if equal is None:
            raise ValueError("equal must be callable")
        if not self._items:
            raise ListEmptyError("list is empty")
        for index, entry in enumerate(self._items):
            if equal(key, entry.data):
                if remove:
                    del self._items[index]
                    if not keep and entry.dealloc is not None:
                        entry.dealloc(entry.data)
                return entry.data
        return None

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return (entry.data for entry in self._items)