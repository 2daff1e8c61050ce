"""Minimum priority queue backed by a binary heap."""

from __future__ import annotations
import heapq
import itertools
from typing import Any, Callable, Generic, List, Tuple, TypeVar

T = TypeVar("T")


class MinPQ(Generic[T]):
    """
    Minimum priority queue ordered by a key function.

    Items with equal keys are removed in the order they were inserted.
    """

    def __init__(self, key: Callable[[T], Any]):
        """
        Args:
            key: Function mapping an item to its priority. Smaller comes first.
        """
        self._key = key
        self._heap: List[Tuple[Any, int, T]] = []
        self._counter = itertools.count()

    def insert(self, item: T) -> None:
        """Add an item to the queue."""
        heapq.heappush(self._heap, (self._key(item), next(self._counter), item))

    def del_min(self) -> T:
        """Remove and return the item with the smallest key."""
        if not self._heap:
            raise IndexError("del_min from an empty priority queue")
        return heapq.heappop(self._heap)[2]

    def min(self) -> T:
        """Return the item with the smallest key without removing it."""
        if not self._heap:
            raise IndexError("min of an empty priority queue")
        return self._heap[0][2]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
