"""
Min-priority queue with an injectable ordering key.

Thin wrapper over heapq so the engines can order arbitrary entries without
the entries themselves having to be comparable.
"""

from typing import Any, Callable, Generic, List, Tuple, TypeVar
from operator import itemgetter
import heapq
import itertools

T = TypeVar("T")


class MinPriorityQueue(Generic[T]):
    """
    Binary-heap priority queue ordered ascending by key(item).

    Duplicate entries for the same logical item are allowed; callers that use
    lazy deletion discard stale entries themselves when they pop them.
    Entries with equal keys come out in insertion order.
    """

    def __init__(self, key: Callable[[T], Any] = itemgetter(0)) -> None:
        self._key = key
        self._heap: List[Tuple[Any, int, T]] = []
        # Tie-breaker so items with equal keys are never compared directly.
        self._counter = itertools.count()

    def push(self, item: T) -> None:
        heapq.heappush(self._heap, (self._key(item), next(self._counter), item))

    def pop(self) -> T:
        """Remove and return the entry with the smallest key."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
