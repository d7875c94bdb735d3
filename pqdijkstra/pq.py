"""Minimum priority queues used as the frontier of the shortest-path search.

Both queues map an element to a non-negative integer key and share the same
contract (:class:`PriorityQueueProtocol`), so the solver can use either one
without changes:

* :class:`HashPriorityQueue` keeps a plain ``dict`` and scans it on every
  :meth:`~HashPriorityQueue.extract_min`. Simple, O(n) per extraction.
* :class:`HeapPriorityQueue` keeps a :mod:`heapq` binary heap next to the
  ``dict`` and lazily skips entries whose key has since changed.

When several elements share the minimum key, which one is extracted is not
part of the contract.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Dict, Generic, Hashable, Iterable, Iterator, List, Optional, Protocol, Tuple, TypeVar

from .deprecation import warn_once

T = TypeVar("T", bound=Hashable)

#: Key meaning "infinitely far away"; also the saturation point of distances.
INFINITY = (1 << 64) - 1


def saturating_add(a: int, b: int) -> int:
    """Return ``a + b`` clamped to :data:`INFINITY`.

    Examples:
        ```python
        >>> saturating_add(2, 3)
        5
        >>> saturating_add(INFINITY, 1) == INFINITY
        True
        ```
    """
    total = a + b
    return INFINITY if total >= INFINITY else total


def _check_key(key: int) -> int:
    if isinstance(key, bool) or not isinstance(key, int):
        raise ValueError(f"priority key must be an integer, got {key!r}")
    if key < 0 or key > INFINITY:
        raise ValueError(f"priority key {key} outside [0, INFINITY]")
    return key


class PriorityQueueProtocol(Protocol[T]):
    """Protocol for frontier structures consumed by the solver."""

    def insert(self, element: T, key: int) -> None:
        """Insert ``element`` or overwrite its key."""
        ...

    def decrease_key(self, element: T, key: int) -> None:
        """Set the key of a present element; ignore absent ones."""
        ...

    def key_of(self, element: T) -> Optional[int]:
        """Return the current key of ``element`` or ``None`` if absent."""
        ...

    def extract_min(self) -> Optional[Tuple[T, int]]:
        """Remove and return the element with the smallest key."""
        ...

    def is_empty(self) -> bool:
        """Return ``True`` when no elements remain."""
        ...

    def __len__(self) -> int:
        ...

    def __contains__(self, element: object) -> bool:
        ...


class HashPriorityQueue(Generic[T]):
    """Dictionary-backed min priority queue with O(n) extraction.

    Examples:
        ```python
        >>> pq = HashPriorityQueue.from_pairs([("a", 3), ("b", 1)])
        >>> pq.decrease_key("a", 0)
        >>> pq.extract_min()
        ('a', 0)
        ```
    """

    def __init__(self) -> None:
        self._keys: Dict[T, int] = {}

    @classmethod
    def from_elements(cls, elements: Iterable[T]) -> "HashPriorityQueue[T]":
        """Create a queue holding ``elements``, each keyed :data:`INFINITY`."""
        pq: HashPriorityQueue[T] = cls()
        pq._keys = dict.fromkeys(elements, INFINITY)
        return pq

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[T, int]]) -> "HashPriorityQueue[T]":
        """Create a queue from ``(element, key)`` pairs; later pairs win."""
        pq: HashPriorityQueue[T] = cls()
        for element, key in pairs:
            pq.insert(element, key)
        return pq

    def insert(self, element: T, key: int) -> None:
        self._keys[element] = _check_key(key)

    def decrease_key(self, element: T, key: int) -> None:
        """Set the key of ``element`` if it is queued.

        Absent elements are ignored, so this cannot be used to insert.
        """
        if element in self._keys:
            self._keys[element] = _check_key(key)

    def change_key(self, element: T, key: int) -> None:
        """Deprecated alias of :meth:`decrease_key`."""
        warn_once("change_key is deprecated; use decrease_key", since="0.2.0", remove_in="0.3.0")
        self.decrease_key(element, key)

    def key_of(self, element: T) -> Optional[int]:
        """Return the current key of ``element`` or ``None`` if absent."""
        return self._keys.get(element)

    def extract_min(self) -> Optional[Tuple[T, int]]:
        if not self._keys:
            return None
        element = min(self._keys, key=self._keys.__getitem__)
        return element, self._keys.pop(element)

    def is_empty(self) -> bool:
        return not self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, element: object) -> bool:
        return element in self._keys

    def __iter__(self) -> Iterator[T]:
        return iter(self._keys)

    def __repr__(self) -> str:
        return f"HashPriorityQueue({self._keys!r})"


class HeapPriorityQueue(Generic[T]):
    """Binary-heap min priority queue with lazy invalidation.

    Every key change pushes a fresh ``(key, seq, element)`` entry; the
    authoritative key lives in a dict and heap entries that disagree with it
    are dropped when they surface. ``seq`` keeps elements themselves from ever
    being compared.
    """

    def __init__(self) -> None:
        self._keys: Dict[T, int] = {}
        self._heap: List[Tuple[int, int, T]] = []
        self._seq = itertools.count()

    @classmethod
    def from_elements(cls, elements: Iterable[T]) -> "HeapPriorityQueue[T]":
        """Create a queue holding ``elements``, each keyed :data:`INFINITY`."""
        pq: HeapPriorityQueue[T] = cls()
        pq._keys = dict.fromkeys(elements, INFINITY)
        pq._heap = [(INFINITY, next(pq._seq), e) for e in pq._keys]
        # entries are already in ascending (key, seq) order, i.e. a valid heap
        return pq

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[T, int]]) -> "HeapPriorityQueue[T]":
        """Create a queue from ``(element, key)`` pairs; later pairs win."""
        pq: HeapPriorityQueue[T] = cls()
        for element, key in pairs:
            pq._keys[element] = _check_key(key)
        pq._heap = [(k, next(pq._seq), e) for e, k in pq._keys.items()]
        heapq.heapify(pq._heap)
        return pq

    def insert(self, element: T, key: int) -> None:
        self._keys[element] = _check_key(key)
        heapq.heappush(self._heap, (key, next(self._seq), element))

    def decrease_key(self, element: T, key: int) -> None:
        """Set the key of ``element`` if it is queued; ignore it otherwise."""
        if element in self._keys:
            self.insert(element, key)

    def change_key(self, element: T, key: int) -> None:
        """Deprecated alias of :meth:`decrease_key`."""
        warn_once("change_key is deprecated; use decrease_key", since="0.2.0", remove_in="0.3.0")
        self.decrease_key(element, key)

    def key_of(self, element: T) -> Optional[int]:
        """Return the current key of ``element`` or ``None`` if absent."""
        return self._keys.get(element)

    def extract_min(self) -> Optional[Tuple[T, int]]:
        while self._heap:
            key, _, element = heapq.heappop(self._heap)
            if self._keys.get(element) != key:
                continue  # stale
            del self._keys[element]
            return element, key
        return None

    def is_empty(self) -> bool:
        return not self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, element: object) -> bool:
        return element in self._keys

    def __repr__(self) -> str:
        return f"HeapPriorityQueue({self._keys!r})"


#: Frontier implementations selectable through ``SolverConfig.frontier``.
QUEUES = {
    "hash": HashPriorityQueue,
    "heap": HeapPriorityQueue,
}

__all__ = [
    "INFINITY",
    "QUEUES",
    "HashPriorityQueue",
    "HeapPriorityQueue",
    "PriorityQueueProtocol",
    "saturating_add",
]
