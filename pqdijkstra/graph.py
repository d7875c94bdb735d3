"""Directed graph with non-negative integer weights, stored as adjacency lists."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Protocol, Sequence, Tuple

from .exceptions import GraphFormatError, VertexOutOfRangeError
from .pq import INFINITY

Vertex = int
Weight = int
Neighbor = Tuple[Vertex, Weight]
Edge = Tuple[Vertex, Vertex, Weight]


class GraphLike(Protocol):
    """Read-only view the solver needs from a graph."""

    def vertex_count(self) -> int:
        ...

    def neighbors_of(self, vertex: Vertex) -> Sequence[Neighbor]:
        ...


def _check_neighbor(u: int, entry: object) -> Neighbor:
    try:
        v, w = entry  # type: ignore[misc]
    except (TypeError, ValueError):
        raise GraphFormatError(f"vertex {u}: neighbor entry {entry!r} is not a (id, weight) pair") from None
    for value in (v, w):
        if isinstance(value, bool) or not isinstance(value, int):
            raise GraphFormatError(f"vertex {u}: non-integer value in neighbor entry {entry!r}")
    if w < 0:
        raise GraphFormatError(f"negative weight {w} on edge ({u}, {v})")
    if w > INFINITY:
        raise GraphFormatError(f"weight {w} on edge ({u}, {v}) exceeds the infinity sentinel")
    return (v, w)


@dataclass(frozen=True, eq=False)
class Graph:
    """Immutable directed graph.

    ``adjacency[u]`` lists the ``(v, w)`` pairs of the edges leaving ``u``.
    Weights must be non-negative integers. Neighbor ids are *not* checked
    against the vertex count here; :meth:`validate` does that on request and
    the solver refuses out-of-range ids when it meets them.

    Two graphs are equal when they have the same number of vertices and every
    vertex has the same multiset of outgoing ``(v, w)`` pairs.

    Examples:
        ```python
        >>> g = Graph([[(1, 3), (2, 3)], [(2, 2)], []])
        >>> g.vertex_count(), g.edge_count()
        (3, 3)
        >>> g == Graph([[(2, 3), (1, 3)], [(2, 2)], []])
        True
        ```
    """

    adjacency: Tuple[Tuple[Neighbor, ...], ...] = field(default=())

    def __post_init__(self) -> None:
        adj = tuple(
            tuple(_check_neighbor(u, entry) for entry in neighbors)
            for u, neighbors in enumerate(self.adjacency)
        )
        object.__setattr__(self, "adjacency", adj)

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Edge]) -> "Graph":
        """Create a graph with ``n`` vertices from ``(u, v, w)`` tuples.

        Raises:
            VertexOutOfRangeError: If a tail vertex ``u`` is not in ``[0, n)``.
        """
        if n < 0:
            raise GraphFormatError("vertex count must be non-negative")
        adj: List[List[Neighbor]] = [[] for _ in range(n)]
        for u, v, w in edges:
            if not (0 <= u < n):
                raise VertexOutOfRangeError(f"edge tail {u} outside [0, {n})", vertex=u, n=n)
            adj[u].append((v, w))
        return cls(adj)

    @classmethod
    def parse(cls, text: str) -> "Graph":
        """Parse the line-oriented text format; see :func:`pqdijkstra.io.parse_graph`."""
        from .io import parse_graph

        return parse_graph(text)

    def to_text(self) -> str:
        """Serialize into the text format accepted by :meth:`parse`."""
        from .io import format_graph

        return format_graph(self)

    def vertex_count(self) -> int:
        return len(self.adjacency)

    def edge_count(self) -> int:
        """Total number of stored edge entries, duplicates and self-loops included."""
        return sum(len(neighbors) for neighbors in self.adjacency)

    def neighbors_of(self, vertex: Vertex) -> Tuple[Neighbor, ...]:
        """Return the outgoing ``(v, w)`` pairs of ``vertex``.

        Raises:
            VertexOutOfRangeError: If ``vertex`` is not in ``[0, n)``.
        """
        n = len(self.adjacency)
        if not (0 <= vertex < n):
            raise VertexOutOfRangeError(f"vertex {vertex} outside [0, {n})", vertex=vertex, n=n)
        return self.adjacency[vertex]

    def out_degree(self, vertex: Vertex) -> int:
        return len(self.neighbors_of(vertex))

    def edges(self) -> Iterator[Edge]:
        """Yield every edge as ``(u, v, w)`` in adjacency order."""
        for u, neighbors in enumerate(self.adjacency):
            for v, w in neighbors:
                yield u, v, w

    def validate(self) -> "Graph":
        """Check that every neighbor id lies in ``[0, n)`` and return ``self``.

        Raises:
            VertexOutOfRangeError: For the first edge pointing outside the graph.
        """
        n = len(self.adjacency)
        for u, v, _ in self.edges():
            if not (0 <= v < n):
                raise VertexOutOfRangeError(f"edge ({u}, {v}) points outside [0, {n})", vertex=v, n=n)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        if len(self.adjacency) != len(other.adjacency):
            return False
        return all(Counter(a) == Counter(b) for a, b in zip(self.adjacency, other.adjacency))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Graph(n={self.vertex_count()}, m={self.edge_count()})"


__all__ = ["Edge", "Graph", "GraphLike", "Neighbor", "Vertex", "Weight"]
