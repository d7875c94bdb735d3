"""NumPy-backed read-only graph representation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
import numpy.typing as npt

from .exceptions import GraphFormatError, VertexOutOfRangeError
from .graph import Graph, Neighbor, Vertex


@dataclass(frozen=True, eq=False)
class NumpyGraph:
    """Directed graph in compressed sparse row (CSR) form.

    The edges leaving ``u`` are ``targets[offsets[u]:offsets[u + 1]]`` with
    the matching ``weights``. Weights are ``uint64`` so the full range up to
    :data:`~pqdijkstra.pq.INFINITY` fits. The arrays are made read-only,
    which keeps a single instance safe to share between solver runs.
    """

    offsets: npt.NDArray[np.int64]
    targets: npt.NDArray[np.int64]
    weights: npt.NDArray[np.uint64]

    def __post_init__(self) -> None:
        """Validate array shapes and freeze the buffers."""
        if self.offsets.ndim != 1 or self.offsets.size == 0 or self.offsets[0] != 0:
            raise GraphFormatError("offsets must be a 1-d array starting at 0")
        if self.targets.shape != self.weights.shape or self.targets.ndim != 1:
            raise GraphFormatError("targets and weights must be 1-d arrays of equal length")
        if int(self.offsets[-1]) != self.targets.size or np.any(np.diff(self.offsets) < 0):
            raise GraphFormatError("offsets must be non-decreasing and end at the edge count")
        for arr in (self.offsets, self.targets, self.weights):
            arr.setflags(write=False)

    @classmethod
    def from_graph(cls, G: Graph) -> "NumpyGraph":
        """Build the CSR arrays from an adjacency-list :class:`Graph`."""
        degrees = np.fromiter((len(nb) for nb in G.adjacency), dtype=np.int64, count=G.vertex_count())
        offsets = np.zeros(G.vertex_count() + 1, dtype=np.int64)
        np.cumsum(degrees, out=offsets[1:])
        m = G.edge_count()
        try:
            targets = np.fromiter((v for _, v, _ in G.edges()), dtype=np.int64, count=m)
        except OverflowError as exc:
            raise GraphFormatError(f"neighbor id does not fit in int64: {exc}") from exc
        weights = np.fromiter((w for _, _, w in G.edges()), dtype=np.uint64, count=m)
        return cls(offsets=offsets, targets=targets, weights=weights)

    def vertex_count(self) -> int:
        return int(self.offsets.size - 1)

    def edge_count(self) -> int:
        return int(self.targets.size)

    def neighbors_of(self, vertex: Vertex) -> List[Neighbor]:
        """Return the outgoing ``(v, w)`` pairs of ``vertex`` as Python ints.

        Raises:
            VertexOutOfRangeError: If ``vertex`` is not in ``[0, n)``.
        """
        n = self.vertex_count()
        if not (0 <= vertex < n):
            raise VertexOutOfRangeError(f"vertex {vertex} outside [0, {n})", vertex=vertex, n=n)
        lo, hi = int(self.offsets[vertex]), int(self.offsets[vertex + 1])
        return list(zip(self.targets[lo:hi].tolist(), self.weights[lo:hi].tolist()))

    def out_degree(self, vertex: Vertex) -> int:
        return len(self.neighbors_of(vertex))

    def to_graph(self) -> Graph:
        """Return a standard :class:`~pqdijkstra.graph.Graph` copy of this graph."""
        adj: List[Tuple[Neighbor, ...]] = [tuple(self.neighbors_of(u)) for u in range(self.vertex_count())]
        return Graph(adj)


__all__ = ["NumpyGraph"]
