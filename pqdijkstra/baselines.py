"""Queue-free reference solver used to cross-check :mod:`pqdijkstra.dijkstra`."""

from __future__ import annotations

from typing import List, Optional

from .dijkstra import ShortestPathResult
from .exceptions import AlgorithmError, VertexOutOfRangeError
from .graph import GraphLike, Vertex
from .path import path_weight, reconstruct_all
from .pq import INFINITY, saturating_add


def bellman_ford_reference(G: GraphLike, source: Vertex) -> ShortestPathResult:
    """Run Bellman-Ford relaxation rounds from ``source``.

    Uses the same saturating arithmetic as the main solver, so both agree on
    which vertices are unreached.

    Raises:
        VertexOutOfRangeError: If ``source`` or any neighbor id is out of range.
    """
    n = G.vertex_count()
    if not (0 <= source < n):
        raise VertexOutOfRangeError(f"source vertex {source} outside [0, {n})", vertex=source, n=n)
    dist: List[int] = [INFINITY] * n
    pred: List[Optional[Vertex]] = [None] * n
    dist[source] = 0

    for u in range(n):
        for v, _ in G.neighbors_of(u):
            if not (0 <= v < n):
                raise VertexOutOfRangeError(f"edge ({u}, {v}) points outside [0, {n})", vertex=v, n=n)

    for _ in range(max(n - 1, 0)):
        updated = False
        for u in range(n):
            du = dist[u]
            for v, w in G.neighbors_of(u):
                if du == INFINITY:
                    continue
                nd = saturating_add(du, w)
                if nd < dist[v]:
                    dist[v] = nd
                    pred[v] = u
                    updated = True
        if not updated:
            break

    return ShortestPathResult(
        source=source,
        distances=dist,
        predecessors=pred,
        paths=reconstruct_all(pred, source),
    )


def check_result(G: GraphLike, result: ShortestPathResult) -> None:
    """Verify ``result`` against the reference solver.

    Distances must match exactly and every path must start at the source, end
    at its vertex and use existing edges whose weights add up to the distance.
    Paths may differ from the reference when several shortest paths exist.

    Raises:
        AlgorithmError: Describing the first mismatch found.
    """
    ref = bellman_ford_reference(G, result.source)
    if ref.distances != result.distances:
        bad = [v for v, (a, b) in enumerate(zip(result.distances, ref.distances)) if a != b]
        raise AlgorithmError(f"distance mismatch against reference at vertices {bad[:10]}")
    for v, path in enumerate(result.paths):
        reachable = result.distances[v] != INFINITY
        if (path is not None) != reachable:
            raise AlgorithmError(f"vertex {v}: path presence disagrees with distance")
        if path is None:
            continue
        if path[0] != result.source or path[-1] != v:
            raise AlgorithmError(f"vertex {v}: path {path} has wrong endpoints")
        if path_weight(G.neighbors_of, path) != result.distances[v]:
            raise AlgorithmError(f"vertex {v}: path {path} does not add up to {result.distances[v]}")


__all__ = ["bellman_ford_reference", "check_result"]
