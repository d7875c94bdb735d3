"""Utilities for reconstructing paths from predecessor arrays."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .exceptions import AlgorithmError, VertexOutOfRangeError

Vertex = int


def reconstruct_path(
    predecessors: Sequence[Optional[Vertex]],
    source: Vertex,
    target: Vertex,
) -> Optional[List[Vertex]]:
    """Return the path from ``source`` to ``target`` using a predecessor array.

    Args:
        predecessors: Predecessor of each vertex, ``None`` for the source and
            for unreached vertices.
        source: Source vertex identifier.
        target: Target vertex identifier.

    Returns:
        Vertices from source to target (inclusive), ``[source]`` when
        ``target == source``, or ``None`` if ``target`` was never reached.

    Raises:
        VertexOutOfRangeError: If ``source`` or ``target`` is out of range.
        AlgorithmError: If the predecessor links form a cycle.
    """
    n = len(predecessors)
    for vertex in (source, target):
        if not (0 <= vertex < n):
            raise VertexOutOfRangeError(f"vertex {vertex} outside [0, {n})", vertex=vertex, n=n)
    if source == target:
        return [source]

    # Walk backwards from target to source
    chain: List[Vertex] = []
    cur: Optional[Vertex] = target
    while cur is not None:
        chain.append(cur)
        if cur == source:
            chain.reverse()
            return chain
        if len(chain) > n:
            raise AlgorithmError(f"predecessor links of vertex {target} form a cycle")
        cur = predecessors[cur]
    return None


def reconstruct_all(predecessors: Sequence[Optional[Vertex]], source: Vertex) -> List[Optional[List[Vertex]]]:
    """Return :func:`reconstruct_path` for every vertex, in id order."""
    return [reconstruct_path(predecessors, source, v) for v in range(len(predecessors))]


def path_weight(neighbors_of, path: Sequence[Vertex]) -> Optional[int]:
    """Sum the cheapest weights along ``path``; ``None`` if an edge is missing.

    ``neighbors_of`` is a graph's bound ``neighbors_of`` method.
    """
    total = 0
    for u, v in zip(path, path[1:]):
        weights = [w for x, w in neighbors_of(u) if x == v]
        if not weights:
            return None
        total += min(weights)
    return total
