"""Deterministic random graph generation for tests and benchmarks."""

from __future__ import annotations

import random
from typing import List, Optional, Set, Tuple

from .graph import Edge, Graph


def random_graph(
    n: int,
    m: Optional[int] = None,
    *,
    seed: Optional[int] = 0,
    w_min: int = 1,
    w_max: int = 100,
    allow_self_loops: bool = False,
    backbone: bool = False,
) -> Graph:
    """Generate a directed Erdős–Rényi style graph with integer weights.

    Args:
        n: Number of vertices.
        m: Number of distinct ``(u, v)`` pairs to sample; defaults to
            ``min(4 * n, n * (n - 1))``. Capped at the number of possible pairs.
        seed: Seed for :class:`random.Random`.
        w_min: Smallest weight (must be >= 0).
        w_max: Largest weight.
        allow_self_loops: Permit ``u == v`` edges.
        backbone: Add the chain ``i -> i + 1`` first so every vertex is
            reachable from vertex 0.

    Returns:
        A graph whose neighbor ids are all in ``[0, n)``.
    """
    if n < 0:
        raise ValueError("n must be >= 0.")
    if w_min < 0:
        raise ValueError("w_min must be >= 0 for Dijkstra-safe graphs.")
    if w_max < w_min:
        raise ValueError("w_max must be >= w_min.")

    rng = random.Random(seed)
    possible = n * n if allow_self_loops else n * (n - 1)
    if m is None:
        m = min(4 * n, possible)
    if m < 0:
        raise ValueError("m must be >= 0.")

    seen: Set[Tuple[int, int]] = set()
    edges: List[Edge] = []

    def add_edge(u: int, v: int) -> None:
        if (not allow_self_loops and u == v) or (u, v) in seen:
            return
        seen.add((u, v))
        edges.append((u, v, rng.randint(w_min, w_max)))

    if backbone:
        for i in range(n - 1):
            add_edge(i, i + 1)

    target = min(possible, len(edges) + m)
    while len(edges) < target:
        add_edge(rng.randrange(n), rng.randrange(n))

    return Graph.from_edges(n, edges)


__all__ = ["random_graph"]
