"""Shared fixtures and helpers for the test-suite."""

from __future__ import annotations

from typing import List, Optional

import pytest

from pqdijkstra import INFINITY, Graph


@pytest.fixture
def small_graph() -> Graph:
    return Graph(
        [
            [(1, 4), (2, 1)],
            [(0, 4), (2, 2), (3, 5)],
            [(0, 1), (1, 2), (3, 5)],
            [(1, 5), (2, 1)],
        ]
    )


@pytest.fixture
def large_graph() -> Graph:
    return Graph(
        [
            [(1, 3), (6, 2)],
            [(0, 3), (2, 4), (3, 1), (6, 1), (4, 4), (7, 6)],
            [(6, 6), (1, 4), (3, 2), (4, 2)],
            [(1, 1), (2, 2), (4, 1), (7, 2)],
            [(2, 2), (3, 1), (1, 4), (7, 1), (5, 3)],
            [(4, 3), (7, 4)],
            [(0, 2), (1, 1), (2, 6), (4, 5)],
            [(4, 1), (5, 4), (3, 2), (1, 6)],
        ]
    )


def brute_force_distances(G: Graph, source: int) -> List[int]:
    """Minimum weight over all simple paths, found by exhaustive DFS.

    With non-negative weights a shortest walk is never shorter than the best
    simple path, so this is the true shortest distance. Only for tiny graphs.
    """
    n = G.vertex_count()
    best: List[Optional[int]] = [None] * n

    def dfs(u: int, total: int, on_path: set) -> None:
        if best[u] is None or total < best[u]:
            best[u] = total
        for v, w in G.neighbors_of(u):
            if v not in on_path:
                on_path.add(v)
                dfs(v, total + w, on_path)
                on_path.remove(v)

    dfs(source, 0, {source})
    return [INFINITY if b is None else b for b in best]


def assert_valid_paths(G: Graph, result) -> None:
    """Every reached vertex has a path from the source made of real edges."""
    for v, path in enumerate(result.paths):
        if result.distances[v] == INFINITY:
            assert path is None
            continue
        assert path[0] == result.source
        assert path[-1] == v
        total = 0
        for a, b in zip(path, path[1:]):
            weights = [w for x, w in G.neighbors_of(a) if x == b]
            assert weights, f"edge ({a}, {b}) missing"
            total += min(weights)
        assert total == result.distances[v]
