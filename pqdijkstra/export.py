"""Rendering of shortest-path results for people and for other tools."""

from __future__ import annotations

import json
from typing import List, Tuple

from .dijkstra import ShortestPathResult


def format_result(result: ShortestPathResult) -> List[str]:
    """Return one line per vertex in id order.

    Reached vertices render as ``"<id> <distance> (<s> -> ... -> <id>)"``,
    unreached ones as ``"<id> inf"``.
    """
    lines: List[str] = []
    for v, (d, path) in enumerate(zip(result.distances, result.paths)):
        if path is None:
            lines.append(f"{v} inf")
        else:
            lines.append(f"{v} {d} ({' -> '.join(map(str, path))})")
    return lines


def shortest_path_tree_edges(result: ShortestPathResult) -> List[Tuple[int, int]]:
    """Return the ``(predecessor, vertex)`` edges of the shortest path tree."""
    return [(p, v) for v, p in enumerate(result.predecessors) if p is not None]


def export_tree_json(result: ShortestPathResult) -> str:
    """Return a JSON string with reached nodes, their distances and tree edges."""
    data = {
        "source": result.source,
        "nodes": [
            {"id": v, "distance": d, "path": path}
            for v, (d, path) in enumerate(zip(result.distances, result.paths))
            if path is not None
        ],
        "edges": [{"source": u, "target": v} for (u, v) in shortest_path_tree_edges(result)],
    }
    return json.dumps(data)


__all__ = ["export_tree_json", "format_result", "shortest_path_tree_edges"]
