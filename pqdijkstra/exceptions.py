"""Custom exception types used across :mod:`pqdijkstra`."""

from __future__ import annotations

from typing import Optional


class PQDijkstraError(Exception):
    """Base class for all package-specific errors."""


class InputError(PQDijkstraError, ValueError):
    """Raised for invalid user input such as an unreadable input file."""


class GraphFormatError(InputError):
    """Raised when parsing graph text or adjacency data fails."""


class VertexOutOfRangeError(InputError, IndexError):
    """Raised when a vertex id falls outside ``[0, n)``.

    Attributes:
        vertex: The offending vertex id.
        n: Vertex count of the graph the id was checked against.
    """

    def __init__(self, message: str, vertex: Optional[int] = None, n: Optional[int] = None) -> None:
        super().__init__(message)
        self.vertex = vertex
        self.n = n


class ConfigError(PQDijkstraError, ValueError):
    """Raised for invalid configuration options."""


class AlgorithmError(PQDijkstraError, RuntimeError):
    """Raised when algorithm invariants are violated at runtime."""


__all__ = [
    "PQDijkstraError",
    "InputError",
    "GraphFormatError",
    "VertexOutOfRangeError",
    "ConfigError",
    "AlgorithmError",
]
