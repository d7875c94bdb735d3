"""Public package exports for :mod:`pqdijkstra`."""

from __future__ import annotations

from .baselines import bellman_ford_reference, check_result
from .dijkstra import DijkstraSolver, ShortestPathResult, SolverConfig, SolverMetrics, dijkstra
from .exceptions import (
    AlgorithmError,
    ConfigError,
    GraphFormatError,
    InputError,
    PQDijkstraError,
    VertexOutOfRangeError,
)
from .graph import Graph
from .graph_numpy import NumpyGraph
from .io import parse_graph, parse_input, read_input, write_input
from .logger import Logger, NoopLogger, StdLogger
from .pq import INFINITY, HashPriorityQueue, HeapPriorityQueue, PriorityQueueProtocol

__version__ = "0.2.0"

__all__ = [
    "INFINITY",
    "Graph",
    "NumpyGraph",
    "HashPriorityQueue",
    "HeapPriorityQueue",
    "PriorityQueueProtocol",
    "DijkstraSolver",
    "ShortestPathResult",
    "SolverConfig",
    "SolverMetrics",
    "dijkstra",
    "bellman_ford_reference",
    "check_result",
    "parse_graph",
    "parse_input",
    "read_input",
    "write_input",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "PQDijkstraError",
    "InputError",
    "GraphFormatError",
    "VertexOutOfRangeError",
    "ConfigError",
    "AlgorithmError",
]
