"""Single-source shortest paths with a priority-queue driven Dijkstra search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from .exceptions import ConfigError, VertexOutOfRangeError
from .graph import GraphLike, Vertex
from .logger import Logger, NoopLogger
from .path import reconstruct_all, reconstruct_path
from .pq import INFINITY, QUEUES, PriorityQueueProtocol, saturating_add


@dataclass(frozen=True)
class ShortestPathResult:
    """Distances, predecessors and paths from one source.

    Attributes:
        source: The source vertex.
        distances: ``distances[v]`` is the length of a shortest path to ``v``,
            :data:`~pqdijkstra.pq.INFINITY` if ``v`` is unreached.
        predecessors: Vertex preceding ``v`` on its path; ``None`` for the
            source and unreached vertices.
        paths: Vertex sequence from the source to ``v`` inclusive, ``None``
            if ``v`` is unreached.
    """

    source: Vertex
    distances: List[int]
    predecessors: List[Optional[Vertex]]
    paths: List[Optional[List[Vertex]]]

    def is_reachable(self, vertex: Vertex) -> bool:
        return self.distances[vertex] != INFINITY

    def path_to(self, vertex: Vertex) -> Optional[List[Vertex]]:
        return self.paths[vertex]


@dataclass(frozen=True)
class SolverMetrics:
    """Performance metrics collected from a solver run."""

    n: int
    m: int
    frontier: str
    counters: Dict[str, int]
    wall_ms: float


@dataclass(frozen=True)
class SolverConfig:
    """Configuration knobs for the solver.

    Attributes:
        frontier: Priority queue backing the search, ``"hash"`` (dict scan,
            the default) or ``"heap"`` (binary heap).
    """

    frontier: str = "hash"

    def __post_init__(self) -> None:
        if self.frontier not in QUEUES:
            raise ConfigError(f"unknown frontier '{self.frontier}' (choose from {', '.join(sorted(QUEUES))})")


class DijkstraSolver:
    """Dijkstra's algorithm over a graph with non-negative integer weights.

    The graph is only read, so one graph may back any number of solvers. All
    mutable state (queue, distances, predecessors, finalized markers) belongs
    to the solver instance.
    """

    def __init__(
        self,
        graph: GraphLike,
        source: Vertex,
        config: Optional[SolverConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        """Initialize the solver.

        Args:
            graph: Input graph.
            source: Source vertex identifier.
            config: Optional solver configuration.
            logger: Optional event logger.

        Raises:
            VertexOutOfRangeError: If ``source`` is not a valid vertex id.
        """
        n = graph.vertex_count()
        if not (0 <= source < n):
            raise VertexOutOfRangeError(f"source vertex {source} outside [0, {n})", vertex=source, n=n)
        self.G = graph
        self.n = n
        self.source = source
        self.cfg = config or SolverConfig()
        self.logger = logger or NoopLogger()
        self.counters: Dict[str, int] = {
            "extractions": 0,
            "edges_scanned": 0,
            "relaxations": 0,
        }
        self._result: Optional[ShortestPathResult] = None

    def _make_queue(self) -> PriorityQueueProtocol[Vertex]:
        pq = QUEUES[self.cfg.frontier].from_elements(range(self.n))
        pq.decrease_key(self.source, 0)
        return pq

    def _check_neighbor(self, u: Vertex, v: Vertex) -> None:
        if not (0 <= v < self.n):
            raise VertexOutOfRangeError(
                f"edge ({u}, {v}) points outside [0, {self.n})", vertex=v, n=self.n
            )

    def solve(self) -> ShortestPathResult:
        """Run the search and return distances and paths for every vertex.

        Raises:
            VertexOutOfRangeError: If an edge points outside the graph.
        """
        n = self.n
        dist: List[int] = [INFINITY] * n
        pred: List[Optional[Vertex]] = [None] * n
        checked: List[bool] = [False] * n
        dist[self.source] = 0
        pq = self._make_queue()
        self.logger.debug("start", n=n, source=self.source, frontier=self.cfg.frontier)

        while True:
            item = pq.extract_min()
            if item is None:
                break
            u, du = item
            self.counters["extractions"] += 1
            for v, w in self.G.neighbors_of(u):
                self.counters["edges_scanned"] += 1
                self._check_neighbor(u, v)
                if checked[v]:
                    continue
                cand = saturating_add(du, w)
                if cand < dist[v]:
                    dist[v] = cand
                    pred[v] = u
                    pq.decrease_key(v, cand)
                    self.counters["relaxations"] += 1
            checked[u] = True

        result = ShortestPathResult(
            source=self.source,
            distances=dist,
            predecessors=pred,
            paths=reconstruct_all(pred, self.source),
        )
        self._result = result
        self.logger.info(
            "solve",
            n=n,
            source=self.source,
            reached=sum(d != INFINITY for d in dist),
            **self.counters,
        )
        return result

    def path(self, target: Vertex) -> Optional[List[Vertex]]:
        """Return the path from the source to ``target``.

        :meth:`solve` is run first if it has not been run yet.

        Returns:
            Vertex ids from source to target (inclusive), or ``None`` if
            ``target`` is unreachable.
        """
        result = self._result or self.solve()
        return reconstruct_path(result.predecessors, self.source, target)

    def summary(self) -> Dict[str, int]:
        """Return a copy of internal counter values."""
        return dict(self.counters)

    def metrics(self, wall_ms: float) -> SolverMetrics:
        """Return performance metrics for the most recent run.

        Args:
            wall_ms: Wall-clock time spent in :meth:`solve` in milliseconds.
        """
        m = sum(len(self.G.neighbors_of(u)) for u in range(self.n))
        return SolverMetrics(
            n=self.n,
            m=m,
            frontier=self.cfg.frontier,
            counters=self.summary(),
            wall_ms=wall_ms,
        )


def dijkstra(
    graph: GraphLike,
    source: Vertex,
    config: Optional[SolverConfig] = None,
    logger: Logger | None = None,
) -> ShortestPathResult:
    """Compute shortest paths from ``source`` to every vertex of ``graph``.

    Examples:
        ```python
        >>> from pqdijkstra import Graph
        >>> res = dijkstra(Graph([[(1, 4), (2, 1)], [], [(1, 2)]]), 0)
        >>> res.distances, res.paths[1]
        ([0, 3, 1], [0, 2, 1])
        ```
    """
    return DijkstraSolver(graph, source, config=config, logger=logger).solve()


__all__ = [
    "DijkstraSolver",
    "ShortestPathResult",
    "SolverConfig",
    "SolverMetrics",
    "dijkstra",
]
