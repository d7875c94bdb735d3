"""Repeated-run timing of the solver.

Run this module as a script to time the solver on random graphs::

    python -m pqdijkstra.bench --sizes 100,400 1000,4000 --repeat 50
"""

from __future__ import annotations

import argparse
import statistics
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .baselines import check_result
from .dijkstra import DijkstraSolver, SolverConfig
from .exceptions import ConfigError
from .generator import random_graph
from .graph import GraphLike, Vertex


@dataclass(frozen=True)
class BenchResult:
    """Timings of ``repeat`` solver runs, in nanoseconds."""

    repeat: int
    frontier: str
    mean_ns: int
    median_ns: float
    min_ns: int
    max_ns: int

    @classmethod
    def from_samples(cls, samples: List[int], frontier: str) -> "BenchResult":
        return cls(
            repeat=len(samples),
            frontier=frontier,
            mean_ns=sum(samples) // len(samples),
            median_ns=statistics.median(samples),
            min_ns=min(samples),
            max_ns=max(samples),
        )


def benchmark(
    G: GraphLike,
    source: Vertex,
    repeat: int = 1000,
    config: Optional[SolverConfig] = None,
    check: bool = False,
) -> BenchResult:
    """Time ``repeat`` independent solver runs on ``G``.

    Args:
        G: Graph to run on; shared read-only by all runs.
        source: Source vertex.
        repeat: Number of runs.
        config: Solver configuration.
        check: Verify the first run against the reference solver.

    Raises:
        ConfigError: If ``repeat`` is smaller than 1.
        VertexOutOfRangeError: If ``source`` or an edge is out of range.
        AlgorithmError: If ``check`` finds a mismatch.
    """
    if repeat < 1:
        raise ConfigError("repeat must be at least 1")
    cfg = config or SolverConfig()
    samples: List[int] = []
    for i in range(repeat):
        solver = DijkstraSolver(G, source, config=cfg)
        t0 = time.perf_counter_ns()
        res = solver.solve()
        samples.append(time.perf_counter_ns() - t0)
        if check and i == 0:
            check_result(G, res)
    return BenchResult.from_samples(samples, cfg.frontier)


def main(argv: List[str] | None = None) -> None:
    """Time both frontiers on random graphs and print a table.

    Args:
        argv: Optional argument list for testing.
    """
    parser = argparse.ArgumentParser(description="Time the solver on random graphs.")
    parser.add_argument(
        "--sizes",
        nargs="+",
        default=["100,400", "500,2000"],
        help="Size pairs as n,m (e.g. 1000,5000).",
    )
    parser.add_argument("--repeat", type=int, default=20, help="Runs per configuration")
    parser.add_argument("--seed", type=int, default=0, help="Seed for random graphs")
    parser.add_argument("--check", action="store_true", help="Cross-check against Bellman-Ford")
    args = parser.parse_args(argv)

    sizes: List[Tuple[int, int]] = []
    for spec in args.sizes:
        try:
            n_str, m_str = spec.split(",")
            sizes.append((int(n_str), int(m_str)))
        except ValueError:
            parser.error(f"invalid size specification '{spec}'")

    print(f"{'n':>6} {'m':>7} {'frontier':>8} {'mean_us':>10} {'median_us':>10} {'min_us':>10}")
    for n, m in sizes:
        G = random_graph(n, m, seed=args.seed, backbone=True)
        for frontier in ("hash", "heap"):
            r = benchmark(G, 0, repeat=args.repeat, config=SolverConfig(frontier=frontier), check=args.check)
            print(
                f"{n:6d} {m:7d} {frontier:>8}"
                f" {r.mean_ns / 1000:10.1f} {r.median_ns / 1000:10.1f} {r.min_ns / 1000:10.1f}"
            )


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main()
