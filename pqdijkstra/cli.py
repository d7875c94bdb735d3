"""Command-line interface for running and benchmarking the solver."""

from __future__ import annotations

import argparse
import json
import sys
import time
import traceback
from dataclasses import asdict
from typing import List, Optional, Tuple

from .bench import benchmark
from .dijkstra import DijkstraSolver, SolverConfig
from .exceptions import ConfigError, InputError, PQDijkstraError
from .export import export_tree_json, format_result
from .graph import Graph
from .io import read_input
from .logger import LEVELS, StdLogger

EX_OK = 0
EX_USAGE = 64
EX_SOFTWARE = 70


def _build_parser() -> argparse.ArgumentParser:
    examples = (
        "Examples:\n"
        "  pqdijkstra run -i graph.txt\n"
        "  pqdijkstra -v benchmark -i graph.txt -n 500 --frontier heap\n"
        "\n"
        "Input files hold the source vertex on the first line, then the\n"
        "vertex count and one '<neighbor>,<weight> ...' line per vertex.\n"
    )
    p = argparse.ArgumentParser(
        prog="pqdijkstra",
        description="Run and benchmark Dijkstra's shortest-path algorithm",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose output and full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines as JSON")
    p.add_argument("--log-level", choices=sorted(LEVELS, key=LEVELS.__getitem__), default="warning", help="Log verbosity")

    # same flag after the subcommand; SUPPRESS keeps an earlier -v from being reset
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Verbose output and full tracebacks")

    sub = p.add_subparsers(dest="command", required=True, metavar="COMMAND")

    run = sub.add_parser("run", parents=[common], help="Run the algorithm on the input graph")
    run.add_argument("-i", "--input", dest="input_path", required=True, metavar="FILE", help="Input file that contains the graph")
    run.add_argument("--frontier", choices=["hash", "heap"], default="hash", help="Priority queue implementation")
    run.add_argument("--export-json", type=str, default=None, help="Write the shortest path tree as JSON")
    run.add_argument("--metrics-out", type=str, default=None, help="Write run metrics to this JSON file")

    bench = sub.add_parser("benchmark", parents=[common], help="Benchmark the algorithm on the input graph")
    bench.add_argument("-i", "--input", dest="input_path", required=True, metavar="FILE", help="Input file that contains the graph")
    bench.add_argument("-n", dest="repeat", type=int, default=1000, help="Number of times to run the algorithm (default: 1000)")
    bench.add_argument("--frontier", choices=["hash", "heap"], default="hash", help="Priority queue implementation")
    bench.add_argument("--check", action="store_true", help="Cross-check the first run against Bellman-Ford")
    return p


def _load(path: str, verbose: bool) -> Tuple[int, Graph]:
    source, G = read_input(path)
    if verbose:
        print(f"Read file {path!r} successfully.")
    return source, G


def _run_command(args: argparse.Namespace, logger: StdLogger) -> int:
    source, G = _load(args.input_path, args.verbose)
    if args.verbose:
        print(f"Running algorithm on graph with {G.vertex_count()} vertices and start vertex {source}.\n")

    solver = DijkstraSolver(G, source, config=SolverConfig(frontier=args.frontier), logger=logger)
    t0 = time.perf_counter_ns()
    res = solver.solve()
    elapsed_ns = time.perf_counter_ns() - t0

    for line in format_result(res):
        print(line)
    print(f"Algorithm ran in {elapsed_ns}ns.")

    if args.export_json:
        _write_text(args.export_json, export_tree_json(res))
    if args.metrics_out:
        metrics = solver.metrics(wall_ms=elapsed_ns / 1e6)
        _write_text(args.metrics_out, json.dumps(asdict(metrics)))
    return EX_OK


def _write_text(path: str, text: str) -> None:
    try:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(text)
    except OSError as exc:
        raise InputError(f"cannot write {path}: {exc}") from exc


def _benchmark_command(args: argparse.Namespace, logger: StdLogger) -> int:
    if args.repeat < 1:
        raise ConfigError("-n must be at least 1")
    source, G = _load(args.input_path, args.verbose)
    if args.verbose:
        print(f"Benchmarking {args.input_path!r} over {args.repeat} times.")
        print(f"Algorithm will run on graph with {G.vertex_count()} vertices and start vertex {source}.\n")

    r = benchmark(G, source, repeat=args.repeat, config=SolverConfig(frontier=args.frontier), check=args.check)
    logger.info("benchmark", repeat=r.repeat, frontier=r.frontier, mean_ns=r.mean_ns, median_ns=r.median_ns)
    print(f"Average time: {r.mean_ns}ns")
    if args.verbose:
        print(f"Median: {r.median_ns:.0f}ns  Min: {r.min_ns}ns  Max: {r.max_ns}ns")
    return EX_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``pqdijkstra`` command-line tool."""
    args = _build_parser().parse_args(argv)
    logger = StdLogger(level=args.log_level, json_fmt=args.log_json, stream=sys.stderr)

    try:
        if args.command == "run":
            return _run_command(args, logger)
        return _benchmark_command(args, logger)
    except (InputError, ConfigError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return EX_USAGE
    except PQDijkstraError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EX_SOFTWARE
    except Exception as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EX_SOFTWARE


if __name__ == "__main__":
    sys.exit(main())
