import pytest

from pqdijkstra import ConfigError, Graph, SolverConfig, VertexOutOfRangeError
from pqdijkstra.bench import BenchResult, benchmark, main


def test_benchmark_collects_samples(large_graph):
    r = benchmark(large_graph, 6, repeat=10, config=SolverConfig(frontier="heap"), check=True)
    assert r.repeat == 10
    assert r.frontier == "heap"
    assert 0 <= r.min_ns <= r.median_ns <= r.max_ns
    assert r.min_ns <= r.mean_ns <= r.max_ns


def test_from_samples():
    r = BenchResult.from_samples([10, 30, 20, 40], "hash")
    assert r.mean_ns == 25
    assert r.median_ns == 25
    assert (r.min_ns, r.max_ns) == (10, 40)


def test_repeat_must_be_positive(small_graph):
    with pytest.raises(ConfigError):
        benchmark(small_graph, 0, repeat=0)


def test_bad_source_fails_fast(small_graph):
    with pytest.raises(VertexOutOfRangeError):
        benchmark(small_graph, 9, repeat=3)


def test_bad_edge_fails_fast():
    with pytest.raises(VertexOutOfRangeError):
        benchmark(Graph([[(3, 1)]]), 0, repeat=3)


def test_main_prints_table(capsys):
    main(["--sizes", "20,40", "--repeat", "2", "--check"])
    out = capsys.readouterr().out.splitlines()
    assert out[0].split()[:3] == ["n", "m", "frontier"]
    assert len(out) == 3
