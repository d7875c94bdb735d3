import numpy as np
import pytest
from conftest import assert_valid_paths

from pqdijkstra import INFINITY, Graph, GraphFormatError, NumpyGraph, VertexOutOfRangeError, dijkstra


def test_round_trip(large_graph):
    ng = NumpyGraph.from_graph(large_graph)
    assert ng.vertex_count() == 8
    assert ng.edge_count() == large_graph.edge_count()
    assert ng.to_graph() == large_graph
    assert ng.neighbors_of(5) == [(4, 3), (7, 4)]
    assert ng.out_degree(1) == 6


def test_neighbors_are_python_ints(small_graph):
    ng = NumpyGraph.from_graph(small_graph)
    v, w = ng.neighbors_of(0)[0]
    assert type(v) is int and type(w) is int


def test_large_weights_fit():
    ng = NumpyGraph.from_graph(Graph([[(1, INFINITY)], []]))
    assert ng.neighbors_of(0) == [(1, INFINITY)]


def test_arrays_are_read_only(small_graph):
    ng = NumpyGraph.from_graph(small_graph)
    with pytest.raises(ValueError):
        ng.weights[0] = 99


def test_out_of_range(small_graph):
    ng = NumpyGraph.from_graph(small_graph)
    with pytest.raises(VertexOutOfRangeError):
        ng.neighbors_of(4)


def test_empty_graph():
    ng = NumpyGraph.from_graph(Graph())
    assert ng.vertex_count() == 0
    assert ng.edge_count() == 0


def test_rejects_inconsistent_arrays():
    with pytest.raises(GraphFormatError):
        NumpyGraph(
            offsets=np.array([0, 2], dtype=np.int64),
            targets=np.array([1], dtype=np.int64),
            weights=np.array([1], dtype=np.uint64),
        )
    with pytest.raises(GraphFormatError):
        NumpyGraph(
            offsets=np.array([0, 1], dtype=np.int64),
            targets=np.array([0], dtype=np.int64),
            weights=np.array([1, 2], dtype=np.uint64),
        )


def test_solver_accepts_numpy_graph(large_graph):
    ng = NumpyGraph.from_graph(large_graph)
    res = dijkstra(ng, 6)
    assert res.distances == dijkstra(large_graph, 6).distances
    assert res.paths[5] == [6, 1, 3, 4, 5]
    assert_valid_paths(large_graph, res)
