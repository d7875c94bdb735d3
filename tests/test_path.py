import pytest

from pqdijkstra import AlgorithmError, VertexOutOfRangeError
from pqdijkstra.path import path_weight, reconstruct_all, reconstruct_path


def test_reconstructs_chain():
    preds = [None, 0, 1, 1]
    assert reconstruct_path(preds, 0, 2) == [0, 1, 2]
    assert reconstruct_path(preds, 0, 0) == [0]


def test_unreached_target():
    assert reconstruct_path([None, None, 0], 0, 1) is None


def test_reconstruct_all():
    assert reconstruct_all([2, None, None, 2], 2) == [[2, 0], None, [2], [2, 3]]


def test_out_of_range():
    with pytest.raises(VertexOutOfRangeError):
        reconstruct_path([None, 0], 0, 2)
    with pytest.raises(VertexOutOfRangeError):
        reconstruct_path([None, 0], 5, 1)


def test_cycle_detected():
    with pytest.raises(AlgorithmError, match="cycle"):
        reconstruct_path([None, 2, 1], 0, 1)


def test_path_weight(small_graph):
    assert path_weight(small_graph.neighbors_of, [2, 1, 3]) == 7
    assert path_weight(small_graph.neighbors_of, [2]) == 0
    assert path_weight(small_graph.neighbors_of, [3, 0]) is None
