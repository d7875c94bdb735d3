import pytest

from pqdijkstra import Graph, GraphFormatError, VertexOutOfRangeError
from pqdijkstra.pq import INFINITY


def test_correctly_equal():
    g1 = Graph([[(1, 3), (2, 3)], [(2, 2), (0, 3)], [(1, 2), (0, 3)]])
    g2 = Graph([[(2, 3), (1, 3)], [(0, 3), (2, 2)], [(0, 3), (1, 2)]])
    assert g1 == g2


def test_correctly_unequal():
    g1 = Graph([[(1, 3), (2, 3)], [(2, 2), (0, 3)], [(1, 2), (0, 3)]])
    g2 = Graph([[(1, 3), (2, 3)], [(0, 3), (2, 2)], [(0, 3)]])
    assert g1 != g2


def test_equality_counts_duplicates():
    assert Graph([[(1, 1), (1, 1)], []]) != Graph([[(1, 1)], []])
    assert Graph([[(1, 1), (1, 1)], []]) == Graph([[(1, 1), (1, 1)], []])


def test_equality_needs_same_vertex_count():
    assert Graph([[], []]) != Graph([[], [], []])


def test_counts(small_graph):
    assert small_graph.vertex_count() == 4
    assert small_graph.edge_count() == 10
    assert Graph([[(0, 1), (0, 1)]]).edge_count() == 2


def test_neighbors_of(small_graph):
    assert small_graph.neighbors_of(3) == ((1, 5), (2, 1))
    assert small_graph.out_degree(1) == 3


@pytest.mark.parametrize("vertex", [4, 100, -1])
def test_neighbors_of_out_of_range(small_graph, vertex):
    with pytest.raises(VertexOutOfRangeError) as info:
        small_graph.neighbors_of(vertex)
    assert info.value.vertex == vertex
    assert info.value.n == 4
    assert isinstance(info.value, IndexError)


def test_graph_is_immutable(small_graph):
    with pytest.raises(AttributeError):
        small_graph.adjacency = ()
    assert isinstance(small_graph.adjacency[0], tuple)


def test_from_edges():
    g = Graph.from_edges(3, [(0, 1, 5), (0, 2, 1), (2, 1, 2)])
    assert g == Graph([[(2, 1), (1, 5)], [], [(1, 2)]])
    assert list(g.edges()) == [(0, 1, 5), (0, 2, 1), (2, 1, 2)]


def test_from_edges_rejects_bad_tail():
    with pytest.raises(VertexOutOfRangeError):
        Graph.from_edges(2, [(2, 0, 1)])


@pytest.mark.parametrize(
    "adjacency",
    [
        [[(1, -1)], []],
        [[(1, 1.5)], []],
        [[(1,)], []],
        [[("1", 2)], []],
        [[(1, INFINITY + 1)], []],
    ],
)
def test_rejects_bad_entries(adjacency):
    with pytest.raises(GraphFormatError):
        Graph(adjacency)


def test_neighbor_ids_are_not_range_checked_until_validate():
    g = Graph([[(5, 1)], []])
    assert g.neighbors_of(0) == ((5, 1),)
    with pytest.raises(VertexOutOfRangeError, match=r"\(0, 5\)"):
        g.validate()
    assert Graph([[(1, 1)], [(0, 2)]]).validate().vertex_count() == 2


def test_empty_graph():
    g = Graph()
    assert g.vertex_count() == 0
    assert g.edge_count() == 0
    assert g == Graph([])


def test_parse_and_to_text(small_graph):
    assert Graph.parse(small_graph.to_text()) == small_graph
    assert Graph.parse("3\n1,3 2,3\n2,2 0,3\n1,2 0,3").adjacency[1] == ((2, 2), (0, 3))
