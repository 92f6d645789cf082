import math

import pytest

from algokit.graphs import Edge, dijkstra, kruskal_mst, prim_mst

DIJKSTRA_GRAPH = [
    [0, 4, 0, 0, 0, 0, 0, 8, 0],
    [4, 0, 8, 0, 0, 0, 0, 11, 0],
    [0, 8, 0, 7, 0, 4, 0, 0, 2],
    [0, 0, 7, 0, 9, 14, 0, 0, 0],
    [0, 0, 0, 9, 0, 10, 0, 0, 0],
    [0, 0, 4, 14, 10, 0, 2, 0, 0],
    [0, 0, 0, 0, 0, 2, 0, 1, 6],
    [8, 11, 0, 0, 0, 0, 1, 0, 7],
    [0, 0, 2, 0, 0, 0, 6, 7, 0],
]

PRIM_GRAPH = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]

KRUSKAL_EDGES = [Edge(0, 1, 10), Edge(0, 2, 6), Edge(0, 3, 5), Edge(1, 3, 15), Edge(2, 3, 4)]


def _matrix_edges(graph):
    return [
        Edge(u, v, w)
        for u, row in enumerate(graph)
        for v, w in enumerate(row)
        if w and u < v
    ]


def test_dijkstra_source_example():
    assert dijkstra(DIJKSTRA_GRAPH, 0) == [0, 4, 12, 19, 21, 11, 9, 8, 14]


@pytest.mark.parametrize("source", range(9))
def test_dijkstra_distances_are_consistent(source):
    dist = dijkstra(DIJKSTRA_GRAPH, source)
    assert dist[source] == 0
    for edge in _matrix_edges(DIJKSTRA_GRAPH):
        assert dist[edge.v] <= dist[edge.u] + edge.weight
        assert dist[edge.u] <= dist[edge.v] + edge.weight
    for v, d in enumerate(dist):
        if v != source:
            assert any(
                w and dist[u] + w == d for u, w in enumerate(DIJKSTRA_GRAPH[v])
            )


def test_dijkstra_unreachable_is_infinite():
    graph = [[0, 3, 0], [3, 0, 0], [0, 0, 0]]
    dist = dijkstra(graph, 0)
    assert dist[:2] == [0, 3]
    assert math.isinf(dist[2])


def test_dijkstra_rejects_bad_source():
    with pytest.raises(ValueError):
        dijkstra(DIJKSTRA_GRAPH, 9)


def test_dijkstra_rejects_non_square():
    with pytest.raises(ValueError):
        dijkstra([[0, 1], [1]], 0)


def test_prim_source_example():
    assert [(e.u, e.v, e.weight) for e in prim_mst(PRIM_GRAPH)] == [
        (0, 1, 2),
        (1, 2, 3),
        (0, 3, 6),
        (1, 4, 5),
    ]


def test_prim_tree_spans_all_vertices():
    tree = prim_mst(DIJKSTRA_GRAPH)
    assert len(tree) == len(DIJKSTRA_GRAPH) - 1
    assert sorted(e.v for e in tree) == list(range(1, len(DIJKSTRA_GRAPH)))
    for e in tree:
        assert DIJKSTRA_GRAPH[e.u][e.v] == e.weight


def test_prim_rejects_disconnected_graph():
    with pytest.raises(ValueError):
        prim_mst([[0, 1, 0], [1, 0, 0], [0, 0, 0]])


def test_kruskal_source_example_cost():
    tree = kruskal_mst(KRUSKAL_EDGES, 4)
    assert sum(e.weight for e in tree) == 19
    assert len(tree) == 3


def test_kruskal_does_not_mutate_input():
    edges = list(KRUSKAL_EDGES)
    kruskal_mst(edges, 4)
    assert edges == KRUSKAL_EDGES


@pytest.mark.parametrize("graph", [PRIM_GRAPH, DIJKSTRA_GRAPH])
def test_kruskal_and_prim_agree_on_weight(graph):
    kruskal = kruskal_mst(_matrix_edges(graph), len(graph))
    prim = prim_mst(graph)
    assert sum(e.weight for e in kruskal) == sum(e.weight for e in prim)
    assert len(kruskal) == len(prim)


def test_kruskal_disconnected_gives_forest():
    tree = kruskal_mst([Edge(0, 1, 2), Edge(2, 3, 5)], 4)
    assert sorted((e.u, e.v) for e in tree) == [(0, 1), (2, 3)]


def test_kruskal_rejects_out_of_range_vertex():
    with pytest.raises(ValueError):
        kruskal_mst([Edge(0, 5, 1)], 3)