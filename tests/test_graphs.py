import math

import pytest

from exercisekit.graphs import (
    DisjointSet,
    Edge,
    Graph,
    boruvka_mst,
    kruskal_mst,
    main,
    prim_mst,
)

INF = math.inf

KRUSKAL_COST = [
    [INF, 2, INF, 6, INF],
    [2, INF, 3, 8, 5],
    [INF, 3, INF, INF, 7],
    [6, 8, INF, INF, 9],
    [INF, 5, 7, 9, INF],
]

PRIM_EDGES = [
    (0, 1, 4), (0, 7, 8), (1, 2, 8), (1, 7, 11), (2, 3, 7),
    (2, 8, 2), (2, 5, 4), (3, 4, 9), (3, 5, 14), (4, 5, 10),
    (5, 6, 2), (6, 7, 1), (6, 8, 6), (7, 8, 7),
]

BORUVKA_EDGES = [
    Edge(0, 1, 10), Edge(0, 2, 6), Edge(0, 3, 5), Edge(1, 3, 15), Edge(2, 3, 4),
]


def _build_prim_graph():
    graph = Graph(9)
    for src, dest, weight in PRIM_EDGES:
        graph.add_edge(src, dest, weight)
    return graph


def _spans(count, tree):
    sets = DisjointSet(count)
    for edge in tree:
        sets.union(edge.src, edge.dest)
    return len({sets.find(v) for v in range(count)}) == 1


def _weights(edges):
    return {frozenset((s, d)): w for s, d, w in edges}


def test_kruskal_source_graph_total():
    tree = kruskal_mst(KRUSKAL_COST)
    assert sum(e.weight for e in tree) == 16


def test_kruskal_tree_shape():
    tree = kruskal_mst(KRUSKAL_COST)
    assert len(tree) == len(KRUSKAL_COST) - 1
    assert _spans(len(KRUSKAL_COST), tree)
    for edge in tree:
        assert KRUSKAL_COST[edge.src][edge.dest] == edge.weight


def test_kruskal_accepts_none_for_missing_edges():
    with_none = [[None if w == INF else w for w in row] for row in KRUSKAL_COST]
    assert kruskal_mst(with_none) == kruskal_mst(KRUSKAL_COST)


def test_kruskal_disconnected_raises():
    cost = [[INF, 1, INF], [1, INF, INF], [INF, INF, INF]]
    with pytest.raises(ValueError):
        kruskal_mst(cost)


def test_kruskal_non_square_raises():
    with pytest.raises(ValueError):
        kruskal_mst([[INF, 1], [1]])


def test_prim_source_graph_total():
    tree = prim_mst(_build_prim_graph())
    assert sum(e.weight for e in tree) == 37


def test_prim_tree_shape():
    tree = prim_mst(_build_prim_graph())
    weights = _weights(PRIM_EDGES)
    assert [e.dest for e in tree] == list(range(1, 9))
    assert _spans(9, tree)
    for edge in tree:
        assert weights[frozenset((edge.src, edge.dest))] == edge.weight


def test_prim_disconnected_raises():
    graph = Graph(3)
    graph.add_edge(0, 1, 5)
    with pytest.raises(ValueError):
        prim_mst(graph)


def test_prim_empty_graph():
    assert prim_mst(Graph(0)) == []


def test_graph_rejects_bad_vertex():
    graph = Graph(2)
    with pytest.raises(ValueError):
        graph.add_edge(0, 2, 1)


def test_graph_neighbours_newest_first():
    graph = Graph(3)
    graph.add_edge(0, 1, 4)
    graph.add_edge(0, 2, 9)
    assert list(graph.neighbours(0)) == [(2, 9), (1, 4)]


def test_boruvka_source_graph_total():
    tree = boruvka_mst(4, BORUVKA_EDGES)
    assert sum(e.weight for e in tree) == 19


def test_boruvka_tree_shape():
    tree = boruvka_mst(4, BORUVKA_EDGES)
    assert len(tree) == 3
    assert _spans(4, tree)
    assert set(tree) <= set(BORUVKA_EDGES)


def test_boruvka_disconnected_raises():
    with pytest.raises(ValueError):
        boruvka_mst(3, [Edge(0, 1, 1)])


def test_boruvka_bad_vertex_raises():
    with pytest.raises(ValueError):
        boruvka_mst(2, [Edge(0, 5, 1)])


def test_algorithms_agree_on_prim_graph():
    weights = _weights(PRIM_EDGES)
    cost = [[INF] * 9 for _ in range(9)]
    for pair, w in weights.items():
        a, b = tuple(pair)
        cost[a][b] = cost[b][a] = w
    edges = [Edge(s, d, w) for s, d, w in PRIM_EDGES]
    prim_total = sum(e.weight for e in prim_mst(_build_prim_graph()))
    assert sum(e.weight for e in kruskal_mst(cost)) == prim_total
    assert sum(e.weight for e in boruvka_mst(9, edges)) == prim_total


def test_algorithms_agree_on_boruvka_graph():
    graph = Graph(4)
    cost = [[INF] * 4 for _ in range(4)]
    for e in BORUVKA_EDGES:
        graph.add_edge(e.src, e.dest, e.weight)
        cost[e.src][e.dest] = cost[e.dest][e.src] = e.weight
    total = sum(e.weight for e in boruvka_mst(4, BORUVKA_EDGES))
    assert sum(e.weight for e in prim_mst(graph)) == total
    assert sum(e.weight for e in kruskal_mst(cost)) == total


def test_disjoint_set_union_and_find():
    sets = DisjointSet(4)
    assert sets.find(2) == 2
    assert sets.union(0, 1) is True
    assert sets.find(0) == sets.find(1)
    assert sets.union(1, 0) is False
    assert sets.union(2, 3) is True
    assert sets.union(0, 3) is True
    assert len({sets.find(v) for v in range(4)}) == 1


def test_main_prints_results(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Minimum cost= 16" in out
    assert out.count("included in MST") == 3