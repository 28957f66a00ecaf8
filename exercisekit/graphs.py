"""Minimum spanning trees: Kruskal, Prim and Boruvka."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

INF = math.inf


@dataclass(frozen=True)
class Edge:
    """A weighted, undirected edge between two vertices."""

    src: int
    dest: int
    weight: float


class Graph:
    """An undirected weighted graph stored as adjacency lists."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.num_vertices = num_vertices
        self._adjacency: list[deque[tuple[int, float]]] = [
            deque() for _ in range(num_vertices)
        ]

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise ValueError(f"vertex {vertex} is out of range")

    def add_edge(self, src: int, dest: int, weight: float) -> None:
        """Add an undirected edge; new edges go to the front of each list."""
        self._check_vertex(src)
        self._check_vertex(dest)
        self._adjacency[src].appendleft((dest, weight))
        self._adjacency[dest].appendleft((src, weight))

    def neighbours(self, vertex: int) -> Iterator[tuple[int, float]]:
        """Yield ``(vertex, weight)`` pairs adjacent to ``vertex``."""
        self._check_vertex(vertex)
        return iter(self._adjacency[vertex])


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, count: int) -> None:
        self._parent = list(range(count))
        self._rank = [0] * count

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; False if already joined."""
        xroot = self.find(x)
        yroot = self.find(y)
        if xroot == yroot:
            return False
        if self._rank[xroot] < self._rank[yroot]:
            self._parent[xroot] = yroot
        elif self._rank[xroot] > self._rank[yroot]:
            self._parent[yroot] = xroot
        else:
            self._parent[yroot] = xroot
            self._rank[xroot] += 1
        return True


def kruskal_mst(cost: Sequence[Sequence[float | None]]) -> list[Edge]:
    """MST from a square cost matrix; ``None`` or ``inf`` marks no edge.

    Edges are returned in the order they were chosen.
    """
    matrix = [list(row) for row in cost]
    count = len(matrix)
    if any(len(row) != count for row in matrix):
        raise ValueError("cost matrix must be square")
    sets = DisjointSet(count)
    tree: list[Edge] = []
    while len(tree) < count - 1:
        best: Edge | None = None
        for i, row in enumerate(matrix):
            for j, weight in enumerate(row):
                if weight is None:
                    continue
                limit = best.weight if best is not None else INF
                if sets.find(i) != sets.find(j) and weight < limit:
                    best = Edge(i, j, weight)
        if best is None:
            raise ValueError("graph is not connected")
        sets.union(best.src, best.dest)
        tree.append(best)
    return tree


class _IndexedMinHeap:
    """Binary min-heap over vertices that supports decreasing a key."""

    def __init__(self, keys: Sequence[float]) -> None:
        self._nodes = [[vertex, key] for vertex, key in enumerate(keys)]
        self._pos = list(range(len(keys)))
        self._size = len(keys)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, vertex: int) -> bool:
        return self._pos[vertex] < self._size

    def _swap(self, i: int, j: int) -> None:
        first, second = self._nodes[i], self._nodes[j]
        self._pos[first[0]], self._pos[second[0]] = j, i
        self._nodes[i], self._nodes[j] = second, first

    def _sift_down(self, idx: int) -> None:
        while True:
            smallest = idx
            for child in (2 * idx + 1, 2 * idx + 2):
                if child < self._size and self._nodes[child][1] < self._nodes[smallest][1]:
                    smallest = child
            if smallest == idx:
                return
            self._swap(idx, smallest)
            idx = smallest

    def extract_min(self) -> int:
        if not self._size:
            raise IndexError("extract from an empty heap")
        root = self._nodes[0]
        last_index = self._size - 1
        last = self._nodes[last_index]
        self._nodes[0], self._nodes[last_index] = last, root
        self._pos[root[0]] = last_index
        self._pos[last[0]] = 0
        self._size -= 1
        self._sift_down(0)
        return root[0]

    def decrease_key(self, vertex: int, key: float) -> None:
        i = self._pos[vertex]
        self._nodes[i][1] = key
        while i and self._nodes[i][1] < self._nodes[(i - 1) // 2][1]:
            parent = (i - 1) // 2
            self._swap(i, parent)
            i = parent


def prim_mst(graph: Graph) -> list[Edge]:
    """MST grown from vertex 0; one edge ``parent -> v`` per vertex ``v >= 1``."""
    count = graph.num_vertices
    if count == 0:
        return []
    key = [INF] * count
    parent = [-1] * count
    key[0] = 0
    heap = _IndexedMinHeap(key)
    while heap:
        u = heap.extract_min()
        for v, weight in graph.neighbours(u):
            if v in heap and weight < key[v]:
                key[v] = weight
                parent[v] = u
                heap.decrease_key(v, weight)
    tree = [Edge(parent[v], v, key[v]) for v in range(1, count)]
    if any(edge.src < 0 for edge in tree):
        raise ValueError("graph is not connected")
    return tree


def boruvka_mst(num_vertices: int, edges: Iterable[Edge]) -> list[Edge]:
    """MST by repeatedly adding each component's cheapest outgoing edge."""
    edge_list = list(edges)
    for edge in edge_list:
        if not (0 <= edge.src < num_vertices and 0 <= edge.dest < num_vertices):
            raise ValueError(f"edge {edge} has a vertex out of range")
    sets = DisjointSet(num_vertices)
    trees = num_vertices
    tree: list[Edge] = []
    while trees > 1:
        cheapest: list[Edge | None] = [None] * num_vertices
        for edge in edge_list:
            set1 = sets.find(edge.src)
            set2 = sets.find(edge.dest)
            if set1 == set2:
                continue
            for root in (set1, set2):
                current = cheapest[root]
                if current is None or current.weight > edge.weight:
                    cheapest[root] = edge
        if all(edge is None for edge in cheapest):
            raise ValueError("graph is not connected")
        for edge in cheapest:
            if edge is None:
                continue
            set1 = sets.find(edge.src)
            set2 = sets.find(edge.dest)
            if set1 == set2:
                continue
            tree.append(edge)
            sets.union(set1, set2)
            trees -= 1
    return tree


def main(argv: list[str] | None = None) -> int:
    """Run the three algorithms on their sample graphs."""
    cost = [
        [INF, 2, INF, 6, INF],
        [2, INF, 3, 8, 5],
        [INF, 3, INF, INF, 7],
        [6, 8, INF, INF, 9],
        [INF, 5, 7, 9, INF],
    ]
    kruskal = kruskal_mst(cost)
    for count, edge in enumerate(kruskal):
        print(f"Edge {count}:({edge.src}, {edge.dest}) cost:{edge.weight} ")
    print(f"\n Minimum cost= {sum(edge.weight for edge in kruskal)} ")

    graph = Graph(9)
    for src, dest, weight in (
        (0, 1, 4), (0, 7, 8), (1, 2, 8), (1, 7, 11), (2, 3, 7),
        (2, 8, 2), (2, 5, 4), (3, 4, 9), (3, 5, 14), (4, 5, 10),
        (5, 6, 2), (6, 7, 1), (6, 8, 6), (7, 8, 7),
    ):
        graph.add_edge(src, dest, weight)
    for edge in prim_mst(graph):
        print(f"{edge.src} - {edge.dest}")

    boruvka_edges = [
        Edge(0, 1, 10), Edge(0, 2, 6), Edge(0, 3, 5), Edge(1, 3, 15), Edge(2, 3, 4),
    ]
    boruvka = boruvka_mst(4, boruvka_edges)
    for edge in boruvka:
        print(f"Edge {edge.src}-{edge.dest} included in MST")
    print(f"Weight of MST is {sum(edge.weight for edge in boruvka)}")
    return 0