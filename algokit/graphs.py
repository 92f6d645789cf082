"""Shortest paths and minimum spanning trees on weighted undirected graphs."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

AdjacencyMatrix = Sequence[Sequence[int]]


@dataclass(frozen=True)
class Edge:
    """A weighted edge between vertices ``u`` and ``v``."""

    u: int
    v: int
    weight: int


def _check_square(graph: AdjacencyMatrix) -> int:
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    return size


def dijkstra(graph: AdjacencyMatrix, source: int) -> list[float]:
    """Return the shortest distance from ``source`` to every vertex.

    ``graph`` is an adjacency matrix in which 0 means no edge. Unreachable
    vertices get ``math.inf``.
    """
    size = _check_square(graph)
    if not 0 <= source < size:
        raise ValueError(f"source {source} is not a vertex")
    dist: list[float] = [math.inf] * size
    dist[source] = 0
    done = [False] * size
    queue = [(0, source)]
    while queue:
        d, u = heapq.heappop(queue)
        if done[u]:
            continue
        done[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not done[v] and d + weight < dist[v]:
                dist[v] = d + weight
                heapq.heappush(queue, (dist[v], v))
    return dist


def prim_mst(graph: AdjacencyMatrix) -> list[Edge]:
    """Return the minimum spanning tree edges grown from vertex 0.

    Each edge is (parent, vertex, weight), listed by vertex from 1 upwards.
    Raises ``ValueError`` if the graph is not connected.
    """
    size = _check_square(graph)
    if size == 0:
        return []
    key: list[float] = [math.inf] * size
    parent = [-1] * size
    visited = [False] * size
    key[0] = 0
    queue = [(0, 0)]
    while queue:
        _, u = heapq.heappop(queue)
        if visited[u]:
            continue
        visited[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not visited[v] and weight < key[v]:
                key[v] = weight
                parent[v] = u
                heapq.heappush(queue, (weight, v))
    if not all(visited):
        raise ValueError("graph is not connected")
    return [Edge(parent[v], v, graph[v][parent[v]]) for v in range(1, size)]


def _find(parent: list[int], u: int) -> int:
    root = u
    while parent[root] != root:
        root = parent[root]
    while parent[u] != root:
        parent[u], u = root, parent[u]
    return root


def kruskal_mst(edges: Iterable[Edge], vertex_count: int) -> list[Edge]:
    """Return a minimum spanning forest, taking edges in order of weight.

    Stops once ``vertex_count - 1`` edges are chosen or the edges run out.
    """
    edges = list(edges)
    for edge in edges:
        if not (0 <= edge.u < vertex_count and 0 <= edge.v < vertex_count):
            raise ValueError(f"edge {edge} refers to a vertex outside the graph")
    parent = list(range(vertex_count))
    tree: list[Edge] = []
    for edge in sorted(edges, key=lambda e: e.weight):
        if len(tree) >= vertex_count - 1:
            break
        root_u, root_v = _find(parent, edge.u), _find(parent, edge.v)
        if root_u != root_v:
            parent[root_u] = root_v
            tree.append(edge)
    return tree