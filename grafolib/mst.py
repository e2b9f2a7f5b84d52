"""
Minimum spanning trees of weighted undirected graphs.
"""

import heapq
import logging
from typing import List

import numpy as np

from .disjoint_set import DisjointSet
from .errors import NotConnectedError
from .graph import Edge, UndirectedGraph

logger = logging.getLogger(__name__)


class KruskalMST:
    """
    Kruskal's algorithm: scan edges by increasing weight, keep each edge
    joining two different trees. On a disconnected graph the result is a
    minimum spanning forest.
    """

    def __init__(self, graph: UndirectedGraph):
        self.graph = graph
        sets = DisjointSet(graph.num_vertices())
        self._edges: List[Edge] = []

        for edge in sorted(graph.edges(), key=lambda e: e.weight):
            if sets.union(edge.u, edge.v):
                self._edges.append(edge)

        self._weight = sum(e.weight for e in self._edges)
        logger.debug("Kruskal: %d edges, weight %s", len(self._edges), self._weight)

    def edges(self) -> List[Edge]:
        return list(self._edges)

    def weight(self) -> float:
        return self._weight


class PrimMST:
    """
    Prim's algorithm from vertex 0 with a binary heap.

    Stale heap entries are skipped on extraction instead of decreasing
    keys in place.

    Raises:
        NotConnectedError: some vertex is unreachable from vertex 0
    """

    def __init__(self, graph: UndirectedGraph):
        self.graph = graph
        n = graph.num_vertices()
        self._edges: List[Edge] = []

        key = np.full(n, np.inf)
        pred = np.full(n, -1, dtype=np.int64)
        in_tree = np.zeros(n, dtype=bool)

        if n > 0:
            key[0] = 0.0
            heap = [(0.0, 0)]
            while heap:
                k, u = heapq.heappop(heap)
                if in_tree[u] or k > key[u]:
                    continue
                in_tree[u] = True
                for v, w in graph.neighbors(u):
                    if not in_tree[v] and w < key[v]:
                        key[v] = w
                        pred[v] = u
                        heapq.heappush(heap, (w, v))

            if not in_tree.all():
                raise NotConnectedError("Prim's algorithm needs a connected graph")

            for v in range(1, n):
                self._edges.append(Edge(int(pred[v]), v, float(key[v])))

        self._weight = sum(e.weight for e in self._edges)
        logger.debug("Prim: %d edges, weight %s", len(self._edges), self._weight)

    def edges(self) -> List[Edge]:
        return list(self._edges)

    def weight(self) -> float:
        return self._weight
