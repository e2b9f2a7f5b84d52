"""
Connected components of undirected graphs.

Two interchangeable implementations: one DFS pass, or one union per edge
on a DisjointSet. Component ids are issued in increasing order of the
smallest vertex of each component in both.
"""

import logging
from typing import List

import numpy as np

from .disjoint_set import DisjointSet
from .errors import GraphError
from .graph import UndirectedGraph
from .traversal import Color, dfs_visit, new_color_state

logger = logging.getLogger(__name__)


class _ComponentQueries:
    """Accessors shared by both implementations."""

    graph: UndirectedGraph
    _id: np.ndarray
    _sizes: List[int]

    def same_component(self, u: int, v: int) -> bool:
        self.graph.check_vertex(u)
        self.graph.check_vertex(v)
        return bool(self._id[u] == self._id[v])

    def num_components(self) -> int:
        return len(self._sizes)

    def component_id(self, v: int) -> int:
        self.graph.check_vertex(v)
        return int(self._id[v])

    def component_size(self, cid: int) -> int:
        if cid < 0 or cid >= len(self._sizes):
            raise GraphError(f"Component id {cid} does not exist")
        return self._sizes[cid]


class ConnectedComponentsDFS(_ComponentQueries):
    """Components found as the trees of a full DFS."""

    def __init__(self, graph: UndirectedGraph):
        self.graph = graph
        n = graph.num_vertices()
        self._id = np.full(n, -1, dtype=np.int64)
        self._sizes: List[int] = []

        color = new_color_state(n)
        for v in range(n):
            if color[v] == Color.WHITE:
                self._sizes.append(0)
                dfs_visit(graph, v, color, on_discover=self._claim)

        logger.debug("DFS found %d connected components", len(self._sizes))

    def _claim(self, u: int):
        self._id[u] = len(self._sizes) - 1
        self._sizes[-1] += 1


class ConnectedComponentsDS(_ComponentQueries):
    """Components found by merging the endpoints of every edge."""

    def __init__(self, graph: UndirectedGraph):
        self.graph = graph
        n = graph.num_vertices()
        self._sets = DisjointSet(n)

        for edge in graph.edges():
            self._sets.union(edge.u, edge.v)

        self._id = np.full(n, -1, dtype=np.int64)
        self._sizes: List[int] = []
        rep_id = {}
        for v in range(n):
            rep = self._sets.find(v)
            if rep not in rep_id:
                rep_id[rep] = len(self._sizes)
                self._sizes.append(self._sets.set_size(rep))
            self._id[v] = rep_id[rep]

        logger.debug("Disjoint sets found %d connected components", len(self._sizes))
