"""
Distance metrics of connected undirected graphs, from one BFS per vertex.
"""

import logging

import numpy as np

from .errors import NotConnectedError
from .graph import UndirectedGraph
from .traversal import bfs_visit, new_color_state

logger = logging.getLogger(__name__)


class GraphMetrics:
    """
    Eccentricities, diameter, radius, center and Wiener index.

    The Wiener index is the sum of the distances over all unordered pairs
    of vertices. O(|V| (|V| + |E|)).

    Raises:
        NotConnectedError: the graph is empty or not connected
    """

    def __init__(self, graph: UndirectedGraph):
        self.graph = graph
        n = graph.num_vertices()
        if n == 0:
            raise NotConnectedError("The graph has no vertices")

        self._eccentricity = np.zeros(n, dtype=np.int64)
        self._wiener = 0

        for u in range(n):
            color = new_color_state(n)
            dist = np.full(n, -1, dtype=np.int64)
            pred = np.full(n, -1, dtype=np.int64)
            self._eccentricity[u] = bfs_visit(graph, u, color, dist, pred)

            if u == 0 and (dist < 0).any():
                raise NotConnectedError("The graph is not connected")

            self._wiener += int(dist[u + 1:].sum())

        self._diameter = int(self._eccentricity.max())
        self._radius = int(self._eccentricity.min())
        self._center = int(self._eccentricity.argmin())

        logger.debug("Metrics: diameter=%d radius=%d center=%d wiener=%d",
                     self._diameter, self._radius, self._center, self._wiener)

    def eccentricity(self, v: int) -> int:
        self.graph.check_vertex(v)
        return int(self._eccentricity[v])

    def diameter(self) -> int:
        return self._diameter

    def radius(self) -> int:
        return self._radius

    def center(self) -> int:
        """A vertex of minimum eccentricity (the lowest-numbered one)."""
        return self._center

    def wiener_index(self) -> int:
        return self._wiener
