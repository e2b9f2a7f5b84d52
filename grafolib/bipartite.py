"""
Two-colourability (bipartiteness) of undirected graphs.
"""

import numpy as np

from .errors import NotBipartiteError
from .graph import UndirectedGraph
from .traversal import Color, dfs_visit, new_color_state


class TwoColoring:
    """
    Colours each DFS tree alternately, then checks every edge.

    The graph is two-colourable iff no edge joins two vertices of the same
    side under that colouring.
    """

    def __init__(self, graph: UndirectedGraph):
        self.graph = graph
        n = graph.num_vertices()
        self._side = np.zeros(n, dtype=np.int8)

        color = new_color_state(n)
        for v in range(n):
            if color[v] == Color.WHITE:
                dfs_visit(graph, v, color, on_tree_edge=self._tree_edge)

        self._bipartite = all(self._side[e.u] != self._side[e.v] for e in graph.edges())

    def _tree_edge(self, u: int, v: int):
        self._side[v] = 1 - self._side[u]

    def is_two_colorable(self) -> bool:
        return self._bipartite

    def side(self, v: int) -> int:
        """0 or 1: the side of v in a two-colouring."""
        self.graph.check_vertex(v)
        if not self._bipartite:
            raise NotBipartiteError("The graph is not two-colorable")
        return int(self._side[v])
