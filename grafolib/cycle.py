"""
Cycle detection in digraphs.
"""

import logging
from typing import List, Optional

import numpy as np

from .errors import NoCycleError
from .graph import DirectedGraph
from .traversal import NO_VERTEX, Color, dfs_visit, new_color_state

logger = logging.getLogger(__name__)


class DigraphCycle:
    """
    Finds one cycle of a digraph, if any, with a single DFS.

    The first back edge (u, v) found fixes the cycle: it starts at v,
    follows DFS tree edges down to u and closes with the arc u -> v.
    Once a cycle is found no further vertices are explored.
    """

    def __init__(self, graph: DirectedGraph):
        self.graph = graph
        n = graph.num_vertices()
        self._color = new_color_state(n)
        self._pred = np.full(n, NO_VERTEX, dtype=np.int64)
        self._start: Optional[int] = None
        self._end: Optional[int] = None

        for v in range(n):
            if self._start is not None:
                break
            if self._color[v] == Color.WHITE:
                dfs_visit(graph, v, self._color,
                          on_tree_edge=self._tree_edge,
                          on_back_edge=self._back_edge)

        if self._start is not None:
            logger.debug("Back edge %d -> %d closes a cycle", self._end, self._start)

    def _tree_edge(self, u: int, v: int):
        self._pred[v] = u

    def _back_edge(self, u: int, v: int) -> bool:
        self._start = v
        self._end = u
        return True

    def has_cycle(self) -> bool:
        return self._start is not None

    def cycle(self) -> List[int]:
        """
        Vertices of the cycle found, in arc order.

        The returned list [v0, ..., vk] has arcs v_i -> v_{i+1} and vk -> v0.

        Raises:
            NoCycleError: the digraph is acyclic
        """
        if self._start is None:
            raise NoCycleError("The digraph is acyclic")

        path = []
        u = self._end
        while u != self._start:
            path.append(u)
            u = int(self._pred[u])
        path.append(self._start)
        path.reverse()
        return path
