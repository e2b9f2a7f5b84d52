"""
Topological sort by reversed DFS finish order.
"""

import logging
from collections import deque
from typing import List

from .errors import NotAcyclicError
from .graph import DirectedGraph
from .result import Outcome, attempt
from .traversal import Color, dfs_visit, new_color_state

logger = logging.getLogger(__name__)


class TopologicalOrder:
    """
    Topological order of a digraph.

    Each vertex is prepended to the order when it finishes. A back edge
    marks the digraph as cyclic and stops the search; the order is then
    unavailable.
    """

    def __init__(self, graph: DirectedGraph):
        self.graph = graph
        self._color = new_color_state(graph.num_vertices())
        self._order = deque()
        self._has_cycle = False

        for v in range(graph.num_vertices()):
            if self._has_cycle:
                break
            if self._color[v] == Color.WHITE:
                dfs_visit(graph, v, self._color,
                          on_finish=self._order.appendleft,
                          on_back_edge=self._back_edge)

        logger.debug("Topological sort over %d vertices, acyclic=%s",
                     graph.num_vertices(), not self._has_cycle)

    def _back_edge(self, u: int, v: int) -> bool:
        self._has_cycle = True
        return True

    def is_dag(self) -> bool:
        return not self._has_cycle

    def order(self) -> List[int]:
        """
        Vertices such that every arc (u, v) has u before v.

        Raises:
            NotAcyclicError: the digraph has a cycle
        """
        if self._has_cycle:
            raise NotAcyclicError("The digraph is not a DAG")
        return list(self._order)


def topological_sort(graph: DirectedGraph) -> Outcome[List[int]]:
    """Topological order of graph, or a failed Outcome if it has a cycle."""
    return attempt(lambda: TopologicalOrder(graph).order())
