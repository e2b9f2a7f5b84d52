"""
Lowest common ancestors in a DAG.
"""

import logging

import numpy as np

from .errors import NotAcyclicError
from .graph import DirectedGraph
from .result import Outcome, attempt
from .topological import TopologicalOrder

logger = logging.getLogger(__name__)


class LowestCommonAncestor:
    """
    Precomputes the proper ancestors and depth of every vertex.

    Depth is the length of the longest path from a vertex of in-degree 0.
    The LCA of u and v is the deepest vertex that is a proper ancestor of
    both (ties go to the lowest vertex number), or -1 if there is none.
    lca(v, v) is therefore the deepest proper ancestor of v.

    Raises:
        NotAcyclicError: the digraph has a cycle
    """

    def __init__(self, graph: DirectedGraph):
        self.graph = graph
        n = graph.num_vertices()

        topo = TopologicalOrder(graph)
        if not topo.is_dag():
            raise NotAcyclicError("The digraph is not acyclic")

        # ancestors[v, a] is True when a is a proper ancestor of v
        self._ancestors = np.zeros((n, n), dtype=bool)
        self._depth = np.zeros(n, dtype=np.int64)

        for u in topo.order():
            for v, _ in graph.neighbors(u):
                self._ancestors[v] |= self._ancestors[u]
                self._ancestors[v, u] = True
                self._depth[v] = max(self._depth[v], self._depth[u] + 1)

        logger.debug("LCA tables built for %d vertices", n)

    def lca(self, u: int, v: int) -> int:
        self.graph.check_vertex(u)
        self.graph.check_vertex(v)

        common = np.flatnonzero(self._ancestors[u] & self._ancestors[v])
        if common.size == 0:
            return -1
        return int(common[np.argmax(self._depth[common])])

    def depth(self, v: int) -> int:
        self.graph.check_vertex(v)
        return int(self._depth[v])

    def is_ancestor(self, a: int, v: int) -> bool:
        """True if a is a proper ancestor of v."""
        self.graph.check_vertex(a)
        self.graph.check_vertex(v)
        return bool(self._ancestors[v, a])


def lowest_common_ancestors(graph: DirectedGraph) -> Outcome[LowestCommonAncestor]:
    """LCA tables for graph, or a failed Outcome if it has a cycle."""
    return attempt(lambda: LowestCommonAncestor(graph))
