"""
Strongly connected components via Kosaraju's algorithm.

Two DFS passes in O(|V| + |E|):
1. DFS over the digraph, collecting vertices by decreasing finish time.
2. DFS over the reverse digraph, starting roots in that order. Every tree
   of the second pass is exactly one strongly connected component.

The condensation (component graph) has one vertex per component and one
arc per pair of components joined by at least one arc of the digraph.
"""

import logging
from collections import deque
from typing import List, Set

import numpy as np

from .errors import DuplicateEdgeError
from .graph import DirectedGraph, reverse_digraph
from .traversal import Color, dfs_visit, new_color_state

logger = logging.getLogger(__name__)


class StronglyConnectedComponents:
    """
    Partition of a digraph into strongly connected components.

    Component ids are issued in the order the second pass discovers the
    components, in [0, num_components()).
    """

    def __init__(self, graph: DirectedGraph):
        self.graph = graph
        n = graph.num_vertices()
        self._id = np.full(n, -1, dtype=np.int64)
        self._components: List[Set[int]] = []

        # Pass 1: decreasing finish order
        color = new_color_state(n)
        finish_order = deque()
        for v in range(n):
            if color[v] == Color.WHITE:
                dfs_visit(graph, v, color, on_finish=finish_order.appendleft)

        # Pass 2: one DFS tree of the reverse graph per component
        reverse = reverse_digraph(graph)
        color = new_color_state(n)
        for v in finish_order:
            if color[v] == Color.WHITE:
                members: Set[int] = set()
                dfs_visit(reverse, v, color, on_discover=members.add)
                cid = len(self._components)
                for u in members:
                    self._id[u] = cid
                self._components.append(members)

        self._component_graph = self._build_component_graph()

        logger.debug("Kosaraju: %d vertices, %d arcs, %d components, %d condensation arcs",
                     n, graph.num_edges(), len(self._components),
                     self._component_graph.num_edges())

    def _build_component_graph(self) -> DirectedGraph:
        condensation = DirectedGraph(len(self._components))
        for arc in self.graph.arcs():
            cu = int(self._id[arc.source])
            cv = int(self._id[arc.sink])
            if cu == cv:
                continue
            try:
                condensation.add_arc(cu, cv)
            except DuplicateEdgeError:
                # parallel cross-component arcs collapse into one
                continue
        return condensation

    def strongly_connected(self, u: int, v: int) -> bool:
        self.graph.check_vertex(u)
        self.graph.check_vertex(v)
        return bool(self._id[u] == self._id[v])

    def num_components(self) -> int:
        return len(self._components)

    def component_id(self, v: int) -> int:
        self.graph.check_vertex(v)
        return int(self._id[v])

    def components(self) -> List[Set[int]]:
        """Vertex set of each component, indexed by component id."""
        return [set(c) for c in self._components]

    def component_graph(self) -> DirectedGraph:
        """
        Condensation of the digraph.

        An arc (p, q) means some arc (u, v) of the digraph has
        component_id(u) == p and component_id(v) == q, with p != q.
        """
        return DirectedGraph.from_arcs(self._component_graph.num_vertices(),
                                       ((a.source, a.sink) for a in self._component_graph.arcs()))

    def is_strongly_connected(self) -> bool:
        """True when the whole digraph is one component."""
        return len(self._components) == 1
