"""
Eulerian circuits of digraphs.

A strongly connected digraph has an Eulerian circuit iff every vertex has
equal in-degree and out-degree. The circuit itself is built with
Hierholzer's algorithm over an explicit stack.
"""

import logging
from collections import deque
from typing import List

from .errors import NoEulerianCircuitError, NotStronglyConnectedError
from .graph import Arc, DirectedGraph
from .result import Outcome, attempt
from .scc import StronglyConnectedComponents

logger = logging.getLogger(__name__)


class EulerianCircuit:
    """
    Eulerian circuit of a strongly connected digraph.

    Raises:
        NotStronglyConnectedError: the digraph is not strongly connected
    """

    def __init__(self, graph: DirectedGraph):
        self.graph = graph
        n = graph.num_vertices()

        if n > 0 and not StronglyConnectedComponents(graph).is_strongly_connected():
            raise NotStronglyConnectedError("The digraph is not strongly connected")

        self._eulerian = all(graph.in_degree(v) == graph.out_degree(v) for v in range(n))
        self._circuit: List[Arc] = []

        if self._eulerian and graph.num_edges() > 0:
            self._circuit = self._hierholzer()

        logger.debug("Eulerian check on %d vertices, %d arcs: %s",
                     n, graph.num_edges(), self._eulerian)

    def _hierholzer(self) -> List[Arc]:
        n = self.graph.num_vertices()
        adj = [self.graph.adjacent(v) for v in range(n)]
        next_arc = [0] * n

        start = self.graph.arcs()[0].source
        stack = [(start, None)]
        circuit = deque()

        while stack:
            v, arc_in = stack[-1]
            if next_arc[v] < len(adj[v]):
                arc = adj[v][next_arc[v]]
                next_arc[v] += 1
                stack.append((arc.sink, arc))
            else:
                stack.pop()
                if arc_in is not None:
                    circuit.appendleft(arc_in)

        return list(circuit)

    def has_eulerian_circuit(self) -> bool:
        return self._eulerian

    def circuit(self) -> List[Arc]:
        """
        Arcs of the circuit in traversal order; each arc's sink is the next
        arc's source and the last sink is the first source.

        Raises:
            NoEulerianCircuitError: some vertex has in-degree != out-degree
        """
        if not self._eulerian:
            raise NoEulerianCircuitError("The digraph has no Eulerian circuit")
        return list(self._circuit)


def find_eulerian_circuit(graph: DirectedGraph) -> Outcome[List[Arc]]:
    """Eulerian circuit of graph, or a failed Outcome saying why there is none."""
    return attempt(lambda: EulerianCircuit(graph).circuit())
