"""
Exceptions raised by grafolib.

Every error is a ValueError raised for bad input.
"""


class GraphError(ValueError):
    """Base class for every grafolib error."""


class VertexError(GraphError):
    """A vertex index lies outside [0, n)."""

    def __init__(self, vertex: int, num_vertices: int):
        self.vertex = vertex
        self.num_vertices = num_vertices
        super().__init__(f"Vertex {vertex} does not belong to the graph (valid range [0, {num_vertices}))")


class EdgeError(GraphError):
    """An edge or arc is malformed."""


class DuplicateEdgeError(EdgeError):
    """The edge or arc is already in the graph."""


class NotAcyclicError(GraphError):
    """The digraph has a cycle where a DAG is required."""


class NotStronglyConnectedError(GraphError):
    """The digraph is not strongly connected."""


class NotConnectedError(GraphError):
    """The undirected graph is not connected."""


class NoCycleError(GraphError):
    """A cycle was requested from an acyclic digraph."""


class NoEulerianCircuitError(GraphError):
    """An Eulerian circuit was requested from a graph that has none."""


class UnsatisfiableError(GraphError):
    """An assignment was requested for an unsatisfiable formula."""


class GraphFormatError(GraphError):
    """The textual description of a graph is malformed."""


class FormulaFormatError(GraphError):
    """The textual description of a 2-CNF formula is malformed."""


class NotBipartiteError(GraphError):
    """A two-colouring was requested from a graph that has none."""
