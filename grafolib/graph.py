"""
Graph ADT for grafolib.

Vertices are dense integers in [0, n). Two concrete graph types share the
same read-only capability (the Graph protocol): UndirectedGraph stores
Edge objects in both endpoint lists, DirectedGraph stores Arc objects in
the source list and counts in-degrees per sink.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Protocol, Set, Tuple

import networkx as nx
import numpy as np

from .errors import DuplicateEdgeError, EdgeError, GraphFormatError, VertexError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Edge:
    """An undirected edge {u, v} with an optional weight."""
    u: int
    v: int
    weight: float = 0.0

    def __post_init__(self):
        if self.u < 0 or self.v < 0:
            raise EdgeError(f"Edge vertices must be non-negative, got ({self.u}, {self.v})")
        if self.u == self.v:
            raise EdgeError(f"Undirected graphs do not admit loops, got ({self.u}, {self.v})")

    def any_vertex(self) -> int:
        return self.u

    def other(self, w: int) -> int:
        """Return the endpoint that is not w."""
        if w == self.u:
            return self.v
        if w == self.v:
            return self.u
        raise EdgeError(f"Vertex {w} is not an endpoint of {self}")

    def key(self) -> Tuple[int, int]:
        return (self.u, self.v) if self.u < self.v else (self.v, self.u)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def __repr__(self) -> str:
        return f"(<{self.u}, {self.v}>, {self.weight})"


@dataclass(frozen=True, eq=False)
class Arc:
    """A directed arc source -> sink with an optional weight."""
    source: int
    sink: int
    weight: float = 0.0

    def __post_init__(self):
        if self.source < 0 or self.sink < 0:
            raise EdgeError(f"Arc vertices must be non-negative, got ({self.source}, {self.sink})")

    def other(self, w: int) -> int:
        if w == self.source:
            return self.sink
        if w == self.sink:
            return self.source
        raise EdgeError(f"Vertex {w} is not an endpoint of {self}")

    def key(self) -> Tuple[int, int]:
        return (self.source, self.sink)

    def reversed(self) -> 'Arc':
        return Arc(self.sink, self.source, self.weight)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Arc):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def __repr__(self) -> str:
        return f"(<{self.source}, {self.sink}>, {self.weight})"


class Graph(Protocol):
    """Read-only capability shared by directed and undirected graphs."""

    def num_vertices(self) -> int: ...

    def num_edges(self) -> int: ...

    def degree(self, v: int) -> int: ...

    def neighbors(self, v: int) -> Iterator[Tuple[int, float]]: ...

    def check_vertex(self, v: int) -> None: ...


def _parse_int(token: str, line_no: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise GraphFormatError(f"Line {line_no}: expected an integer, got {token!r}") from None


def _parse_graph_lines(lines: Iterable[str], weighted: bool) -> Tuple[int, List[Tuple[int, int, float]]]:
    """
    Parse the textual graph description.

    Format:
        line 1: number of vertices
        line 2: number of edges m
        next m lines: "<u> <v>[ <weight>]"

    Blank lines are skipped. Returns (n, [(u, v, weight), ...]).
    """
    numbered = ((i, line.strip()) for i, line in enumerate(lines, start=1))
    content = ((i, line) for i, line in numbered if line)

    header = []
    for line_no, line in content:
        header.append(_parse_int(line, line_no))
        if len(header) == 2:
            break
    if len(header) < 2:
        raise GraphFormatError("Missing vertex or edge count")

    n, m = header
    if n < 0 or m < 0:
        raise GraphFormatError(f"Counts must be non-negative, got n={n}, m={m}")

    edges = []
    for line_no, line in content:
        if len(edges) == m:
            break
        parts = line.split()
        if len(parts) < (3 if weighted else 2):
            raise GraphFormatError(f"Line {line_no}: expected {'3' if weighted else '2'} fields, got {line!r}")
        u = _parse_int(parts[0], line_no)
        v = _parse_int(parts[1], line_no)
        weight = 0.0
        if weighted:
            try:
                weight = float(parts[2])
            except ValueError:
                raise GraphFormatError(f"Line {line_no}: invalid weight {parts[2]!r}") from None
        edges.append((u, v, weight))

    if len(edges) < m:
        raise GraphFormatError(f"Expected {m} edges, found {len(edges)}")
    return n, edges


class UndirectedGraph:
    """
    Undirected graph stored as adjacency lists.

    Each edge is inserted in the lists of both endpoints. Loops and
    parallel edges are rejected.
    """

    def __init__(self, num_vertices: int):
        if num_vertices < 0:
            raise ValueError(f"Number of vertices must be non-negative, got {num_vertices}")
        self._n = num_vertices
        self._adj: List[List[Edge]] = [[] for _ in range(num_vertices)]
        self._keys: Set[Tuple[int, int]] = set()
        self._num_edges = 0

    @classmethod
    def from_edges(cls, num_vertices: int, edges: Iterable[Tuple]) -> 'UndirectedGraph':
        """Build from (u, v) or (u, v, weight) tuples."""
        g = cls(num_vertices)
        for e in edges:
            g.add_edge(*e)
        return g

    @classmethod
    def from_string(cls, text: str, weighted: bool = False) -> 'UndirectedGraph':
        n, edges = _parse_graph_lines(text.splitlines(), weighted)
        return cls.from_edges(n, edges)

    @classmethod
    def from_file(cls, filepath: str, weighted: bool = False) -> 'UndirectedGraph':
        with open(filepath, 'r') as f:
            n, edges = _parse_graph_lines(f, weighted)
        logger.debug("Loaded undirected graph from %s: %d vertices, %d edges", filepath, n, len(edges))
        return cls.from_edges(n, edges)

    def add_edge(self, u: int, v: int, weight: float = 0.0) -> Edge:
        edge = Edge(u, v, weight)
        self.check_vertex(u)
        self.check_vertex(v)
        if edge.key() in self._keys:
            raise DuplicateEdgeError(f"Edge {edge} is already in the graph")

        self._adj[u].append(edge)
        self._adj[v].append(edge)
        self._keys.add(edge.key())
        self._num_edges += 1
        return edge

    def has_edge(self, u: int, v: int) -> bool:
        return ((u, v) if u < v else (v, u)) in self._keys

    def num_vertices(self) -> int:
        return self._n

    def num_edges(self) -> int:
        return self._num_edges

    def degree(self, v: int) -> int:
        self.check_vertex(v)
        return len(self._adj[v])

    def adjacent(self, v: int) -> List[Edge]:
        self.check_vertex(v)
        return list(self._adj[v])

    def neighbors(self, v: int) -> Iterator[Tuple[int, float]]:
        self.check_vertex(v)
        for edge in self._adj[v]:
            yield edge.other(v), edge.weight

    def edges(self) -> List[Edge]:
        """All edges, each reported once."""
        seen: Set[Tuple[int, int]] = set()
        result = []
        for adj in self._adj:
            for edge in adj:
                if edge.key() not in seen:
                    seen.add(edge.key())
                    result.append(edge)
        return result

    def check_vertex(self, v: int) -> None:
        if v < 0 or v >= self._n:
            raise VertexError(v, self._n)

    def to_networkx(self) -> nx.Graph:
        g = nx.Graph()
        g.add_nodes_from(range(self._n))
        g.add_weighted_edges_from((e.u, e.v, e.weight) for e in self.edges())
        return g

    def __str__(self) -> str:
        rows = []
        for i, adj in enumerate(self._adj):
            rows.append(f"{i:4d} | " + (f"--> {adj}" if adj else " "))
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"UndirectedGraph(vertices={self._n}, edges={self._num_edges})"


class DirectedGraph:
    """
    Directed graph stored as adjacency lists of outgoing arcs.

    Out-degree is the length of a vertex list; in-degree is counted on
    insertion. Parallel arcs are rejected, loops are accepted.
    """

    def __init__(self, num_vertices: int):
        if num_vertices < 0:
            raise ValueError(f"Number of vertices must be non-negative, got {num_vertices}")
        self._n = num_vertices
        self._adj: List[List[Arc]] = [[] for _ in range(num_vertices)]
        self._keys: Set[Tuple[int, int]] = set()
        self._in_degree = np.zeros(num_vertices, dtype=np.int64)
        self._num_arcs = 0

    @classmethod
    def from_arcs(cls, num_vertices: int, arcs: Iterable[Tuple]) -> 'DirectedGraph':
        """Build from (source, sink) or (source, sink, weight) tuples."""
        g = cls(num_vertices)
        for a in arcs:
            g.add_arc(*a)
        return g

    @classmethod
    def from_string(cls, text: str, weighted: bool = False) -> 'DirectedGraph':
        n, arcs = _parse_graph_lines(text.splitlines(), weighted)
        return cls.from_arcs(n, arcs)

    @classmethod
    def from_file(cls, filepath: str, weighted: bool = False) -> 'DirectedGraph':
        with open(filepath, 'r') as f:
            n, arcs = _parse_graph_lines(f, weighted)
        logger.debug("Loaded digraph from %s: %d vertices, %d arcs", filepath, n, len(arcs))
        return cls.from_arcs(n, arcs)

    def add_arc(self, source: int, sink: int, weight: float = 0.0) -> Arc:
        arc = Arc(source, sink, weight)
        self.check_vertex(source)
        self.check_vertex(sink)
        if arc.key() in self._keys:
            raise DuplicateEdgeError(f"Arc {arc} is already in the graph")

        self._adj[source].append(arc)
        self._keys.add(arc.key())
        self._in_degree[sink] += 1
        self._num_arcs += 1
        return arc

    def has_arc(self, source: int, sink: int) -> bool:
        return (source, sink) in self._keys

    def num_vertices(self) -> int:
        return self._n

    def num_edges(self) -> int:
        return self._num_arcs

    def degree(self, v: int) -> int:
        return self.in_degree(v) + self.out_degree(v)

    def in_degree(self, v: int) -> int:
        self.check_vertex(v)
        return int(self._in_degree[v])

    def out_degree(self, v: int) -> int:
        self.check_vertex(v)
        return len(self._adj[v])

    def adjacent(self, v: int) -> List[Arc]:
        self.check_vertex(v)
        return list(self._adj[v])

    def neighbors(self, v: int) -> Iterator[Tuple[int, float]]:
        self.check_vertex(v)
        for arc in self._adj[v]:
            yield arc.sink, arc.weight

    def arcs(self) -> List[Arc]:
        return [arc for adj in self._adj for arc in adj]

    def check_vertex(self, v: int) -> None:
        if v < 0 or v >= self._n:
            raise VertexError(v, self._n)

    def to_networkx(self) -> nx.DiGraph:
        g = nx.DiGraph()
        g.add_nodes_from(range(self._n))
        g.add_weighted_edges_from((a.source, a.sink, a.weight) for a in self.arcs())
        return g

    def __str__(self) -> str:
        rows = []
        for i, adj in enumerate(self._adj):
            rows.append(f"{i:4d} | " + (f"--> {adj}" if adj else " "))
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={self._n}, arcs={self._num_arcs})"


def reverse_digraph(g: DirectedGraph) -> DirectedGraph:
    """Return a new digraph with every arc of g flipped. O(|V| + |E|)."""
    reverse = DirectedGraph(g.num_vertices())
    for arc in g.arcs():
        reverse.add_arc(arc.sink, arc.source, arc.weight)
    return reverse
