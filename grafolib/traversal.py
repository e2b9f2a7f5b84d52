"""
Traversal primitives shared by every analysis in grafolib.

dfs_visit and bfs_visit work on any object satisfying the Graph protocol
and keep their per-vertex state in arrays owned by the caller, so each
analysis object allocates its own colour array and never shares it.

dfs_visit keeps an explicit stack of (vertex, neighbor iterator) frames
and never recurses.
"""

import logging
from collections import deque
from enum import IntEnum
from typing import Callable, List, Optional, Tuple

import numpy as np

from .graph import Graph

logger = logging.getLogger(__name__)


class Color(IntEnum):
    WHITE = 0   # not discovered
    GRAY = 1    # discovered, still on the DFS stack / in the BFS queue
    BLACK = 2   # finished


NO_VERTEX = -1


def new_color_state(n: int) -> np.ndarray:
    """Fresh colour array with every vertex white."""
    return np.full(n, Color.WHITE, dtype=np.int8)


def dfs_visit(graph: Graph,
              source: int,
              color: np.ndarray,
              on_discover: Optional[Callable[[int], None]] = None,
              on_finish: Optional[Callable[[int], None]] = None,
              on_tree_edge: Optional[Callable[[int, int], None]] = None,
              on_back_edge: Optional[Callable[[int, int], bool]] = None) -> bool:
    """
    Explore every vertex reachable from source that is still white.

    Args:
        graph: Graph to explore
        source: Start vertex (must be white)
        color: Colour array, updated in place
        on_discover: Called with u when u turns gray
        on_finish: Called with u when u turns black
        on_tree_edge: Called with (u, v) before descending from u into v
        on_back_edge: Called with (u, v) when v is gray. Only meaningful on
            digraphs; on undirected graphs the edge back to the parent is
            reported too. A truthy return stops the exploration.

    Returns:
        True if on_back_edge stopped the exploration. The vertices still on
        the stack are then finished (and on_finish called for them) without
        looking at their remaining neighbors.
    """
    color[source] = Color.GRAY
    if on_discover is not None:
        on_discover(source)

    stack = [(source, graph.neighbors(source))]
    stopped = False

    while stack:
        u, neighbors = stack[-1]
        descended = False

        if not stopped:
            for v, _ in neighbors:
                if color[v] == Color.WHITE:
                    color[v] = Color.GRAY
                    if on_tree_edge is not None:
                        on_tree_edge(u, v)
                    if on_discover is not None:
                        on_discover(v)
                    stack.append((v, graph.neighbors(v)))
                    descended = True
                    break
                if color[v] == Color.GRAY and on_back_edge is not None and on_back_edge(u, v):
                    stopped = True
                    break

        if descended:
            continue

        stack.pop()
        color[u] = Color.BLACK
        if on_finish is not None:
            on_finish(u)

    return stopped


def bfs_visit(graph: Graph,
              source: int,
              color: np.ndarray,
              dist: np.ndarray,
              pred: np.ndarray) -> int:
    """
    Breadth-first expansion from source.

    Fills dist (edges from source) and pred (BFS tree parent, NO_VERTEX
    for the root) for every vertex reached. Vertices already non-white are
    skipped. Returns the largest distance reached (the eccentricity of
    source when the graph is connected).
    """
    color[source] = Color.GRAY
    dist[source] = 0
    pred[source] = NO_VERTEX
    farthest = 0

    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, _ in graph.neighbors(u):
            if color[v] == Color.WHITE:
                color[v] = Color.GRAY
                dist[v] = dist[u] + 1
                pred[v] = u
                farthest = max(farthest, int(dist[v]))
                queue.append(v)
        color[u] = Color.BLACK

    return farthest


class DepthFirstSearch:
    """
    Full DFS over a graph, recording the DFS forest and time stamps.

    Every vertex gets a discovery time and a finish time in [1, 2n].
    """

    def __init__(self, graph: Graph):
        self.graph = graph
        n = graph.num_vertices()
        self._color = new_color_state(n)
        self._pred = np.full(n, NO_VERTEX, dtype=np.int64)
        self._discovered = np.zeros(n, dtype=np.int64)
        self._finished = np.zeros(n, dtype=np.int64)
        self._finish_order: List[int] = []
        self._time = 0

        for v in range(n):
            if self._color[v] == Color.WHITE:
                dfs_visit(graph, v, self._color,
                          on_discover=self._discover,
                          on_finish=self._finish,
                          on_tree_edge=self._tree_edge)

    def _discover(self, u: int):
        self._time += 1
        self._discovered[u] = self._time

    def _finish(self, u: int):
        self._time += 1
        self._finished[u] = self._time
        self._finish_order.append(u)

    def _tree_edge(self, u: int, v: int):
        self._pred[v] = u

    def predecessor(self, v: int) -> Optional[int]:
        """Parent of v in the DFS forest, None for roots."""
        self.graph.check_vertex(v)
        p = int(self._pred[v])
        return None if p == NO_VERTEX else p

    def times(self, v: int) -> Tuple[int, int]:
        """(discovery time, finish time) of v."""
        self.graph.check_vertex(v)
        return int(self._discovered[v]), int(self._finished[v])

    def finish_order(self) -> List[int]:
        return list(self._finish_order)


class BreadthFirstSearch:
    """BFS tree from a single source vertex."""

    def __init__(self, graph: Graph, source: int):
        graph.check_vertex(source)
        self.graph = graph
        self.source = source
        n = graph.num_vertices()
        self._color = new_color_state(n)
        self._dist = np.full(n, -1, dtype=np.int64)
        self._pred = np.full(n, NO_VERTEX, dtype=np.int64)
        bfs_visit(graph, source, self._color, self._dist, self._pred)

    def predecessor(self, v: int) -> Optional[int]:
        self.graph.check_vertex(v)
        p = int(self._pred[v])
        return None if p == NO_VERTEX else p

    def distance(self, v: int) -> Optional[int]:
        """Fewest edges from the source to v, None if v is unreachable."""
        self.graph.check_vertex(v)
        d = int(self._dist[v])
        return None if d < 0 else d

    def has_path_to(self, v: int) -> bool:
        self.graph.check_vertex(v)
        return bool(self._dist[v] >= 0)

    def shortest_path_to(self, v: int) -> List[int]:
        """Vertices on a path with fewest edges from the source to v; [] if unreachable."""
        if not self.has_path_to(v):
            return []
        path = []
        u = v
        while u != NO_VERTEX:
            path.append(u)
            u = int(self._pred[u])
        path.reverse()
        return path
