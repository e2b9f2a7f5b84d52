"""
grafolib: classical graph algorithms and a 2-SAT solver

Graphs are adjacency lists over dense integer vertices [0, n). Every
analysis runs its algorithm when constructed and is read-only afterwards.

CORE:
- Graph ADT: UndirectedGraph, DirectedGraph, reverse_digraph
- Traversals: dfs_visit, bfs_visit, DepthFirstSearch, BreadthFirstSearch
- DigraphCycle: back-edge cycle detection with cycle reconstruction
- TopologicalOrder: reversed DFS finish order
- StronglyConnectedComponents: Kosaraju, with the condensation graph
- TwoSatSolver: implication graph + SCC, O(n+m)

ALSO:
- EulerianCircuit, DisjointSet, connected components, TwoColoring,
  KruskalMST / PrimMST, GraphMetrics, LowestCommonAncestor
"""

from .errors import (
    GraphError,
    VertexError,
    EdgeError,
    DuplicateEdgeError,
    NotAcyclicError,
    NotStronglyConnectedError,
    NotConnectedError,
    NotBipartiteError,
    NoCycleError,
    NoEulerianCircuitError,
    UnsatisfiableError,
    GraphFormatError,
    FormulaFormatError,
)
from .graph import Edge, Arc, Graph, UndirectedGraph, DirectedGraph, reverse_digraph
from .traversal import (
    Color,
    new_color_state,
    dfs_visit,
    bfs_visit,
    DepthFirstSearch,
    BreadthFirstSearch,
)
from .result import Outcome
from .cycle import DigraphCycle
from .topological import TopologicalOrder, topological_sort
from .scc import StronglyConnectedComponents
from .formula import Literal, LiteralSign, Clause, TwoCNFFormula, literal_id, literal_token, negate
from .twosat import TwoSatSolver, TwoSatResult, solve_2sat
from .eulerian import EulerianCircuit, find_eulerian_circuit
from .disjoint_set import DisjointSet
from .connected import ConnectedComponentsDFS, ConnectedComponentsDS
from .bipartite import TwoColoring
from .mst import KruskalMST, PrimMST
from .metrics import GraphMetrics
from .lca import LowestCommonAncestor, lowest_common_ancestors

__version__ = "1.0.0"
__all__ = [
    # Errors
    "GraphError",
    "VertexError",
    "EdgeError",
    "DuplicateEdgeError",
    "NotAcyclicError",
    "NotStronglyConnectedError",
    "NotConnectedError",
    "NotBipartiteError",
    "NoCycleError",
    "NoEulerianCircuitError",
    "UnsatisfiableError",
    "GraphFormatError",
    "FormulaFormatError",
    # Graph ADT
    "Edge",
    "Arc",
    "Graph",
    "UndirectedGraph",
    "DirectedGraph",
    "reverse_digraph",
    # Traversals
    "Color",
    "new_color_state",
    "dfs_visit",
    "bfs_visit",
    "DepthFirstSearch",
    "BreadthFirstSearch",
    # Digraph analyses
    "Outcome",
    "DigraphCycle",
    "TopologicalOrder",
    "topological_sort",
    "StronglyConnectedComponents",
    "EulerianCircuit",
    "find_eulerian_circuit",
    "LowestCommonAncestor",
    "lowest_common_ancestors",
    # 2-SAT
    "Literal",
    "LiteralSign",
    "Clause",
    "TwoCNFFormula",
    "literal_id",
    "literal_token",
    "negate",
    "TwoSatSolver",
    "TwoSatResult",
    "solve_2sat",
    # Undirected analyses
    "DisjointSet",
    "ConnectedComponentsDFS",
    "ConnectedComponentsDS",
    "TwoColoring",
    "KruskalMST",
    "PrimMST",
    "GraphMetrics",
]
