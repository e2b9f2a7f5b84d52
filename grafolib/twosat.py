"""
2-SAT solver over the implication graph.

A clause (a ∨ b) is equivalent to the implications ¬a → b and ¬b → a.
With every clause turned into those two arcs:

1. The formula is unsatisfiable iff some variable x has x and ¬x in the
   same strongly connected component (each would force the other).
2. Otherwise, take a topological order of the condensation. A variable is
   True exactly when the component of ¬x comes before the component of x:
   x is then never upstream of ¬x, so setting it True forces nothing false.

Everything runs in O(n + m) inside the constructor.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

from .errors import UnsatisfiableError
from .formula import TwoCNFFormula, negate
from .graph import DirectedGraph
from .scc import StronglyConnectedComponents
from .topological import TopologicalOrder

logger = logging.getLogger(__name__)


def implication_graph_size(max_vertex_id: int) -> int:
    """Smallest even vertex count holding both literals of the variable of max_vertex_id."""
    if max_vertex_id < 0:
        return 0
    return max_vertex_id - max_vertex_id % 2 + 2


class TwoSatSolver:
    """
    Decides a 2-CNF formula and extracts a satisfying assignment.

    Example:
        >>> solver = TwoSatSolver.from_string("0 1\\n-0 -1\\n")
        >>> solver.is_satisfiable()
        True
        >>> solver.assignment()
        [False, True]
    """

    def __init__(self, formula: TwoCNFFormula):
        self.formula = formula

        max_id = max((lit.vertex for c in formula.clauses for lit in c.literals()), default=-1)
        n = implication_graph_size(max_id)
        self._num_vars = n // 2
        self._graph = DirectedGraph(n)

        for clause in formula.clauses:
            a, b = clause.first.vertex, clause.second.vertex
            self._add_implication(negate(a), b)
            self._add_implication(negate(b), a)

        self._scc = StronglyConnectedComponents(self._graph)
        self._satisfiable = not any(
            self._scc.strongly_connected(2 * i, 2 * i + 1) for i in range(self._num_vars)
        )
        self._assignment = np.zeros(self._num_vars, dtype=bool)

        if self._satisfiable:
            self._extract_assignment()

        logger.debug("2-SAT: %d variables, %d clauses, %d implication arcs, %d components, satisfiable=%s",
                     self._num_vars, len(formula), self._graph.num_edges(),
                     self._scc.num_components(), self._satisfiable)

    @classmethod
    def from_tokens(cls, pairs: Iterable[Tuple[Union[str, int], Union[str, int]]]) -> 'TwoSatSolver':
        return cls(TwoCNFFormula.from_tokens(pairs))

    @classmethod
    def from_string(cls, text: str) -> 'TwoSatSolver':
        return cls(TwoCNFFormula.from_string(text))

    @classmethod
    def from_file(cls, filepath: str) -> 'TwoSatSolver':
        return cls(TwoCNFFormula.from_file(filepath))

    def _add_implication(self, u: int, v: int):
        # (a ∨ a) and repeated clauses yield the same implication twice
        if not self._graph.has_arc(u, v):
            self._graph.add_arc(u, v)

    def _extract_assignment(self):
        condensation = self._scc.component_graph()
        order = TopologicalOrder(condensation).order()

        position = np.empty(condensation.num_vertices(), dtype=np.int64)
        position[order] = np.arange(len(order))

        for i in range(self._num_vars):
            pos_literal = position[self._scc.component_id(2 * i)]
            neg_literal = position[self._scc.component_id(2 * i + 1)]
            self._assignment[i] = neg_literal < pos_literal

        logger.debug("Assignment: %s", self._assignment.tolist())

    def is_satisfiable(self) -> bool:
        return self._satisfiable

    def assignment(self) -> List[bool]:
        """
        Value of each variable x0 .. x(n-1) in a satisfying assignment.

        Raises:
            UnsatisfiableError: the formula has no satisfying assignment
        """
        if not self._satisfiable:
            raise UnsatisfiableError("No assignment makes the formula true")
        return [bool(x) for x in self._assignment]

    def num_variables(self) -> int:
        return self._num_vars

    def implication_graph(self) -> DirectedGraph:
        return DirectedGraph.from_arcs(self._graph.num_vertices(),
                                       ((a.source, a.sink) for a in self._graph.arcs()))

    def conflicting_variables(self) -> List[int]:
        """Variables whose two literals share a strongly connected component."""
        return [i for i in range(self._num_vars) if self._scc.strongly_connected(2 * i, 2 * i + 1)]


@dataclass
class TwoSatResult:
    """Outcome of solve_2sat."""
    satisfiable: bool
    assignment: Optional[List[bool]] = None

    def __str__(self) -> str:
        if self.satisfiable:
            return f"SAT {self.assignment}"
        return "UNSAT"


def solve_2sat(formula: Union[TwoCNFFormula, Iterable[Tuple[Union[str, int], Union[str, int]]]]) -> TwoSatResult:
    """
    Solve a 2-CNF formula without raising on unsatisfiability.

    Args:
        formula: A TwoCNFFormula or literal token pairs such as
                 [("0", "-1"), ("-0", "1")]

    Returns:
        TwoSatResult with the assignment when satisfiable
    """
    if not isinstance(formula, TwoCNFFormula):
        formula = TwoCNFFormula.from_tokens(formula)
    solver = TwoSatSolver(formula)
    if solver.is_satisfiable():
        return TwoSatResult(satisfiable=True, assignment=solver.assignment())
    return TwoSatResult(satisfiable=False)
