"""
2-CNF formula representation.

A literal token is a decimal variable index ("3" is x3) or the index with
a leading minus ("-3" is NOT x3). Since -0 == 0 as a number, "-0" is the
token for NOT x0, so literals are parsed from strings rather than ints.

Each literal also has a vertex id in the implication graph: x_k is 2k and
NOT x_k is 2k + 1, so a literal and its negation differ only in the
lowest bit.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence, Set, Tuple, Union

from .errors import FormulaFormatError


def literal_id(token: str) -> int:
    """Vertex id of the literal written as token ("k" -> 2k, "-k" -> 2k + 1)."""
    token = token.strip()
    if token == "-0":
        return 1
    try:
        value = int(token)
    except ValueError:
        raise FormulaFormatError(f"Invalid literal {token!r}") from None
    return 2 * value if value >= 0 else -2 * value + 1


def literal_token(vertex_id: int) -> str:
    """Inverse of literal_id."""
    if vertex_id < 0:
        raise ValueError(f"Literal ids are non-negative, got {vertex_id}")
    variable = vertex_id // 2
    return f"-{variable}" if vertex_id % 2 else str(variable)


def negate(vertex_id: int) -> int:
    """Id of the negation of the literal with id vertex_id."""
    return vertex_id ^ 1


class LiteralSign(Enum):
    POSITIVE = 0
    NEGATIVE = 1


@dataclass(frozen=True)
class Literal:
    """A variable x_k or its negation."""
    variable: int
    sign: LiteralSign

    def __post_init__(self):
        if self.variable < 0:
            raise FormulaFormatError(f"Variable indices are non-negative, got {self.variable}")

    @classmethod
    def positive(cls, var: int) -> 'Literal':
        return cls(variable=var, sign=LiteralSign.POSITIVE)

    @classmethod
    def negative(cls, var: int) -> 'Literal':
        return cls(variable=var, sign=LiteralSign.NEGATIVE)

    @classmethod
    def from_token(cls, token: Union[str, int]) -> 'Literal':
        return cls.from_id(literal_id(str(token)))

    @classmethod
    def from_id(cls, vertex_id: int) -> 'Literal':
        sign = LiteralSign.NEGATIVE if vertex_id % 2 else LiteralSign.POSITIVE
        return cls(vertex_id // 2, sign)

    @property
    def vertex(self) -> int:
        """Vertex id in the implication graph."""
        return 2 * self.variable + self.sign.value

    def negated(self) -> 'Literal':
        return Literal.from_id(negate(self.vertex))

    def to_token(self) -> str:
        return literal_token(self.vertex)

    def value(self, assignment: Sequence[bool]) -> bool:
        val = bool(assignment[self.variable])
        return not val if self.sign == LiteralSign.NEGATIVE else val

    def __repr__(self) -> str:
        prefix = "¬" if self.sign == LiteralSign.NEGATIVE else ""
        return f"{prefix}x{self.variable}"


@dataclass(frozen=True)
class Clause:
    """Disjunction of exactly two literals."""
    first: Literal
    second: Literal

    @classmethod
    def from_tokens(cls, a: Union[str, int], b: Union[str, int]) -> 'Clause':
        return cls(Literal.from_token(a), Literal.from_token(b))

    def literals(self) -> Tuple[Literal, Literal]:
        return self.first, self.second

    def variables(self) -> Set[int]:
        return {self.first.variable, self.second.variable}

    def evaluate(self, assignment: Sequence[bool]) -> bool:
        return self.first.value(assignment) or self.second.value(assignment)

    def __repr__(self) -> str:
        return f"({self.first} ∨ {self.second})"


def _parse_formula_lines(lines: Iterable[str]) -> List[Clause]:
    clauses = []
    for line_no, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith(('c', '#')):
            continue
        parts = line.split()
        if len(parts) != 2:
            raise FormulaFormatError(f"Line {line_no}: a clause has exactly two literals, got {line!r}")
        try:
            clauses.append(Clause.from_tokens(parts[0], parts[1]))
        except FormulaFormatError as e:
            raise FormulaFormatError(f"Line {line_no}: {e}") from None
    return clauses


@dataclass
class TwoCNFFormula:
    """
    A conjunction of two-literal clauses over variables x0 .. x(n-1).

    The number of variables is one more than the largest variable index
    mentioned, so unmentioned lower indices still get a value.
    """
    clauses: List[Clause]

    @classmethod
    def from_tokens(cls, pairs: Iterable[Tuple[Union[str, int], Union[str, int]]]) -> 'TwoCNFFormula':
        """Build from literal token pairs, e.g. [("0", "-1"), ("-0", "2")]."""
        return cls([Clause.from_tokens(a, b) for a, b in pairs])

    @classmethod
    def from_string(cls, text: str) -> 'TwoCNFFormula':
        return cls(_parse_formula_lines(text.splitlines()))

    @classmethod
    def from_file(cls, filepath: str) -> 'TwoCNFFormula':
        """Parse a formula file with one "<lit0> <lit1>" clause per line."""
        with open(filepath, 'r') as f:
            return cls(_parse_formula_lines(f))

    def num_variables(self) -> int:
        if not self.clauses:
            return 0
        return 1 + max(max(c.variables()) for c in self.clauses)

    def variables(self) -> Set[int]:
        """Variables actually mentioned by some clause."""
        result: Set[int] = set()
        for clause in self.clauses:
            result.update(clause.variables())
        return result

    def evaluate(self, assignment: Sequence[bool]) -> bool:
        """True if every clause holds under the complete assignment."""
        return all(clause.evaluate(assignment) for clause in self.clauses)

    def __len__(self) -> int:
        return len(self.clauses)

    def __repr__(self) -> str:
        return f"TwoCNFFormula(vars={self.num_variables()}, clauses={len(self.clauses)})"

    def to_string(self) -> str:
        return " ∧ ".join(str(c) for c in self.clauses)
