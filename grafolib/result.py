"""
Outcome type for fallible analyses.

Analysis classes raise when a structural precondition fails (a cycle where
a DAG is needed, a graph that is not strongly connected). The factory
functions that wrap them return an Outcome instead, so callers can branch
on the failure as ordinary control flow.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from .errors import GraphError

T = TypeVar('T')


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either a value or the GraphError that prevented computing it."""
    value: Optional[T] = None
    error: Optional[GraphError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, re-raising the stored error if there is one."""
        if self.error is not None:
            raise self.error
        return self.value

    def __bool__(self) -> bool:
        return self.ok


def attempt(build: Callable[[], T]) -> Outcome[T]:
    """Run build(), capturing a GraphError as a failed Outcome."""
    try:
        return Outcome(value=build())
    except GraphError as e:
        return Outcome(error=e)
