"""
Disjoint sets over the elements 0 .. n-1 (union by rank, path compression).
"""

import numpy as np

from .errors import VertexError


class DisjointSet:
    """Partition of range(n), initially into singletons."""

    def __init__(self, n: int):
        self.n = n
        self._parent = np.arange(n, dtype=np.int64)
        self._rank = np.zeros(n, dtype=np.int64)
        # only meaningful at representatives
        self._size = np.ones(n, dtype=np.int64)
        self._num_sets = n

    def _check(self, v: int):
        if v < 0 or v >= self.n:
            raise VertexError(v, self.n)

    def find(self, v: int) -> int:
        """Representative of the set containing v."""
        self._check(v)
        root = v
        while self._parent[root] != root:
            root = int(self._parent[root])
        while self._parent[v] != root:
            nxt = int(self._parent[v])
            self._parent[v] = root
            v = nxt
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of u and v. Returns False if they were already one set."""
        x = self.find(u)
        y = self.find(v)
        if x == y:
            return False

        if self._rank[y] < self._rank[x]:
            x, y = y, x
        # y has the higher (or equal) rank and becomes the root
        self._parent[x] = y
        self._size[y] += self._size[x]
        if self._rank[x] == self._rank[y]:
            self._rank[y] += 1

        self._num_sets -= 1
        return True

    def num_sets(self) -> int:
        return self._num_sets

    def set_size(self, v: int) -> int:
        """Number of elements in the set containing v."""
        return int(self._size[self.find(v)])

    def same_set(self, u: int, v: int) -> bool:
        return self.find(u) == self.find(v)
