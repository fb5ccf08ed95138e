from __future__ import annotations

from typing import List


class UnionFind:
    """Disjoint Set Union over the integers ``0..n-1``.

    Union by size + path compression, so find/union are nearly O(1) amortized.
    ``count`` only ever goes down.
    """

    def __init__(self, n: int):
        if n < 0:
            raise ValueError(f"UnionFind size must be non-negative, got {n}")
        self.parent: List[int] = list(range(n))
        self.size: List[int] = [1] * n
        self._count = n

    def __len__(self) -> int:
        return len(self.parent)

    @property
    def count(self) -> int:
        """Number of disjoint components left."""
        return self._count

    def find(self, p: int) -> int:
        root = p
        while self.parent[root] != root:
            root = self.parent[root]
        # compress
        while self.parent[p] != root:
            nxt = self.parent[p]
            self.parent[p] = root
            p = nxt
        return root

    def union(self, p: int, q: int) -> None:
        rp, rq = self.find(p), self.find(q)
        if rp == rq:
            return
        # ties keep p's root on top
        if self.size[rp] < self.size[rq]:
            rp, rq = rq, rp
        self.parent[rq] = rp
        self.size[rp] += self.size[rq]
        self._count -= 1

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def component_size(self, p: int) -> int:
        return self.size[self.find(p)]
