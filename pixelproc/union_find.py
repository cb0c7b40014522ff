"""Disjoint set forests for union find."""

from __future__ import annotations

from collections.abc import Sequence


class DisjointSetForest:
    """A union-find structure over the elements ``0 .. count - 1``.

    Uses union by size and path halving.
    """

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError("count must be non-negative")
        self._count = count
        self._parent = list(range(count))
        self._tree_size = [1] * count

    @classmethod
    def from_parents(
        cls, parent: Sequence[int], tree_size: Sequence[int]
    ) -> DisjointSetForest:
        """Build a forest from explicit parent links and tree sizes."""
        if len(parent) != len(tree_size):
            raise ValueError("parent and tree_size must have the same length")
        count = len(parent)
        if any(not 0 <= p < count for p in parent):
            raise ValueError("parent links must refer to forest elements")
        forest = cls(count)
        forest._parent = list(parent)
        forest._tree_size = list(tree_size)
        return forest

    def __len__(self) -> int:
        return self._count

    @property
    def parent(self) -> list[int]:
        """A copy of the parent links: ``parent[i] == i`` marks a root."""
        return list(self._parent)

    def _check(self, i: int) -> None:
        if not 0 <= i < self._count:
            raise IndexError(f"element {i} is outside a forest of {self._count}")

    def num_trees(self) -> int:
        """Return the number of trees in the forest."""
        return sum(1 for i, p in enumerate(self._parent) if i == p)

    def root(self, i: int) -> int:
        """Return the root of the tree containing ``i``, compressing the path."""
        self._check(i)
        parent = self._parent
        j = i
        while True:
            p = parent[j]
            parent[j] = parent[p]
            if j == p:
                return j
            j = p

    def find(self, i: int, j: int) -> bool:
        """Return whether ``i`` and ``j`` are in the same tree."""
        self._check(i)
        self._check(j)
        return self.root(i) == self.root(j)

    def union(self, i: int, j: int) -> None:
        """Merge the trees containing ``i`` and ``j``."""
        self._check(i)
        self._check(j)
        p = self.root(i)
        q = self.root(j)
        if p == q:
            return
        size = self._tree_size[p] + self._tree_size[q]
        if self._tree_size[p] < self._tree_size[q]:
            self._parent[p] = q
            self._tree_size[q] = size
        else:
            self._parent[q] = p
            self._tree_size[p] = size

    def trees(self) -> list[list[int]]:
        """Return the elements of each tree, ordered by smallest element."""
        groups: dict[int, list[int]] = {}
        for i in range(self._count):
            groups.setdefault(self.root(i), []).append(i)
        return list(groups.values())