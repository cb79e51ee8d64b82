"""Level-order unary degree sequence (LOUDS) representation of an ordinal tree."""

from __future__ import annotations

from collections import deque

from compactmeta.bitvector import PlainBitvector
from compactmeta.tree import PlainTree


class LoudsTree:
    """A static tree encoded as one bit vector in breadth-first order.

    Every node writes one 1 per child followed by a 0. A node is addressed by
    the position ``v`` in the bit vector where its group of bits starts.
    :meth:`node_map` and :meth:`node_select` convert between such positions
    and breadth-first node numbers; the root is number 0 and sits at position 0.
    """

    def __init__(self, tree: PlainTree) -> None:
        n = len(tree)
        ones: list[int] = []
        position = 0
        visited = 0
        queue = deque([tree.root()])
        while queue:
            node = queue.popleft()
            visited += 1
            kids = tree.children(node)
            queue.extend(kids)
            ones.extend(range(position, position + len(kids)))
            position += len(kids) + 1
        if visited != n:
            raise ValueError("every node of the tree must be reachable from the root")
        # n groups closed by a 0 and n - 1 edges.
        self._bits = PlainBitvector.from_ones(ones, 2 * n - 1)

    def _pred0(self, i: int) -> int:
        """Last position <= ``i`` holding a 0, or -1 when there is none."""
        if i < 0:
            return -1
        zeros = self._bits.rank(0, i)
        return -1 if zeros == 0 else self._bits.select(0, zeros)

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._bits):
            raise IndexError(f"position {v} outside the encoding")

    def root(self) -> int:
        return 0

    def child_select(self, v: int, t: int) -> int:
        """Position of the ``t``-th (1-based) child of ``v``."""
        if not 1 <= t <= self.children_count(v):
            raise IndexError(f"node at {v} has no child number {t}")
        return self._bits.select(0, self._bits.rank(1, v + t - 1)) + 1

    def first_child(self, v: int) -> int:
        return self.child_select(v, 1)

    def last_child(self, v: int) -> int:
        return self.child_select(v, self.children_count(v))

    def children_count(self, v: int) -> int:
        self._check(v)
        return self._bits.succ0(v) - v

    def child_rank(self, v: int) -> int:
        """Position (1-based) of ``v`` among its siblings; 0 for the root."""
        if v == self.root():
            return 0
        self._check(v)
        edge = self._bits.select(1, self._bits.rank(0, v - 1))
        return edge - self._pred0(edge)

    def next_sibling(self, v: int) -> int | None:
        """Position of the sibling after ``v``, or ``None`` for a last child or the root."""
        if v == self.root():
            return None
        if self.child_rank(v) == self.children_count(self.parent(v)):
            return None
        return self._bits.succ0(v) + 1

    def prev_sibling(self, v: int) -> int | None:
        """Position of the sibling before ``v``, or ``None`` for a first child or the root."""
        if v == self.root() or self.child_rank(v) <= 1:
            return None
        return self._pred0(v - 2) + 1

    def parent(self, v: int) -> int:
        """Position of the parent of ``v``; the root is its own parent."""
        if v == self.root():
            return self.root()
        self._check(v)
        edge = self._bits.select(1, self._bits.rank(0, v - 1))
        return self._pred0(edge) + 1

    def is_leaf(self, v: int) -> bool:
        self._check(v)
        return self._bits.access(v) == 0

    def lca(self, u: int, v: int) -> int:
        """Position of the lowest common ancestor of ``u`` and ``v``."""
        while u != v:
            if u > v:
                u = self.parent(u)
            else:
                v = self.parent(v)
        return u

    def node_map(self, v: int) -> int:
        """Breadth-first number of the node at position ``v``."""
        self._check(v)
        return self._bits.rank(0, v, inclusive=False)

    def node_select(self, i: int) -> int:
        """Position of the node with breadth-first number ``i``."""
        if i == 0:
            return self.root()
        return self._bits.select(0, i) + 1