"""An ordinal tree held as parent, first-child and next-sibling links."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class _Node:
    parent: int
    sibling: int | None = None
    child: int | None = None
    last_child: int | None = None
    label: int = 0


class PlainTree:
    """A growable ordinal tree whose nodes are numbered from 0; node 0 is the root.

    ``PlainTree(n)`` starts with ``n`` unconnected nodes that :meth:`add_edge`
    links together; :meth:`add_node` appends a new child. The root's parent is
    the root itself.
    """

    def __init__(self, n: int = 1) -> None:
        if n < 1:
            raise ValueError("a tree needs at least its root")
        self._root = 0
        self._nodes = [_Node(parent=self._root) for _ in range(n)]

    def __len__(self) -> int:
        return len(self._nodes)

    def _node(self, v: int) -> _Node:
        if not 0 <= v < len(self._nodes):
            raise IndexError(f"node {v} out of range for {len(self._nodes)} nodes")
        return self._nodes[v]

    def _append_child(self, parent_node: _Node, child: int) -> None:
        if parent_node.last_child is None:
            parent_node.child = child
        else:
            self._nodes[parent_node.last_child].sibling = child
        parent_node.last_child = child

    def add_node(self, parent: int) -> int:
        """Append a new last child of ``parent`` and return its id."""
        parent_node = self._node(parent)
        new_id = len(self._nodes)
        self._nodes.append(_Node(parent=parent))
        self._append_child(parent_node, new_id)
        return new_id

    def add_edge(self, child: int, parent: int) -> None:
        """Make the existing node ``child`` the last child of ``parent``."""
        child_node = self._node(child)
        parent_node = self._node(parent)
        if child == self._root:
            raise ValueError("the root cannot become a child")
        child_node.parent = parent
        self._append_child(parent_node, child)

    def root(self) -> int:
        return self._root

    def child_select(self, v: int, t: int) -> int:
        """The ``t``-th (1-based) child of ``v``."""
        kids = self.children(v)
        if not 1 <= t <= len(kids):
            raise IndexError(f"node {v} has no child number {t}")
        return kids[t - 1]

    def first_child(self, v: int) -> int | None:
        return self._node(v).child

    def last_child(self, v: int) -> int | None:
        return self._node(v).last_child

    def children_count(self, v: int) -> int:
        return len(self.children(v))

    def children(self, v: int) -> list[int]:
        """Children of ``v`` in order."""
        result = []
        c = self._node(v).child
        while c is not None:
            result.append(c)
            c = self._nodes[c].sibling
        return result

    def child_rank(self, v: int) -> int:
        """Position (1-based) of ``v`` among its siblings; 0 for the root."""
        if v == self._root:
            return 0
        return self.children(self.parent(v)).index(v) + 1

    def next_sibling(self, v: int) -> int | None:
        return self._node(v).sibling

    def prev_sibling(self, v: int) -> int | None:
        """The sibling right before ``v``, or ``None`` when ``v`` is the first child."""
        if v == self._root:
            return None
        kids = self.children(self.parent(v))
        k = kids.index(v)
        return kids[k - 1] if k > 0 else None

    def parent(self, v: int) -> int:
        return self._node(v).parent

    def is_leaf(self, v: int) -> bool:
        return self._node(v).child is None

    def set_label(self, v: int, label: int) -> None:
        """Label the edge leading into ``v``."""
        self._node(v).label = label

    def children_labeled(self, v: int, label: int) -> int:
        """Number of children of ``v`` whose edge carries ``label``."""
        return sum(1 for c in self.children(v) if self._nodes[c].label == label)

    def labeled_child_select(self, v: int, label: int, t: int = 1) -> int | None:
        """The ``t``-th child of ``v`` with edge label ``label``, or ``None``."""
        seen = 0
        for c in self.children(v):
            if self._nodes[c].label == label:
                seen += 1
                if seen >= t:
                    return c
        return None

    def child_label(self, v: int) -> int:
        """The label of the edge leading into ``v``."""
        return self._node(v).label