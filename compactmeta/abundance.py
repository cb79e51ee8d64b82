"""Abundance estimation over a taxonomy tree with expectation maximisation."""

from __future__ import annotations

from typing import MutableSequence, Sequence

from compactmeta.assignments import ReadAssignment
from compactmeta.tree import PlainTree

_TOLERANCE = 1e-6


def _preorder(tree: PlainTree, node: int) -> list[int]:
    order = []
    stack = [node]
    while stack:
        v = stack.pop()
        order.append(v)
        stack.extend(reversed(tree.children(v)))
    return order


def accumulate_abundance(
    tree: PlainTree, node: int, values: MutableSequence[float]
) -> float:
    """Replace each value in the subtree of ``node`` by its subtree sum; return the sum at ``node``."""
    for v in reversed(_preorder(tree, node)):
        values[v] += sum(values[c] for c in tree.children(v))
    return values[node]


def redistribute_to_children(
    tree: PlainTree,
    node: int,
    values: MutableSequence[float],
    lengths: Sequence[float] | None = None,
) -> None:
    """Hand each parent's excess over its children down to them, top to bottom.

    The excess is shared in proportion to each child's value, divided by the
    child's length when ``lengths`` is given.
    """
    stack = [node]
    while stack:
        v = stack.pop()
        kids = tree.children(v)
        weights = [values[c] / (lengths[c] if lengths is not None else 1) for c in kids]
        weighted_sum = sum(weights)
        if weighted_sum == 0:
            continue
        excess = max(values[v] - sum(values[c] for c in kids), 0.0)
        for c, w in zip(kids, weights):
            values[c] += excess * w / weighted_sum
        stack.extend(kids)


def em_update(
    abundance: Sequence[float],
    assignments: Sequence[ReadAssignment],
    tree: PlainTree,
    lengths: Sequence[float],
) -> tuple[list[float], list[float], float]:
    """One EM iteration.

    Returns the new abundance, the expected read count of every node and the
    total absolute change of the abundance.
    """
    size = len(tree)
    read_count = [0.0] * size
    for assignment in assignments:
        total = sum(abundance[t] for t in assignment.targets)
        if total == 0:
            continue
        for t in assignment.targets:
            read_count[t] += assignment.weight * abundance[t] / total

    normaliser = sum(read_count[i] / lengths[i] for i in range(size))
    if normaliser == 0:
        raise ValueError("no read carries any weight")
    new_abundance = [read_count[i] / lengths[i] / normaliser for i in range(size)]
    accumulate_abundance(tree, 0, new_abundance)
    redistribute_to_children(tree, 0, new_abundance)
    delta = sum(abs(a - b) for a, b in zip(abundance, new_abundance))
    return new_abundance, read_count, delta


def estimate_abundance(
    assignments: Sequence[ReadAssignment],
    tree: PlainTree,
    lengths: Sequence[float],
    max_iterations: int = 1000,
) -> tuple[list[float], list[float]]:
    """Estimate the abundance and read count of every node of ``tree``.

    Assignment targets are node ids of ``tree``; ``lengths`` gives each node's
    genome length.
    """
    size = len(tree)
    if len(lengths) != size:
        raise ValueError("one length is needed per tree node")
    root = tree.root()

    read_count = [0.0] * size
    for assignment in assignments:
        share = assignment.weight / len(assignment.targets)
        for t in assignment.targets:
            read_count[t] += share

    accumulate_abundance(tree, root, read_count)
    redistribute_to_children(tree, root, read_count, lengths)
    factor = read_count[root]
    if factor == 0:
        raise ValueError("no reads are assigned")
    abundance = [c / factor for c in read_count]

    for _ in range(max_iterations):
        abundance, read_count, delta = em_update(abundance, assignments, tree, lengths)
        if delta < _TOLERANCE and delta < 0.1 / size:
            break

    accumulate_abundance(tree, 0, read_count)
    redistribute_to_children(tree, root, read_count, lengths)
    return abundance, read_count