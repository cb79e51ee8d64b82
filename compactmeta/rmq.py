"""Range minimum and maximum queries over the excess held in a range min-max tree."""

from __future__ import annotations

from typing import Iterator, Union

from compactmeta.rmmtree import ExcessSummary, RangeMinMaxTree

_Piece = Union[range, int]


def _check_range(tree: RangeMinMaxTree, i: int, j: int) -> None:
    n = len(tree)
    if not 0 <= i <= j < n:
        raise IndexError(f"range [{i}, {j}] invalid for a sequence of length {n}")


def _span(tree: RangeMinMaxTree, v: int) -> tuple[int, int]:
    """First and last block covered by tree node ``v``."""
    internal = tree.block_count - 1
    lo = hi = v
    while lo < internal:
        lo = 2 * lo + 1
    while hi < internal:
        hi = 2 * hi + 2
    return tree.leaf_index(lo), tree.leaf_index(hi)


def _cover(tree: RangeMinMaxTree, v: int, first: int, last: int) -> Iterator[int]:
    """Nodes, left to right, whose blocks exactly tile blocks ``first..last``."""
    lo, hi = _span(tree, v)
    if hi < first or lo > last:
        return
    if first <= lo and hi <= last:
        yield v
        return
    yield from _cover(tree, 2 * v + 1, first, last)
    yield from _cover(tree, 2 * v + 2, first, last)


def _pieces(tree: RangeMinMaxTree, i: int, j: int) -> Iterator[_Piece]:
    """Split ``[i, j]`` into bit runs (ranges) and whole tree nodes (ints), in order."""
    b = tree.block_size
    first_block, last_block = i // b, j // b
    if first_block == last_block:
        yield range(i, j + 1)
        return
    yield range(i, (first_block + 1) * b)
    if last_block - first_block > 1:
        yield from _cover(tree, 0, first_block + 1, last_block - 1)
    yield range(last_block * b, j + 1)


def _summary(tree: RangeMinMaxTree, i: int, j: int) -> ExcessSummary:
    result: ExcessSummary | None = None
    for piece in _pieces(tree, i, j):
        if isinstance(piece, range):
            part = ExcessSummary.of_bits(tree.bit(k) for k in piece)
        else:
            part = tree.node(piece)
        result = part if result is None else result.merge(part)
    if result is None:
        raise ValueError("empty range")
    return result


def extreme_excess(tree: RangeMinMaxTree, i: int, j: int, maximum: bool = False) -> int:
    """Minimum (or maximum) excess after each bit of ``[i, j]``, relative to before ``i``."""
    _check_range(tree, i, j)
    summary = _summary(tree, i, j)
    return summary.maximum if maximum else summary.minimum


def rmq(tree: RangeMinMaxTree, i: int, j: int) -> int:
    """Leftmost position in ``[i, j]`` where the excess reaches its minimum."""
    return tree.fwd_search(i, extreme_excess(tree, i, j))


def rmq_max(tree: RangeMinMaxTree, i: int, j: int) -> int:
    """Leftmost position in ``[i, j]`` where the excess reaches its maximum."""
    return tree.fwd_search(i, extreme_excess(tree, i, j, maximum=True))


def min_count(tree: RangeMinMaxTree, i: int, j: int) -> int:
    """Number of positions in ``[i, j]`` where the excess equals its minimum."""
    _check_range(tree, i, j)
    return _summary(tree, i, j).min_count


def _select_in_node(
    tree: RangeMinMaxTree, v: int, excess: int, minimum: int, t: int
) -> int:
    internal = tree.block_count - 1
    while v < internal:
        left = tree.node(2 * v + 1)
        hits_min = excess + left.minimum == minimum
        if hits_min and left.min_count >= t:
            v = 2 * v + 1
        else:
            if hits_min:
                t -= left.min_count
            excess += left.excess
            v = 2 * v + 2
    b = tree.block_size
    block = tree.leaf_index(v)
    for k in range(block * b, min((block + 1) * b, len(tree))):
        excess += 1 if tree.bit(k) else -1
        if excess == minimum:
            t -= 1
            if t == 0:
                return k
    return len(tree)


def min_select(tree: RangeMinMaxTree, i: int, j: int, t: int) -> int:
    """Position of the ``t``-th (1-based) minimum in ``[i, j]``; ``len(tree)`` if there is none."""
    if t < 1:
        raise ValueError("t is 1-based")
    minimum = extreme_excess(tree, i, j)
    excess = 0
    count = 0
    for piece in _pieces(tree, i, j):
        if isinstance(piece, range):
            for k in piece:
                excess += 1 if tree.bit(k) else -1
                if excess == minimum:
                    count += 1
                    if count == t:
                        return k
        else:
            node = tree.node(piece)
            if excess + node.minimum == minimum:
                if count + node.min_count >= t:
                    return _select_in_node(tree, piece, excess, minimum, t - count)
                count += node.min_count
            excess += node.excess
    return len(tree)