"""Range min-max tree over the excess of a bit sequence (1 = +1, 0 = -1)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

_DEFAULT_BLOCK_SIZE = 1024


def _log2_ceil(n: int) -> int:
    return 0 if n <= 1 else (n - 1).bit_length()


@dataclass(frozen=True)
class ExcessSummary:
    """Excess statistics of a bit range, relative to the start of the range.

    ``minimum`` and ``maximum`` are taken over the excess after each bit, and
    ``min_count`` is how often the minimum is reached.
    """

    excess: int = 0
    minimum: int = 0
    maximum: int = 0
    min_count: int = 0

    @classmethod
    def of_bits(cls, bits: Iterable[int]) -> "ExcessSummary":
        excess = 0
        minimum = maximum = None
        count = 0
        for bit in bits:
            excess += 1 if bit else -1
            if minimum is None or excess < minimum:
                minimum, count = excess, 1
            elif excess == minimum:
                count += 1
            if maximum is None or excess > maximum:
                maximum = excess
        if minimum is None or maximum is None:
            raise ValueError("cannot summarise an empty bit range")
        return cls(excess, minimum, maximum, count)

    def merge(self, other: "ExcessSummary") -> "ExcessSummary":
        """Summary of this range followed by ``other``."""
        shifted_min = self.excess + other.minimum
        if shifted_min < self.minimum:
            minimum, count = shifted_min, other.min_count
        elif shifted_min == self.minimum:
            minimum, count = self.minimum, self.min_count + other.min_count
        else:
            minimum, count = self.minimum, self.min_count
        return ExcessSummary(
            self.excess + other.excess,
            minimum,
            max(self.maximum, self.excess + other.maximum),
            count,
        )

    @property
    def rev_excess(self) -> int:
        """Excess when the range is read right to left."""
        return -self.excess

    @property
    def rev_minimum(self) -> int:
        return min(self.minimum, 0) - self.excess

    @property
    def rev_maximum(self) -> int:
        return max(self.maximum, 0) - self.excess


def _reaches(excess: int, d: int, low: int, high: int) -> bool:
    """Whether a range with extremes ``low``/``high`` passes through ``d``."""
    return (d <= 0 and excess > d and excess + low <= d) or (
        d >= 0 and excess < d and excess + high >= d
    )


class RangeMinMaxTree:
    """Blocks of ``block_size`` bits summarised in a heap-ordered binary tree.

    Node 0 is the root; the children of ``v`` are ``2v+1`` and ``2v+2``. The
    ``block_count`` leaves are numbered left to right by :meth:`leaf_node`.
    """

    def __init__(self, bits: Iterable[int], block_size: int = 0) -> None:
        values = []
        for b in bits:
            v = int(b)
            if v not in (0, 1):
                raise ValueError(f"bits must be 0 or 1, got {b!r}")
            values.append(v)
        self._bits = bytes(values)
        self._b = block_size if block_size > 8 else _DEFAULT_BLOCK_SIZE
        n = len(self._bits)
        self._r = -(-n // self._b)
        self._height = _log2_ceil(self._r)
        nodes = [ExcessSummary()] * max(2 * self._r - 1, 0)
        for k in range(self._r):
            block = self._bits[k * self._b : (k + 1) * self._b]
            nodes[self.leaf_node(k)] = ExcessSummary.of_bits(block)
        for v in range(self._r - 2, -1, -1):
            nodes[v] = nodes[2 * v + 1].merge(nodes[2 * v + 2])
        self._tree = nodes

    def __len__(self) -> int:
        return len(self._bits)

    @property
    def block_size(self) -> int:
        return self._b

    @property
    def block_count(self) -> int:
        return self._r

    @property
    def node_count(self) -> int:
        return len(self._tree)

    def bit(self, i: int) -> int:
        if not 0 <= i < len(self._bits):
            raise IndexError(f"bit index {i} out of range for length {len(self._bits)}")
        return self._bits[i]

    def node(self, v: int) -> ExcessSummary:
        if not 0 <= v < len(self._tree):
            raise IndexError(f"tree node {v} out of range")
        return self._tree[v]

    def leaf_node(self, k: int) -> int:
        """Tree index of the ``k``-th block."""
        if not 0 <= k < self._r:
            raise IndexError(f"block {k} out of range for {self._r} blocks")
        width = 1 << self._height
        if k < 2 * self._r - width:
            return width - 1 + k
        return width - 1 - self._r + k

    def leaf_index(self, v: int) -> int:
        """Block number held by the leaf at tree index ``v``."""
        if not self._r - 1 <= v < 2 * self._r - 1:
            raise IndexError(f"tree node {v} is not a leaf")
        width = 1 << self._height
        if v >= width - 1:
            return v - width + 1
        return v - width + 1 + self._r

    @staticmethod
    def _level_max(v: int) -> int:
        return (1 << (v + 1).bit_length()) - 2

    @classmethod
    def _level_min(cls, v: int) -> int:
        return cls._level_max(v) // 2

    def _fwd_block(self, i: int, d: int) -> tuple[int, int | None]:
        end = min((i // self._b + 1) * self._b, len(self._bits))
        excess = 0
        for j in range(i, end):
            excess += 1 if self._bits[j] else -1
            if excess == d:
                return excess, j
        return excess, None

    def _bwd_block(self, i: int, d: int) -> tuple[int, int | None]:
        start = (i // self._b) * self._b
        excess = 0
        for j in range(i, start - 1, -1):
            excess -= 1 if self._bits[j] else -1
            if excess == d:
                return excess, j
        return excess, None

    def fwd_search(self, i: int, d: int) -> int:
        """Smallest ``j >= i`` whose excess over ``[i, j]`` is ``d``; ``len(self)`` if none."""
        n = len(self._bits)
        if not 0 <= i < n:
            raise IndexError(f"position {i} out of range for length {n}")
        excess, j = self._fwd_block(i, d)
        if j is not None:
            return j
        size = len(self._tree)
        v = self.leaf_node(i // self._b)
        while v + 1 <= self._level_max(v) and (
            v + 1 >= size
            or not _reaches(excess, d, self._tree[v + 1].minimum, self._tree[v + 1].maximum)
        ):
            if v & 1:
                excess += self._tree[v + 1].excess
            v = (v - 1) // 2
        if v == self._level_max(v):
            return n
        v += 1
        while 2 * v + 2 < size:
            left = self._tree[2 * v + 1]
            if _reaches(excess, d, left.minimum, left.maximum):
                v = 2 * v + 1
            else:
                excess += left.excess
                v = 2 * v + 2
        _, j = self._fwd_block(self.leaf_index(v) * self._b, d - excess)
        return n if j is None else j

    def bwd_search(self, i: int, d: int) -> int:
        """Largest ``j <= i`` whose right-to-left excess over ``[j, i]`` is ``d``; ``len(self)`` if none."""
        n = len(self._bits)
        if not 0 <= i < n:
            raise IndexError(f"position {i} out of range for length {n}")
        excess, j = self._bwd_block(i, d)
        if j is not None:
            return j
        size = len(self._tree)
        v = self.leaf_node(i // self._b)
        while (
            v != 0
            and v - 1 >= self._level_min(v)
            and not _reaches(
                excess, d, self._tree[v - 1].rev_minimum, self._tree[v - 1].rev_maximum
            )
        ):
            if v & 1 == 0:
                excess += self._tree[v - 1].rev_excess
            v = (v - 1) // 2
        if v == self._level_min(v):
            return n
        v -= 1
        while 2 * v + 2 < size:
            right = self._tree[2 * v + 2]
            if _reaches(excess, d, right.rev_minimum, right.rev_maximum):
                v = 2 * v + 2
            else:
                excess += right.rev_excess
                v = 2 * v + 1
        start = min(self.leaf_index(v) * self._b + self._b - 1, n - 1)
        _, j = self._bwd_block(start, d - excess)
        return n if j is None else j