"""Bit vectors with rank and select support: a plain one and an Elias-Fano sparse one."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from itertools import accumulate
from typing import Iterable


class PlainBitvector:
    """A mutable bit vector of fixed length with rank, select and predecessor queries.

    Rank counts are 0-based positions, select takes a 1-based occurrence number,
    so that ``select(b, rank(b, i)) == i`` whenever bit ``i`` equals ``b``.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("bit vector length must be non-negative")
        self._bits = bytearray(n)
        self._ones: list[int] | None = None
        self._zeros: list[int] | None = None

    @classmethod
    def from_ones(cls, ones: Iterable[int], n: int) -> "PlainBitvector":
        """Build a vector of length ``n`` with the given positions set."""
        vector = cls(n)
        for i in ones:
            vector.set(i)
        return vector

    def __len__(self) -> int:
        return len(self._bits)

    def _check_index(self, i: int) -> None:
        if not 0 <= i < len(self._bits):
            raise IndexError(f"bit index {i} out of range for length {len(self._bits)}")

    def _invalidate(self) -> None:
        self._ones = None
        self._zeros = None

    def _prefix(self, bit: int) -> list[int]:
        if self._ones is None:
            self._ones = list(accumulate(self._bits, initial=0))
            self._zeros = [j - ones for j, ones in enumerate(self._ones)]
        return self._ones if bit else self._zeros  # type: ignore[return-value]

    def set(self, i: int) -> None:
        self._check_index(i)
        self._bits[i] = 1
        self._invalidate()

    def clear(self, i: int) -> None:
        self._check_index(i)
        self._bits[i] = 0
        self._invalidate()

    def access(self, i: int) -> int:
        """Return bit ``i`` (0 or 1)."""
        self._check_index(i)
        return self._bits[i]

    def rank(self, bit: int, i: int, inclusive: bool = True) -> int:
        """Count the ``bit`` values in ``[0, i]``, or in ``[0, i)`` when not inclusive."""
        end = i + 1 if inclusive else i
        if not 0 <= end <= len(self._bits):
            raise IndexError(f"rank position {i} out of range for length {len(self._bits)}")
        return self._prefix(1 if bit else 0)[end]

    def select(self, bit: int, i: int) -> int:
        """Return the position of the ``i``-th (1-based) occurrence of ``bit``."""
        prefix = self._prefix(1 if bit else 0)
        if not 1 <= i <= prefix[-1]:
            raise IndexError(f"no occurrence {i} of bit {int(bool(bit))}")
        return bisect_left(prefix, i) - 1

    def pred0(self, i: int) -> int:
        """Return the last position ``<= i`` holding a 0."""
        return self.select(0, self.rank(0, i))

    def succ0(self, i: int) -> int:
        """Return the first position ``>= i`` holding a 0."""
        return self.select(0, self.rank(0, i, inclusive=False) + 1)


class SparseBitvector:
    """An immutable Elias-Fano bit vector suited to very few set bits.

    Each set position is split into ``lower_bits`` low bits, stored directly,
    and high bits, stored in unary inside a plain bit vector.
    """

    def __init__(self, ones: Iterable[int], n: int, lower_bits: int = 0) -> None:
        positions = list(ones)
        if n < 0:
            raise ValueError("bit vector length must be non-negative")
        for prev, cur in zip(positions, positions[1:]):
            if cur <= prev:
                raise ValueError("set positions must be strictly increasing")
        if positions and (positions[0] < 0 or positions[-1] >= n):
            raise ValueError("set positions must lie within the vector")

        self._n = n
        self._count = len(positions)
        self._last = positions[-1] if positions else 0
        self._lower_bits = lower_bits
        self._low: list[int] = []
        self._high = PlainBitvector(0)
        if not positions:
            return

        if self._lower_bits == 0:
            self._lower_bits = int(math.log(n / self._count) / math.log(2.0))
        if self._lower_bits < 1:
            self._lower_bits = 1
        mask = (1 << self._lower_bits) - 1

        self._low = [x & mask for x in positions]
        # One extra slot for the largest value and one for a closing 0.
        self._high = PlainBitvector((self._last >> self._lower_bits) + self._count + 2)
        for k, x in enumerate(positions):
            self._high.set((x >> self._lower_bits) + k)

    @classmethod
    def from_bits(cls, bits: Iterable[int], lower_bits: int = 0) -> "SparseBitvector":
        """Build from a sequence of 0/1 (or boolean) values."""
        values = list(bits)
        return cls((i for i, b in enumerate(values) if b), len(values), lower_bits)

    def __len__(self) -> int:
        return self._n

    def access(self, i: int) -> int:
        """Return bit ``i`` (0 or 1)."""
        if not 0 <= i < self._n:
            raise IndexError(f"bit index {i} out of range for length {self._n}")
        return self.rank1(i) - self.rank1(i, inclusive=False)

    def rank1(self, i: int, inclusive: bool = True) -> int:
        """Count the 1s in ``[0, i]``, or in ``[0, i)`` when not inclusive."""
        if not inclusive:
            if i == 0:
                return 0
            i -= 1
        if i < 0:
            raise IndexError(f"rank position {i} must be non-negative")
        if i >= self._last:
            return self._count

        high_part = i >> self._lower_bits
        low_part = i & ((1 << self._lower_bits) - 1)
        # The k-th 0 in the high bits closes bucket k-1; the ones before it
        # are the elements of all earlier buckets.
        start = 0 if high_part == 0 else self._high.select(0, high_part) - (high_part - 1)
        end = self._high.select(0, high_part + 1) - high_part
        return bisect_right(self._low, low_part, start, end)

    def select(self, i: int) -> int:
        """Return the position of the ``i``-th (1-based) 1; past the last one, the last one's position."""
        if i > self._count:
            return self._last
        if i < 1:
            raise IndexError("select is 1-based")
        high_part = self._high.select(1, i) - (i - 1)
        return (high_part << self._lower_bits) + self._low[i - 1]