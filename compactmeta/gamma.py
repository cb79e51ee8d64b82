"""Elias gamma codes and an array of gamma-coded integers with sampled pointers."""

from __future__ import annotations

from itertools import accumulate
from operator import index
from typing import Iterable, Iterator

_DEFAULT_BLOCK_SIZE = 64


def gamma_encode(value: int) -> str:
    """Return the Elias gamma code of a positive integer as a string of '0'/'1'.

    The code is ``k - 1`` zeros followed by the ``k``-bit binary form of ``value``.
    """
    if value < 1:
        raise ValueError(f"gamma codes cover positive integers only, got {value}")
    binary = format(value, "b")
    return "0" * (len(binary) - 1) + binary


def gamma_decode(bits: str, offset: int = 0) -> tuple[int, int]:
    """Decode one gamma code starting at ``offset``.

    Returns the decoded value and the number of bits the code occupied.
    """
    if not 0 <= offset <= len(bits):
        raise IndexError(f"offset {offset} outside a bit string of length {len(bits)}")
    pos = offset
    while pos < len(bits) and bits[pos] == "0":
        pos += 1
    zeros = pos - offset
    end = pos + zeros + 1
    if end > len(bits):
        raise ValueError("truncated gamma code")
    return int(bits[pos:end], 2), end - offset


class GammaArray:
    """An immutable array of non-negative integers stored as gamma codes.

    Every ``block_size``-th element has its bit offset sampled, so reading
    element ``i`` decodes at most ``block_size`` codes.
    """

    def __init__(self, values: Iterable[int], block_size: int = 0) -> None:
        items = list(values)
        for value in items:
            if value < 0:
                raise ValueError(f"values must be non-negative, got {value}")
        self._block_size = block_size if block_size > 1 else _DEFAULT_BLOCK_SIZE
        self._length = len(items)
        # Shift by one so that 0 can be stored.
        codes = [gamma_encode(value + 1) for value in items]
        offsets = list(accumulate((len(code) for code in codes), initial=0))
        self._bits = "".join(codes)
        self._pointers = offsets[: self._length : self._block_size]

    @property
    def block_size(self) -> int:
        return self._block_size

    @property
    def bit_length(self) -> int:
        """Total number of bits used by the codes."""
        return len(self._bits)

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, i: int) -> int:
        i = index(i)
        if i < 0:
            i += self._length
        if not 0 <= i < self._length:
            raise IndexError(f"index out of range for array of length {self._length}")
        block, within = divmod(i, self._block_size)
        offset = self._pointers[block]
        for _ in range(within):
            _, length = gamma_decode(self._bits, offset)
            offset += length
        value, _ = gamma_decode(self._bits, offset)
        return value - 1

    def __iter__(self) -> Iterator[int]:
        offset = 0
        for _ in range(self._length):
            value, length = gamma_decode(self._bits, offset)
            offset += length
            yield value - 1