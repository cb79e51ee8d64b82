"""Mapping between symbols and dense integer codes."""

from __future__ import annotations

from typing import Hashable, Iterable


def _log2_ceil(n: int) -> int:
    return 0 if n <= 1 else (n - 1).bit_length()


class Alphabet:
    """A plain fixed-width code: the k-th symbol is encoded as k."""

    def __init__(self, symbols: Iterable[Hashable]) -> None:
        self._symbols = tuple(symbols)
        self._codes: dict[Hashable, int] = {}
        for code, symbol in enumerate(self._symbols):
            if symbol in self._codes:
                raise ValueError(f"duplicate symbol {symbol!r}")
            self._codes[symbol] = code
        self._code_length = _log2_ceil(len(self._symbols))

    def encode(self, symbol: Hashable) -> int:
        """Return the code of ``symbol``; symbols outside the alphabet map to 0."""
        return self._codes.get(symbol, 0)

    def decode(self, code: int) -> Hashable:
        """Return the symbol with the given code."""
        if not 0 <= code < len(self._symbols):
            raise IndexError(f"code {code} outside alphabet of size {len(self._symbols)}")
        return self._symbols[code]

    def code_length(self, symbol: Hashable) -> int:
        """Number of bits used for ``symbol``; 0 for symbols outside the alphabet."""
        return self._code_length if symbol in self._codes else 0

    def capacity(self) -> int:
        """Number of distinct codes the code width can express."""
        return 1 << self._code_length

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._codes

    def __len__(self) -> int:
        return len(self._symbols)