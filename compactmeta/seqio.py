"""Streaming reader for FASTA and FASTQ records."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import IO, Iterable, Iterator, Union

_HEADER_MARKS = ">@"
_WHITESPACE = " \t\n\v\f\r"

Source = Union[str, bytes, IO[str], IO[bytes], Iterable[str], Iterable[bytes]]


class FastxError(ValueError):
    """Raised when a FASTQ record is malformed or truncated."""


@dataclass(frozen=True)
class FastxRecord:
    """One sequence record; ``qual`` is ``None`` for FASTA records."""

    name: str
    comment: str
    seq: str
    qual: str | None = None

    @property
    def is_fastq(self) -> bool:
        return self.qual is not None


def _raw_lines(stream: Source) -> Iterator[str]:
    if isinstance(stream, (str, bytes)):
        stream = io.StringIO(stream) if isinstance(stream, str) else io.BytesIO(stream)
    for line in stream:
        yield line.decode("latin-1") if isinstance(line, bytes) else line


def _strip_eol(raw: str) -> str:
    if raw.endswith("\n"):
        raw = raw[:-1]
    if raw.endswith("\r"):
        raw = raw[:-1]
    return raw


def _split_header(header: str) -> tuple[str, str]:
    """Split a header line (without its marker) into name and comment."""
    for pos, char in enumerate(header):
        if char in _WHITESPACE:
            if char == "\n":
                return header[:pos], ""
            return header[:pos], _strip_eol(header[pos + 1 :])
    return header, ""


def _find_header(lines: Iterator[str]) -> str | None:
    for raw in lines:
        positions = [p for p in (raw.find(m) for m in _HEADER_MARKS) if p >= 0]
        if positions:
            return raw[min(positions) + 1 :]
    return None


def read_fastx(stream: Source) -> Iterator[FastxRecord]:
    """Yield the FASTA/FASTQ records of ``stream``, which may mix both kinds.

    Text before the first ``>`` or ``@`` is ignored. Sequence lines are joined
    and empty lines skipped. Quality lines are read until they are as long as
    the sequence, so they may start with ``@``.
    """
    lines = _raw_lines(stream)
    pending: str | None = None
    while True:
        header = pending if pending is not None else _find_header(lines)
        pending = None
        if header is None or header == "":
            return
        name, comment = _split_header(header)

        parts: list[str] = []
        separator: str | None = None
        for raw in lines:
            first = raw[:1]
            if first and first in _HEADER_MARKS:
                pending = raw[1:]
                break
            if first == "+":
                separator = raw
                break
            line = _strip_eol(raw)
            if line:
                parts.append(line)
        seq = "".join(parts)

        if separator is None:
            yield FastxRecord(name, comment, seq)
            if pending is None:
                return
            continue

        if not separator.endswith("\n"):
            raise FastxError(f"record {name!r} has no quality string")
        qual = ""
        while True:
            raw = next(lines, None)
            if raw is None:
                break
            qual += _strip_eol(raw)
            if len(qual) >= len(seq):
                break
        if len(qual) != len(seq):
            raise FastxError(
                f"record {name!r}: quality length {len(qual)} differs from sequence length {len(seq)}"
            )
        yield FastxRecord(name, comment, seq, qual)