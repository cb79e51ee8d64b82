"""Read-to-taxon assignments parsed from classification output."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from itertools import groupby
from typing import Iterable


class OutputFormat(enum.Enum):
    """Layouts for abundance reports."""

    CENTRIFUGER = 0
    METAPHLAN = 1
    CAMI = 2


@dataclass(frozen=True)
class ReadAssignment:
    """The set of targets a read hit, with its weighted and raw counts."""

    targets: tuple[int, ...]
    weight: float = 1.0
    count: float = 1.0
    uniq_count: float = 0.0

    @property
    def sort_key(self) -> tuple[int, tuple[int, ...]]:
        """Order by number of targets first, then by the targets themselves."""
        return len(self.targets), self.targets


def assignment_weight(score: int, hit_length: int, read_length: int) -> float:
    """Weight of an assignment: each unmatched base beyond 1% of the read divides it by 4.

    The penalty stops growing after 11 such bases.
    """
    diff = read_length - hit_length
    tolerance = int(read_length * 0.01)
    if diff < tolerance:
        return 1.0
    diff = min(diff - tolerance, 11)
    return 1.0 / (1 << (2 * diff))


def coalesce_assignments(assignments: Iterable[ReadAssignment]) -> list[ReadAssignment]:
    """Merge assignments with identical targets, summing their counts, in sorted order."""
    ordered = sorted(assignments, key=lambda a: a.sort_key)
    merged = []
    for _, group in groupby(ordered, key=lambda a: a.targets):
        items = list(group)
        first = items[0]
        merged.append(
            replace(
                first,
                weight=sum(a.weight for a in items),
                count=sum(a.count for a in items),
                uniq_count=sum(a.uniq_count for a in items),
            )
        )
    return merged


def _parse_line(line: str) -> tuple[str, int, int, int, int, int]:
    fields = line.rstrip("\r\n").split("\t")
    if len(fields) < 7:
        raise ValueError(f"malformed classification line: {line!r}")
    read_id = fields[0]
    try:
        taxid, score, second, hit_length, read_length = (int(f) for f in fields[2:7])
    except ValueError as exc:
        raise ValueError(f"malformed classification line: {line!r}") from exc
    return read_id, taxid, score, second, hit_length, read_length


def parse_classification(
    lines: Iterable[str], min_score: int = 0, min_hit_length: int = 0
) -> list[ReadAssignment]:
    """Collect assignments from classification output; the first line is a header.

    Consecutive lines with the same read id form one assignment. Lines with a
    hit shorter than ``min_hit_length``, a score below ``min_score`` or tax ID 0
    are ignored. The result is coalesced.
    """
    assignments: list[ReadAssignment] = []
    current_id: str | None = None
    targets: list[int] = []
    weight = count = uniq = 0.0

    def flush() -> None:
        if current_id is not None and targets:
            assignments.append(ReadAssignment(tuple(targets), weight, count, uniq))

    iterator = iter(lines)
    next(iterator, None)
    for line in iterator:
        if not line.strip():
            continue
        read_id, taxid, score, second, hit_length, read_length = _parse_line(line)
        if hit_length < min_hit_length or score < min_score or taxid == 0:
            continue
        if read_id != current_id:
            flush()
            current_id = read_id
            targets = []
            weight = assignment_weight(score, hit_length, read_length)
            count = 1.0
            uniq = 1.0 if score > second else 0.0
        targets.append(taxid)
    flush()
    return coalesce_assignments(assignments)