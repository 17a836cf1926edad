"""Sparse matrices stored as a list of rows, each holding its non-zero entries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass
class RowList:
    """One matrix row: its 1-based number and its (1-based column, value) pairs."""

    row_number: int
    values: list[tuple[int, int]] = field(default_factory=list)


def build_row_lists(matrix: Iterable[Sequence[int]]) -> list[RowList]:
    """Return one RowList per matrix row, keeping only the non-zero cells."""
    return [
        RowList(
            row_number,
            [(column, value) for column, value in enumerate(row, start=1) if value != 0],
        )
        for row_number, row in enumerate(matrix, start=1)
    ]


def format_row_lists(rows: Iterable[RowList]) -> str:
    """Return the listing of every row that has entries, with its columns and values."""
    parts: list[str] = []
    for row in rows:
        if not row.values:
            continue
        parts.append(f"\nrow= {row.row_number}")
        parts.extend(f"\n column= {column} value= {value}" for column, value in row.values)
    return "".join(parts)


def busiest_row(rows: Iterable[RowList]) -> int | None:
    """Return the number of the first row with the most non-zero cells, or None if there are none."""
    best_row, best_count = None, 0
    for row in rows:
        if len(row.values) > best_count:
            best_row, best_count = row.row_number, len(row.values)
    return best_row