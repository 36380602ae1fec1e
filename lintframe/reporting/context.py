"""Context row selection around a reported span."""
from __future__ import annotations

from lintframe.source import LineIndex, row_start, total_rows

ContextRow = tuple[int, int]


def context_rows_before(
    code: bytes,
    start_row: int,
    count: int,
    *,
    index: LineIndex | None = None,
) -> list[ContextRow]:
    """Return up to *count* ``(row, offset)`` pairs preceding *start_row*.

    The window shrinks near the top of the buffer instead of failing.
    """

    if start_row == 0 or count == 0:
        return []

    first = max(0, start_row - count)
    return [(row, _row_start(code, row, index)) for row in range(first, start_row)]


def context_rows_after(
    code: bytes,
    end_row: int,
    count: int,
    *,
    index: LineIndex | None = None,
) -> list[ContextRow]:
    """Return up to *count* ``(row, offset)`` pairs following *end_row*.

    A trailing newline terminates a final, empty row which is eligible as
    context like any other.
    """

    rows = index.total_rows() if index is not None else total_rows(code)
    if end_row + 1 >= rows or count == 0:
        return []

    last = min(rows, end_row + 1 + count)
    return [(row, _row_start(code, row, index)) for row in range(end_row + 1, last)]


def _row_start(code: bytes, row: int, index: LineIndex | None) -> int:
    if index is not None:
        return index.row_start(row)
    return row_start(code, row)


__all__ = [
    "ContextRow",
    "context_rows_after",
    "context_rows_before",
]
