"""Row/offset bookkeeping and line extraction over raw source bytes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

NEWLINE = b"\n"


def row_start(code: bytes, row: int) -> int:
    """Return the byte offset at which *row* begins.

    Row 0 always starts at offset 0. When *code* holds fewer newlines than
    *row* requires, 0 is returned as well.
    """

    if row == 0:
        return 0

    position = -1
    for _ in range(row):
        position = code.find(NEWLINE, position + 1)
        if position == -1:
            return 0
    return position + 1


def total_rows(code: bytes) -> int:
    """Return the number of rows in *code*; an unterminated last line counts."""

    if not code:
        return 0
    return code.count(NEWLINE) + 1


@dataclass(frozen=True)
class LineIndex:
    """Precomputed row start offsets for a single source buffer.

    Answers the same questions as :func:`row_start` and :func:`total_rows`
    without rescanning the buffer, so one index can serve every match
    reported against the same file.
    """

    starts: tuple[int, ...]
    length: int

    @classmethod
    def from_bytes(cls, code: bytes) -> LineIndex:
        starts = [0]
        position = code.find(NEWLINE)
        while position != -1:
            starts.append(position + 1)
            position = code.find(NEWLINE, position + 1)
        return cls(starts=tuple(starts), length=len(code))

    def row_start(self, row: int) -> int:
        if 0 <= row < len(self.starts):
            return self.starts[row]
        return 0

    def total_rows(self) -> int:
        if self.length == 0:
            return 0
        return len(self.starts)


class Lines:
    """Restartable iterable over the lines of *code* from a byte offset on.

    Iteration begins with the line containing *offset* and yields each line
    without its terminating newline. An offset at the very end of the buffer
    yields a single empty line; an offset beyond it yields nothing.
    """

    def __init__(self, code: bytes, offset: int) -> None:
        self._code = code
        self._offset = offset

    def __iter__(self) -> Iterator[bytes]:
        code = self._code
        if self._offset < 0 or self._offset > len(code):
            return

        position = code.rfind(NEWLINE, 0, self._offset) + 1
        while True:
            end = code.find(NEWLINE, position)
            if end == -1:
                yield code[position:]
                return
            yield code[position:end]
            position = end + 1

    def first(self) -> bytes | None:
        """Return the first line, or None when the offset maps to no content."""

        return next(iter(self), None)


__all__ = [
    "LineIndex",
    "Lines",
    "row_start",
    "total_rows",
]
