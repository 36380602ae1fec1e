from __future__ import annotations

import pytest

from lintframe.source import LineIndex, Lines, row_start, total_rows

CODE = b"line 0\nline 1\nline 2\n"


def test_row_start_finds_line_offsets() -> None:
    assert row_start(CODE, 0) == 0
    assert row_start(CODE, 1) == 7
    assert row_start(CODE, 2) == 14
    assert row_start(CODE, 3) == 21


def test_row_start_falls_back_to_zero_beyond_buffer() -> None:
    assert row_start(CODE, 10) == 0
    assert row_start(b"", 1) == 0
    assert row_start(b"no newline", 1) == 0


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        (b"", 0),
        (b"x", 1),
        (b"single line", 1),
        (b"line 1\nline 2", 2),
        (b"line 1\nline 2\n", 3),
        (b"\n", 2),
        (b"\n\n\n", 4),
    ],
)
def test_total_rows(code: bytes, expected: int) -> None:
    assert total_rows(code) == expected


def test_row_start_round_trips_through_rescan() -> None:
    code = b"alpha\n\nbeta gamma\n  delta\nepsilon"

    for row in range(total_rows(code)):
        offset = row_start(code, row)
        assert code[:offset].count(b"\n") == row
        assert offset == 0 or code[offset - 1 : offset] == b"\n"


def test_line_index_matches_scanning_helpers() -> None:
    code = b"alpha\n\nbeta gamma\n  delta\nepsilon\n"
    index = LineIndex.from_bytes(code)

    assert index.total_rows() == total_rows(code)
    for row in range(total_rows(code) + 3):
        assert index.row_start(row) == row_start(code, row)


def test_line_index_for_empty_buffer() -> None:
    index = LineIndex.from_bytes(b"")

    assert index.total_rows() == 0
    assert index.row_start(0) == 0
    assert index.row_start(4) == 0


def test_lines_yields_from_offset_without_newlines() -> None:
    assert list(Lines(CODE, 7)) == [b"line 1", b"line 2", b""]


def test_lines_rewinds_to_start_of_containing_line() -> None:
    assert Lines(CODE, 10).first() == b"line 1"
    assert Lines(CODE, 6).first() == b"line 0"


def test_lines_is_restartable() -> None:
    lines = Lines(b"one\ntwo", 0)

    assert list(lines) == [b"one", b"two"]
    assert list(lines) == [b"one", b"two"]


def test_lines_at_end_of_buffer_yields_single_empty_line() -> None:
    assert list(Lines(CODE, len(CODE))) == [b""]
    assert list(Lines(b"", 0)) == [b""]


def test_lines_past_end_of_buffer_yields_nothing() -> None:
    assert list(Lines(CODE, len(CODE) + 1)) == []
    assert Lines(CODE, 100).first() is None
