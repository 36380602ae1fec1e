"""Terminal-style rendering of lint matches as annotated source excerpts."""
from __future__ import annotations

import io
import os
from dataclasses import dataclass
from typing import Iterator, TextIO

from lintframe.errors import ReportInvariantError, ReportWriteError
from lintframe.models import LintMatch
from lintframe.source import LineIndex, Lines

from .context import context_rows_after, context_rows_before


@dataclass(frozen=True)
class ReportOptions:
    """Render-time switches; ``extra_lines`` is ``(lines_before, lines_after)``."""

    extra_lines: tuple[int, int] | None = None

    @property
    def lines_before(self) -> int:
        if self.extra_lines is None:
            return 0
        return self.extra_lines[0]

    @property
    def lines_after(self) -> int:
        if self.extra_lines is None:
            return 0
        return self.extra_lines[1]


def report_terminal(
    match: LintMatch,
    code: bytes,
    path: str | os.PathLike[str],
    writer: TextIO,
) -> None:
    """Report *match* without extra context lines.

    Example output::

        warning: [probe-read] bpf_probe_read() is deprecated
          --> example.bpf.c:43:24
           |
        43 |                         bpf_probe_read(event.comm, TASK_COMM_LEN, prev->comm);
           |                         ^^^^^^^^^^^^^^
           |
    """

    report_terminal_opts(match, code, path, writer, ReportOptions())


def report_terminal_opts(
    match: LintMatch,
    code: bytes,
    path: str | os.PathLike[str],
    writer: TextIO,
    opts: ReportOptions,
    *,
    index: LineIndex | None = None,
) -> None:
    """Report *match* against *code*, honouring the context lines in *opts*.

    - ``code`` is the complete source buffer the match was produced from
    - ``path`` labels the location line and is printed verbatim
    - ``writer`` receives the report; write failures raise ``ReportWriteError``
    - ``index`` is an optional prebuilt :class:`LineIndex` for ``code``,
      useful when many matches are reported against the same buffer

    Example output with ``extra_lines=(2, 2)``::

        warning: [probe-read] bpf_probe_read() is deprecated
          --> example.bpf.c:43:4
           |
        41 |     struct task_struct *prev = (struct task_struct *)ctx[1];
        42 |     struct event event = {0};
        43 |     bpf_probe_read(event.comm, TASK_COMM_LEN, prev->comm);
           |     ^^^^^^^^^^^^^^
        44 |     return 0;
        45 | }
           |
    """

    span = match.range
    start_row = span.start_point.row
    end_row = span.end_point.row
    start_col = span.start_point.col
    end_col = span.end_point.col

    _writeln(writer, f"warning: [{match.lint_name}] {match.message}")
    _writeln(writer, f"  --> {os.fspath(path)}:{start_row}:{start_col}")

    if span.is_empty:
        return

    before = context_rows_before(code, start_row, opts.lines_before, index=index)
    after = context_rows_after(code, end_row, opts.lines_after, index=index)

    max_row = after[-1][0] if after else end_row
    prefix = f"{'':{len(str(max_row))}} | "
    _writeln(writer, prefix)

    for row, offset in before:
        _writeln(writer, f"{row} | {_decode(_line_at(code, offset, row))}")

    if start_row == end_row:
        line = _line_at(code, span.start, start_row)
        _writeln(writer, f"{start_row} | {_decode(line)}")
        carets = "^" * max(0, end_col - start_col)
        _writeln(writer, f"{prefix}{' ' * start_col}{carets}")
    else:
        lines = iter(Lines(code, span.start))
        for row in range(start_row, end_row + 1):
            line = _next_line(lines, row)
            marker = "/" if row == start_row else "|"
            _writeln(writer, f"{row} |  {marker} {_decode(line)}")
        _writeln(writer, f"{prefix} |{'_' * end_col}^")

    for row, offset in after:
        _writeln(writer, f"{row} | {_decode(_line_at(code, offset, row))}")

    _writeln(writer, prefix)


def render_report(
    match: LintMatch,
    code: bytes,
    path: str | os.PathLike[str],
    opts: ReportOptions | None = None,
    *,
    index: LineIndex | None = None,
) -> str:
    """Return the report for *match* as a string."""

    buffer = io.StringIO()
    report_terminal_opts(match, code, path, buffer, opts or ReportOptions(), index=index)
    return buffer.getvalue()


def _line_at(code: bytes, offset: int, row: int) -> bytes:
    line = Lines(code, offset).first()
    if line is None:
        raise ReportInvariantError(
            message=f"No source line at byte offset {offset} (row {row}).",
            remediation="The match span does not belong to the supplied source buffer.",
        )
    return line


def _next_line(lines: Iterator[bytes], row: int) -> bytes:
    line = next(lines, None)
    if line is None:
        raise ReportInvariantError(
            message=f"Source ended before row {row} of a multi-line match.",
            remediation="The match span does not belong to the supplied source buffer.",
        )
    return line


def _decode(line: bytes) -> str:
    return line.decode("utf-8", errors="replace")


def _writeln(writer: TextIO, text: str) -> None:
    try:
        writer.write(f"{text}\n")
    except (OSError, ValueError) as exc:
        raise ReportWriteError(
            message=f"Failed to write report output: {exc}",
            remediation="Check that the output destination is still open and writable.",
        ) from exc


__all__ = [
    "ReportOptions",
    "render_report",
    "report_terminal",
    "report_terminal_opts",
]
