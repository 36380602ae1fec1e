from __future__ import annotations

from pathlib import Path

import pytest

from lintframe.errors import InputValidationError
from lintframe.utils import expand_source_arguments, format_display_path, load_source_bytes


def test_load_source_bytes_keeps_raw_content(tmp_path: Path) -> None:
    source = tmp_path / "probe.bpf.c"
    source.write_bytes(b"int x;\r\n\xff\n")

    assert load_source_bytes(source) == b"int x;\r\n\xff\n"


def test_load_source_bytes_raises_when_missing(tmp_path: Path) -> None:
    with pytest.raises(InputValidationError) as exc:
        load_source_bytes(tmp_path / "missing.c")

    assert "Unable to read the source file" in exc.value.message


def test_load_source_bytes_rejects_embedded_nul(tmp_path: Path) -> None:
    with pytest.raises(InputValidationError) as exc:
        load_source_bytes(tmp_path / "bad\0name.c")

    assert "Unable to read the source file" in exc.value.message


def test_expand_source_arguments_reads_file_lists(tmp_path: Path) -> None:
    file_list = tmp_path / "srcs.txt"
    file_list.write_text("1st\n\n  2nd  \n", encoding="utf-8")

    paths = expand_source_arguments(["foobar", f"@{file_list}", "last"])

    assert paths == [Path("foobar"), Path("1st"), Path("2nd"), Path("last")]


def test_expand_source_arguments_reports_missing_list(tmp_path: Path) -> None:
    with pytest.raises(InputValidationError) as exc:
        expand_source_arguments([f"@{tmp_path / 'nope.txt'}"])

    assert "Failed to open file list" in exc.value.message


def test_format_display_path_quotes_spaces() -> None:
    assert format_display_path(Path("dir/file.c")) == "dir/file.c"
    assert format_display_path("my dir/file.c") == '"my dir/file.c"'
