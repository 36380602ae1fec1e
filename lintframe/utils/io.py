"""Filesystem helpers for reading sources and file lists."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from lintframe.errors import InputValidationError

_FILE_LIST_PREFIX = "@"


def format_display_path(path: Path | str) -> str:
    """Format a path for messages, quoting it when spaces are present."""

    value = str(path)
    if " " in value:
        return f'"{value}"'
    return value


def load_source_bytes(path: Path, description: str = "source") -> bytes:
    """Read *path* as raw bytes; spans index into the undecoded content."""

    try:
        return path.read_bytes()
    except (OSError, ValueError) as exc:
        raise InputValidationError(
            message=f"Unable to read the {description} file {format_display_path(path)}.",
            remediation=(
                "Verify the file exists, is readable and is not locked by another process."
            ),
        ) from exc


def expand_source_arguments(values: Iterable[str]) -> list[Path]:
    """Expand CLI source arguments, reading ``@file`` entries as path lists.

    ``@list.txt`` contributes every non-blank line of ``list.txt`` (stripped)
    as a path; any other value is taken as a path as-is.
    """

    paths: list[Path] = []
    for value in values:
        if not value.startswith(_FILE_LIST_PREFIX):
            paths.append(Path(value))
            continue

        list_path = Path(value[len(_FILE_LIST_PREFIX) :])
        try:
            content = list_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InputValidationError(
                message=f"Failed to open file list {format_display_path(list_path)}.",
                remediation="Check the path after '@' and make sure it is a readable text file.",
            ) from exc

        for line in content.splitlines():
            trimmed = line.strip()
            if trimmed:
                paths.append(Path(trimmed))
    return paths


__all__ = [
    "expand_source_arguments",
    "format_display_path",
    "load_source_bytes",
]
