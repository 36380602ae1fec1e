"""Loading of rule-engine findings documents (YAML or JSON)."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

import yaml

from lintframe.errors import InputValidationError
from lintframe.models import LintMatch, Point, Range
from lintframe.utils import format_display_path

_SPAN_KEYS = ("bytes", "start", "end")


@dataclass(frozen=True)
class Finding:
    """A lint match tied to the source file it was reported against."""

    path: Path
    label: str
    match: LintMatch


def load_findings(path: Path) -> tuple[Finding, ...]:
    """Load and validate the findings listed in the document at *path*.

    Relative source paths are resolved against the document's directory; the
    label used in reports is the path exactly as written.
    """

    payload = _load_document(path)
    entries = payload.get("findings")
    if entries is None:
        return ()
    if not isinstance(entries, Sequence) or isinstance(entries, str | bytes):
        raise InputValidationError(
            message=f"Findings document {format_display_path(path)} must list findings.",
            remediation="Provide a 'findings' sequence of mappings.",
        )

    base = path.parent
    return tuple(_parse_entry(entry, index, path, base) for index, entry in enumerate(entries))


def lint_names(findings: Sequence[Finding]) -> tuple[str, ...]:
    """Return the distinct lint names in first-appearance order."""

    return tuple(dict.fromkeys(finding.match.lint_name for finding in findings))


def _load_document(path: Path) -> dict:
    display = format_display_path(path)
    try:
        raw_text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputValidationError(
            message=f"Unable to read findings document {display}.",
            remediation="Check the path and file permissions and retry.",
        ) from exc

    try:
        loaded = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        raise InputValidationError(
            message=f"Findings document {display} is not valid YAML or JSON.",
            remediation="Ensure the rule engine output was written completely.",
        ) from exc

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise InputValidationError(
            message=f"Findings document {display} must define a mapping at the root level.",
            remediation="Wrap the entries in a top-level 'findings' key.",
        )
    return loaded


def _parse_entry(entry: object, index: int, source: Path, base: Path) -> Finding:
    if not isinstance(entry, Mapping):
        raise _entry_error(source, index, "must be a mapping")

    label = _require_text(entry, "path", source, index)
    lint_name = _require_text(entry, "lint", source, index)
    message = _require_text(entry, "message", source, index)
    if "\0" in label:
        raise _entry_error(source, index, "has a NUL byte in its 'path'")

    present = [key for key in _SPAN_KEYS if entry.get(key) is not None]
    if not present:
        span = Range()
    elif len(present) != len(_SPAN_KEYS):
        missing = ", ".join(key for key in _SPAN_KEYS if key not in present)
        raise _entry_error(source, index, f"is missing span keys: {missing}")
    else:
        start_byte, end_byte = _pair(entry["bytes"], "bytes", source, index)
        start = Point(*_pair(entry["start"], "start", source, index))
        end = Point(*_pair(entry["end"], "end", source, index))
        if start_byte > end_byte:
            raise _entry_error(source, index, "has a byte range that ends before it starts")
        if (start.row, start.col) > (end.row, end.col):
            raise _entry_error(source, index, "has an end point before its start point")
        span = Range(bytes=(start_byte, end_byte), start_point=start, end_point=end)

    candidate = Path(label).expanduser()
    resolved = candidate if candidate.is_absolute() else base / candidate
    return Finding(
        path=resolved,
        label=label,
        match=LintMatch(lint_name=lint_name, message=message, range=span),
    )


def _require_text(entry: Mapping, key: str, source: Path, index: int) -> str:
    value = entry.get(key)
    if not isinstance(value, str) or not value.strip():
        raise _entry_error(source, index, f"needs a non-empty '{key}' string")
    return value


def _pair(value: object, key: str, source: Path, index: int) -> tuple[int, int]:
    if (
        isinstance(value, Sequence)
        and not isinstance(value, str | bytes)
        and len(value) == 2
        and all(isinstance(item, int) and not isinstance(item, bool) for item in value)
        and all(item >= 0 for item in value)
    ):
        return value[0], value[1]
    raise _entry_error(source, index, f"needs '{key}' as two non-negative integers")


def _entry_error(source: Path, index: int, problem: str) -> InputValidationError:
    return InputValidationError(
        message=f"Finding #{index} in {format_display_path(source)} {problem}.",
        remediation="Each finding needs path, lint, message and optionally bytes/start/end.",
    )


__all__ = [
    "Finding",
    "lint_names",
    "load_findings",
]
