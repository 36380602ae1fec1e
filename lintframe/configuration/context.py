"""Context-line configuration: CLI values, YAML config files and their merge."""
from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import yaml

from lintframe.errors import InputValidationError
from lintframe.reporting import ReportOptions

MAX_CONTEXT_LINES = 255
_COUNT_PATTERN = re.compile(r"\+?[0-9]+")
_CONTEXT_KEYS = frozenset({"before", "after"})


@dataclass(frozen=True)
class ContextConfig:
    """Context line counts read from a configuration file."""

    before: int | None = None
    after: int | None = None
    source: Path | None = None


def parse_context_line_count(value: str | int) -> int:
    """Convert *value* into a context line count between 0 and 255."""

    if isinstance(value, bool):
        count = None
    elif isinstance(value, int):
        count = value
    elif isinstance(value, str) and _COUNT_PATTERN.fullmatch(value):
        count = int(value)
    else:
        count = None

    if count is None or not 0 <= count <= MAX_CONTEXT_LINES:
        raise InputValidationError(
            message=f"invalid context line count: '{value}' (must be 0-{MAX_CONTEXT_LINES})",
            remediation="Pass a whole number of lines between 0 and 255.",
        )
    return count


def resolve_context_options(
    before: int | None = None,
    after: int | None = None,
    context: int | None = None,
    *,
    config: ContextConfig | None = None,
) -> ReportOptions:
    """Combine ``-B``/``-A``/``-C`` style values into :class:`ReportOptions`.

    ``context`` sets both counts and cannot be combined with ``before`` or
    ``after``. Explicit values win over those from *config*. A resulting
    ``(0, 0)`` means no extra lines at all.
    """

    if context is not None and (before is not None or after is not None):
        raise InputValidationError(
            message="The --context option cannot be combined with --before or --after.",
            remediation="Use either -C N or any of -B N / -A N.",
        )

    if context is not None:
        lines_before = lines_after = parse_context_line_count(context)
    else:
        fallback = config or ContextConfig()
        lines_before = _pick(before, fallback.before)
        lines_after = _pick(after, fallback.after)

    if lines_before == 0 and lines_after == 0:
        return ReportOptions()
    return ReportOptions(extra_lines=(lines_before, lines_after))


def load_context_config(path: Path) -> ContextConfig:
    """Load the ``context`` section from the YAML configuration file at *path*.

    ``context`` may be a single count applied before and after the match, or
    a mapping with optional ``before`` and ``after`` keys.
    """

    resolved = _resolve_path(path)
    payload = _load_yaml(resolved)
    unknown = sorted(str(key) for key in payload if key != "context")
    if unknown:
        raise InputValidationError(
            message=f"Config file {resolved} has unsupported keys: {', '.join(unknown)}.",
            remediation="Only a 'context' section is recognised.",
        )

    section = payload.get("context")
    if section is None:
        return ContextConfig(source=resolved)

    if isinstance(section, Mapping):
        extra = sorted(str(key) for key in section if key not in _CONTEXT_KEYS)
        if extra:
            raise InputValidationError(
                message=f"Context section in {resolved} has unsupported keys: {', '.join(extra)}.",
                remediation="Use 'before' and/or 'after' under 'context'.",
            )
        return ContextConfig(
            before=_optional_count(section.get("before"), resolved),
            after=_optional_count(section.get("after"), resolved),
            source=resolved,
        )

    count = _optional_count(section, resolved)
    return ContextConfig(before=count, after=count, source=resolved)


def _pick(explicit: int | None, configured: int | None) -> int:
    if explicit is not None:
        return parse_context_line_count(explicit)
    if configured is not None:
        return configured
    return 0


def _optional_count(value: object, source: Path) -> int | None:
    if value is None:
        return None
    try:
        return parse_context_line_count(value)  # type: ignore[arg-type]
    except InputValidationError as exc:
        raise InputValidationError(
            message=f"{exc.message} in config file {source}",
            remediation=exc.remediation,
        ) from exc


def _resolve_path(path: Path) -> Path:
    candidate = path.expanduser()
    try:
        resolved = candidate.resolve()
    except OSError:
        resolved = candidate

    if not resolved.exists() or not resolved.is_file():
        raise InputValidationError(
            message=f"Config file {resolved} does not exist or is not a file.",
            remediation="Verify the path or remove the --config option.",
        )
    return resolved


def _load_yaml(path: Path) -> dict:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InputValidationError(
            message=f"Unable to read config file {path}.",
            remediation="Check file permissions and retry.",
        ) from exc

    try:
        loaded = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        raise InputValidationError(
            message=f"Config file {path} contains invalid YAML.",
            remediation="Ensure the file follows the documented schema.",
        ) from exc

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise InputValidationError(
            message=f"Config file {path} must define a mapping at the root level.",
            remediation="Provide a 'context' entry, e.g. 'context: {before: 2, after: 1}'.",
        )
    return loaded


__all__ = [
    "ContextConfig",
    "MAX_CONTEXT_LINES",
    "load_context_config",
    "parse_context_line_count",
    "resolve_context_options",
]
