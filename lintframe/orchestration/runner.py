"""Execution orchestrator for Lintframe CLI commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, TextIO

from lintframe.errors import (
    InputValidationError,
    LintframeError,
    ReportInvariantError,
    ReportWriteError,
)
from lintframe.exit_codes import ExitCode
from lintframe.ingestion import Finding, load_findings
from lintframe.reporting import ReportOptions, report_terminal_opts
from lintframe.source import LineIndex
from lintframe.utils import format_display_path, load_source_bytes

logger = logging.getLogger("lintframe.orchestration.runner")


@dataclass(frozen=True)
class ExecutionOutcome:
    """Result of invoking the orchestration pipeline."""

    exit_code: ExitCode
    status: str
    message: str | None = None
    remediation: str | None = None
    reported: int = 0


_ERROR_MAPPINGS: tuple[
    tuple[type[LintframeError], ExitCode, str, str | None],
    ...,
] = (
    (
        InputValidationError,
        ExitCode.INVALID_INPUT,
        "Input validation failed.",
        "Double-check the findings document, source paths and context options.",
    ),
    (
        ReportWriteError,
        ExitCode.REPORT_ERROR,
        "Failed to write the report.",
        "Check that standard output is still open, e.g. not closed by a pager.",
    ),
    (
        ReportInvariantError,
        ExitCode.UNEXPECTED_ERROR,
        "A finding does not match its source file.",
        "Re-run the rule engine against the current sources and retry.",
    ),
)


def run_report(
    findings_path: Path,
    *,
    writer: TextIO,
    sources: Sequence[Path] = (),
    options: ReportOptions | None = None,
) -> ExecutionOutcome:
    """Render every finding in *findings_path* to *writer*.

    Findings are grouped per source file in order of first appearance and
    keep their document order within a file. When *sources* is given only
    those files are reported, in that order.
    """

    opts = options or ReportOptions()
    try:
        findings = load_findings(findings_path)
        groups = _select_groups(_group_by_file(findings), sources)
        reported = 0
        for path, group in groups:
            reported += _report_file(path, group, writer, opts)
    except ReportInvariantError as error:
        logger.exception("Finding span does not map onto its source buffer.")
        return handle_domain_error(error)
    except LintframeError as error:
        return handle_domain_error(error)
    except Exception as error:
        logger.exception("Unexpected error occurred while rendering the report.")
        return ExecutionOutcome(
            exit_code=ExitCode.UNEXPECTED_ERROR,
            status="failure",
            message=str(error) or "An unexpected error occurred while rendering the report.",
            remediation="Re-run with -vv and inspect the logs for details before retrying.",
        )

    if reported:
        logger.info("Reported %d finding(s) across %d file(s).", reported, len(groups))
        return ExecutionOutcome(
            exit_code=ExitCode.WARNINGS_REPORTED,
            status="warnings",
            reported=reported,
        )

    logger.info("No findings to report.")
    return ExecutionOutcome(exit_code=ExitCode.SUCCESS, status="success")


def handle_domain_error(error: LintframeError) -> ExecutionOutcome:
    """Translate a domain error into an execution outcome and log remediation hints."""

    exit_code, default_message, default_remediation = _map_error(error)
    message = error.message or default_message
    remediation = error.remediation or default_remediation

    logger.error(message, extra={"exit_code": int(exit_code)})
    if remediation:
        logger.error("Remediation: %s", remediation)

    return ExecutionOutcome(
        exit_code=exit_code,
        status="failure",
        message=message,
        remediation=remediation,
    )


def _report_file(
    path: Path,
    findings: Sequence[Finding],
    writer: TextIO,
    options: ReportOptions,
) -> int:
    code = load_source_bytes(path)
    index = LineIndex.from_bytes(code)
    logger.debug(
        "Loaded source",
        extra={"source": format_display_path(path), "bytes": len(code), "rows": index.total_rows()},
    )

    for finding in findings:
        report_terminal_opts(finding.match, code, finding.label, writer, options, index=index)
    return len(findings)


def _group_by_file(findings: Sequence[Finding]) -> dict[Path, list[Finding]]:
    groups: dict[Path, list[Finding]] = {}
    for finding in findings:
        groups.setdefault(_resolve(finding.path), []).append(finding)
    return groups


def _select_groups(
    groups: dict[Path, list[Finding]],
    sources: Sequence[Path],
) -> list[tuple[Path, list[Finding]]]:
    if not sources:
        return list(groups.items())

    selected: list[tuple[Path, list[Finding]]] = []
    for source in dict.fromkeys(_resolve(path) for path in sources):
        group = groups.get(source)
        if group is None:
            logger.info("No findings for %s", format_display_path(source))
            continue
        selected.append((source, group))
    return selected


def _resolve(path: Path) -> Path:
    candidate = path.expanduser()
    try:
        return candidate.resolve()
    except (OSError, ValueError):
        return candidate


def _map_error(error: LintframeError) -> tuple[ExitCode, str, str | None]:
    """Match an error instance to its configured exit code and remediation."""

    for error_type, exit_code, message, remediation in _ERROR_MAPPINGS:
        if isinstance(error, error_type):
            return exit_code, message, remediation

    return (
        ExitCode.UNEXPECTED_ERROR,
        "An unexpected error occurred while rendering the report.",
        "Enable debug logging with -vv and retry.",
    )


__all__ = ["ExecutionOutcome", "handle_domain_error", "run_report"]
