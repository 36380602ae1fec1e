"""Shared exit code definitions for Lintframe CLI operations."""
from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Deterministic process exit codes."""

    SUCCESS = 0
    WARNINGS_REPORTED = 1
    INVALID_INPUT = 2
    REPORT_ERROR = 3
    UNEXPECTED_ERROR = 4


__all__ = ["ExitCode"]
