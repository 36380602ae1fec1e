"""Domain-specific exception hierarchy for Lintframe."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LintframeError(Exception):
    """Base exception for Lintframe-specific errors with optional remediation text."""

    message: str
    remediation: str | None = None

    def __post_init__(self) -> None:  # pragma: no cover - dataclass validation hook
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InputValidationError(LintframeError):
    """Raised when the CLI receives invalid or missing input."""


class ReportWriteError(LintframeError):
    """Raised when the report sink rejects a write."""


class ReportInvariantError(LintframeError):
    """Raised when a match span does not map onto the source buffer.

    This indicates a broken contract in the component that produced the span,
    never a user-facing condition.
    """


__all__ = [
    "LintframeError",
    "InputValidationError",
    "ReportWriteError",
    "ReportInvariantError",
]
