"""Orchestration layer for Lintframe."""
from __future__ import annotations

from .runner import ExecutionOutcome, handle_domain_error, run_report

__all__ = [
    "ExecutionOutcome",
    "handle_domain_error",
    "run_report",
]
