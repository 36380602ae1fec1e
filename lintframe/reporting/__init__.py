"""Reporting helpers for Lintframe output."""
from __future__ import annotations

from .context import context_rows_after, context_rows_before
from .renderer import ReportOptions, render_report, report_terminal, report_terminal_opts

__all__ = [
    "ReportOptions",
    "context_rows_after",
    "context_rows_before",
    "render_report",
    "report_terminal",
    "report_terminal_opts",
]
