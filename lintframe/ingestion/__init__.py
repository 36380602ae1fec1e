"""Ingestion of rule-engine output."""
from __future__ import annotations

from .findings import Finding, lint_names, load_findings

__all__ = [
    "Finding",
    "lint_names",
    "load_findings",
]
