"""Lintframe: annotated source excerpts for lint findings."""
from __future__ import annotations

from .errors import LintframeError

__all__ = ("__version__", "LintframeError")

__version__ = "0.1.0"
