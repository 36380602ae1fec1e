"""Utility helpers for Lintframe."""

from __future__ import annotations

from .io import (
    expand_source_arguments,
    format_display_path,
    load_source_bytes,
)

__all__ = [
    "expand_source_arguments",
    "format_display_path",
    "load_source_bytes",
]
