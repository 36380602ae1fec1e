"""Source buffer helpers: row lookup and line extraction."""
from __future__ import annotations

from .lines import LineIndex, Lines, row_start, total_rows

__all__ = [
    "LineIndex",
    "Lines",
    "row_start",
    "total_rows",
]
