"""Configuration utilities for Lintframe."""
from __future__ import annotations

from .context import (
    MAX_CONTEXT_LINES,
    ContextConfig,
    load_context_config,
    parse_context_line_count,
    resolve_context_options,
)

__all__ = [
    "ContextConfig",
    "MAX_CONTEXT_LINES",
    "load_context_config",
    "parse_context_line_count",
    "resolve_context_options",
]
