"""Dataclasses describing lint matches and the spans they point at."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """Zero-based row and byte column inside a source buffer."""

    row: int = 0
    col: int = 0


@dataclass(frozen=True)
class Range:
    """Half-open byte range ``[start, end)`` with its start and end points."""

    bytes: Tuple[int, int] = (0, 0)
    start_point: Point = field(default_factory=Point)
    end_point: Point = field(default_factory=Point)

    def __post_init__(self) -> None:
        object.__setattr__(self, "bytes", tuple(int(value) for value in self.bytes))

    @property
    def start(self) -> int:
        return self.bytes[0]

    @property
    def end(self) -> int:
        return self.bytes[1]

    @property
    def is_empty(self) -> bool:
        """Return True when the range covers no bytes (location-only match)."""

        return self.bytes[0] == self.bytes[1]


@dataclass(frozen=True)
class LintMatch:
    """A single finding reported by a lint rule."""

    lint_name: str
    message: str
    range: Range = field(default_factory=Range)


__all__ = [
    "LintMatch",
    "Point",
    "Range",
]
