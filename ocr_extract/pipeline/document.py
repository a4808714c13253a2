"""Result document model: full text, lines, words and their bounding quads."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point2D:
    """A point in image pixel space."""

    x: float
    y: float


@dataclass(frozen=True)
class BoundingQuad:
    """Four-corner word polygon, always ordered clockwise from the top-left.

    The corners are stored as reported by the engine; the quad may be skewed
    or rotated and is never normalised to an axis-aligned box.
    """

    top_left: Point2D
    top_right: Point2D
    bottom_right: Point2D
    bottom_left: Point2D

    @property
    def points(self) -> Tuple[Point2D, Point2D, Point2D, Point2D]:
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)


@dataclass(frozen=True)
class Word:
    """A recognized word with its confidence in [0, 1] and bounding quad."""

    text: str
    confidence: float
    box: BoundingQuad


@dataclass(frozen=True)
class Line:
    """A recognized line; ``words`` keeps the engine's reading order."""

    text: str
    words: Tuple[Word, ...] = ()


@dataclass(frozen=True)
class ResultDocument:
    """Output of one pipeline invocation."""

    full_text: str = ""
    lines: Tuple[Line, ...] = ()

    @property
    def word_count(self) -> int:
        return sum(len(line.words) for line in self.lines)


__all__ = ["BoundingQuad", "Line", "Point2D", "ResultDocument", "Word"]
