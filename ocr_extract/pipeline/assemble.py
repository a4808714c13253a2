"""Assembly of raw engine output into the result document."""
from __future__ import annotations

from typing import Iterable, Sequence

from ocr_extract.engines.base import Corner, RawLine, RawRecognition, RawWord
from ocr_extract.pipeline.document import BoundingQuad, Line, Point2D, ResultDocument, Word


def join_full_text(line_texts: Iterable[str]) -> str:
    """Join line texts with ``\\n`` and strip trailing whitespace only.

    Leading whitespace and whitespace inside or between lines is kept as is.
    """

    return "\n".join(line_texts).rstrip()


def _quad(corners: Sequence[Corner]) -> BoundingQuad:
    if len(corners) != 4:
        raise ValueError(f"Expected 4 box corners, got {len(corners)}")
    tl, tr, br, bl = (Point2D(float(x), float(y)) for x, y in corners)
    return BoundingQuad(top_left=tl, top_right=tr, bottom_right=br, bottom_left=bl)


def _word(raw: RawWord) -> Word:
    return Word(text=raw.text, confidence=float(raw.confidence), box=_quad(raw.corners))


def _line(raw: RawLine) -> Line:
    return Line(text=raw.text, words=tuple(_word(word) for word in raw.words))


def assemble(raw: RawRecognition) -> ResultDocument:
    """Copy engine lines and words verbatim, in order, without filtering."""

    lines = tuple(_line(line) for line in raw.lines)
    return ResultDocument(full_text=join_full_text(line.text for line in lines), lines=lines)


__all__ = ["assemble", "join_full_text"]
