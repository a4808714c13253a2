"""JSON encoding of ``ResultDocument`` with fixed field names."""
from __future__ import annotations

import json
from typing import Any, Dict

from ocr_extract.pipeline.document import BoundingQuad, Line, Point2D, ResultDocument, Word


_CORNER_FIELDS = (
    ("TopLeft", "top_left"),
    ("TopRight", "top_right"),
    ("BottomRight", "bottom_right"),
    ("BottomLeft", "bottom_left"),
)


def _point_to_dict(point: Point2D) -> Dict[str, float]:
    return {"X": point.x, "Y": point.y}


def _word_to_dict(word: Word) -> Dict[str, Any]:
    out: Dict[str, Any] = {"Text": word.text, "Confidence": word.confidence}
    for key, attr in _CORNER_FIELDS:
        out[key] = _point_to_dict(getattr(word.box, attr))
    return out


def to_dict(doc: ResultDocument) -> Dict[str, Any]:
    """Return the document as plain dicts and lists, in serialized field order."""

    return {
        "FullText": doc.full_text,
        "Lines": [
            {"Text": line.text, "Words": [_word_to_dict(word) for word in line.words]}
            for line in doc.lines
        ],
    }


def from_dict(data: Dict[str, Any]) -> ResultDocument:
    lines = []
    for line in data.get("Lines", []):
        words = []
        for word in line.get("Words", []):
            corners = {attr: Point2D(float(word[key]["X"]), float(word[key]["Y"])) for key, attr in _CORNER_FIELDS}
            words.append(Word(text=word["Text"], confidence=float(word["Confidence"]), box=BoundingQuad(**corners)))
        lines.append(Line(text=line["Text"], words=tuple(words)))
    return ResultDocument(full_text=data.get("FullText", ""), lines=tuple(lines))


def serialize(doc: ResultDocument, pretty: bool = False, *, ensure_ascii: bool = False) -> str:
    """Encode ``doc``; ``pretty`` only changes whitespace, never content or order.

    Output is strict JSON: a document holding NaN or infinity raises
    ``ValueError``. Documents built by the pipeline never do.
    """

    if pretty:
        return json.dumps(to_dict(doc), indent=2, ensure_ascii=ensure_ascii, allow_nan=False)
    return json.dumps(to_dict(doc), separators=(",", ":"), ensure_ascii=ensure_ascii, allow_nan=False)


def deserialize(text: str) -> ResultDocument:
    return from_dict(json.loads(text))


__all__ = ["deserialize", "from_dict", "serialize", "to_dict"]
