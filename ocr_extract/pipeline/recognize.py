"""Recognition invoker: forwards a pixel image to a ready engine handle."""
from __future__ import annotations

import math

from ocr_extract.engines.base import EngineHandle, RawRecognition
from ocr_extract.errors import RecognitionFailure
from ocr_extract.utils.io import PixelImage


def _check_finite(raw: RawRecognition) -> None:
    for line_no, line in enumerate(raw.lines):
        for word in line.words:
            values = [word.confidence] + [value for corner in word.corners for value in corner]
            if not all(math.isfinite(float(value)) for value in values):
                raise RecognitionFailure(f"Engine returned a non-finite value for word {word.text!r} on line {line_no}")


def recognize(handle: EngineHandle, image: PixelImage) -> RawRecognition:
    """Run the engine once. No retry, no timeout, no reordering of its output."""

    try:
        raw = handle.recognize(image)
    except RecognitionFailure:
        raise
    except Exception as exc:
        raise RecognitionFailure(str(exc) or type(exc).__name__) from exc
    _check_finite(raw)
    return raw


__all__ = ["recognize"]
