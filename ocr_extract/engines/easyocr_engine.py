"""EasyOCR recognition engine (optional)."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from ocr_extract.config import EngineConfig
from ocr_extract.engines.base import Engine, EngineHandle, RawLine, RawRecognition, RawWord, ReadyState
from ocr_extract.utils.io import PixelImage, to_bgr


LOGGER = logging.getLogger(__name__)


class EasyOcrHandle(EngineHandle):
    """Turns ``Reader.readtext`` detections into one-word lines."""

    def __init__(self, reader: Any) -> None:
        self._reader = reader

    def recognize(self, image: PixelImage) -> RawRecognition:
        # Each detection is (polygon, text, confidence); the polygon is
        # already top-left, top-right, bottom-right, bottom-left.
        results = self._reader.readtext(to_bgr(image), detail=1, paragraph=False)
        lines: List[RawLine] = []
        for bbox, text, confidence in results:
            corners = tuple((float(x), float(y)) for x, y in bbox)
            word = RawWord(text=str(text), confidence=float(confidence), corners=corners)
            lines.append(RawLine(text=str(text), words=[word]))
        return RawRecognition(lines=lines)


@dataclass
class EasyOcrEngine(Engine):
    """EasyOCR backend.

    Constructing ``easyocr.Reader`` downloads detector and recognizer weights
    when they are missing, so that happens in ``prepare``.
    """

    config: EngineConfig
    name = "easyocr"

    def __post_init__(self) -> None:
        self._reader = None

    def ready_state(self) -> ReadyState:
        return ReadyState.READY if self._reader is not None else ReadyState.ENSURE_NEEDED

    def prepare(self) -> None:
        try:
            import easyocr  # type: ignore
        except ImportError as exc:
            raise RuntimeError("easyocr package is required for the easyocr backend") from exc

        kwargs: Dict[str, Any] = {
            "gpu": self.config.gpu,
            "download_enabled": self.config.download_enabled,
            "verbose": False,
        }
        if self.config.model_storage_directory:
            kwargs["model_storage_directory"] = self.config.model_storage_directory
        LOGGER.info("Loading EasyOCR models (languages=%s, gpu=%s)", self.config.easyocr_languages, self.config.gpu)
        self._reader = easyocr.Reader(list(self.config.easyocr_languages), **kwargs)

    def create(self) -> EasyOcrHandle:
        if self._reader is None:
            raise RuntimeError("EasyOCR reader has not been prepared.")
        return EasyOcrHandle(self._reader)


__all__ = ["EasyOcrEngine", "EasyOcrHandle"]
