"""Tesseract recognition engine."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

import pytesseract

from ocr_extract.config import EngineConfig
from ocr_extract.engines.base import Engine, EngineHandle, RawLine, RawRecognition, RawWord, ReadyState
from ocr_extract.utils.io import PixelImage, to_rgb


LOGGER = logging.getLogger(__name__)

# Row level used by ``image_to_data`` for individual words.
WORD_LEVEL = 5


def _word_corners(left: float, top: float, width: float, height: float) -> tuple:
    right = left + width
    bottom = top + height
    return ((left, top), (right, top), (right, bottom), (left, bottom))


def parse_image_data(data: Dict[str, Sequence[Any]]) -> RawRecognition:
    """Group word rows of ``image_to_data`` output into lines.

    Rows are kept in emission order. Rows with a negative confidence are
    layout entries (page, block, paragraph, line) rather than words.
    """

    lines: List[RawLine] = []
    current_key = None
    for i, level in enumerate(data.get("level", [])):
        if int(level) != WORD_LEVEL:
            continue
        conf = float(data["conf"][i])
        if conf < 0:
            continue
        key = (data["page_num"][i], data["block_num"][i], data["par_num"][i], data["line_num"][i])
        if key != current_key:
            lines.append(RawLine(text=""))
            current_key = key
        corners = _word_corners(
            float(data["left"][i]),
            float(data["top"][i]),
            float(data["width"][i]),
            float(data["height"][i]),
        )
        text = "" if data["text"][i] is None else str(data["text"][i])
        lines[-1].words.append(RawWord(text=text, confidence=min(1.0, conf / 100.0), corners=corners))

    for line in lines:
        line.text = " ".join(word.text for word in line.words)
    return RawRecognition(lines=lines)


class TesseractHandle(EngineHandle):
    """Runs ``pytesseract.image_to_data`` with a fixed language and config."""

    def __init__(self, language: str, tess_config: str) -> None:
        self.language = language
        self.tess_config = tess_config

    def recognize(self, image: PixelImage) -> RawRecognition:
        data = pytesseract.image_to_data(
            to_rgb(image),
            lang=self.language,
            config=self.tess_config,
            output_type=pytesseract.Output.DICT,
        )
        return parse_image_data(data)


@dataclass
class TesseractEngine(Engine):
    """Wrapper around pytesseract.

    Preparation verifies the binary and the configured language packs; the
    handle itself holds no model state since every call spawns ``tesseract``.
    """

    config: EngineConfig
    name = "tesseract"

    def __post_init__(self) -> None:
        self._verified = False

    def ready_state(self) -> ReadyState:
        return ReadyState.READY if self._verified else ReadyState.ENSURE_NEEDED

    def prepare(self) -> None:
        if self.config.tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = self.config.tesseract_cmd
        version = pytesseract.get_tesseract_version()
        installed = set(pytesseract.get_languages(config=""))
        missing = [lang for lang in self.config.language.split("+") if lang not in installed]
        if missing:
            raise RuntimeError(f"Tesseract language data not installed: {', '.join(missing)}")
        LOGGER.info("Tesseract %s ready (lang=%s)", version, self.config.language)
        self._verified = True

    def create(self) -> TesseractHandle:
        tess_config = f"--psm {self.config.page_segmentation_mode} {self.config.extra_config}".strip()
        return TesseractHandle(self.config.language, tess_config)


__all__ = ["TesseractEngine", "TesseractHandle", "parse_image_data"]
