"""Shared fixtures: fake engines and synthetic images."""
from __future__ import annotations

import threading
import time
from typing import List, Optional

import cv2
import numpy as np
import pytest

from ocr_extract.config import PipelineConfig
from ocr_extract.engines.base import Engine, EngineHandle, RawLine, RawRecognition, RawWord, ReadyState
from ocr_extract.pipeline.pipeline import TextExtractionPipeline
from ocr_extract.readiness import ReadinessGate


def make_word(text: str, x: float = 0.0, y: float = 0.0, w: float = 10.0, h: float = 5.0, confidence: float = 0.9) -> RawWord:
    return RawWord(text=text, confidence=confidence, corners=((x, y), (x + w, y), (x + w, y + h), (x, y + h)))


def make_recognition(*line_texts: str) -> RawRecognition:
    lines = []
    for row, text in enumerate(line_texts):
        words = [make_word(part, x=12.0 * col, y=8.0 * row) for col, part in enumerate(text.split())]
        lines.append(RawLine(text=text, words=words))
    return RawRecognition(lines=lines)


class FakeHandle(EngineHandle):
    def __init__(self, result: RawRecognition, error: Optional[Exception] = None) -> None:
        self.result = result
        self.error = error
        self.images: List = []

    def recognize(self, image):
        self.images.append(image)
        if self.error is not None:
            raise self.error
        return self.result


class FakeEngine(Engine):
    """Engine double counting preparation and construction calls."""

    name = "fake"

    def __init__(
        self,
        result: Optional[RawRecognition] = None,
        *,
        state: ReadyState = ReadyState.ENSURE_NEEDED,
        prepare_error: Optional[Exception] = None,
        recognize_error: Optional[Exception] = None,
        prepare_delay: float = 0.0,
    ) -> None:
        self.result = result if result is not None else RawRecognition()
        self.state = state
        self.prepare_error = prepare_error
        self.recognize_error = recognize_error
        self.prepare_delay = prepare_delay
        self.prepare_calls = 0
        self.create_calls = 0
        self._count_lock = threading.Lock()

    def ready_state(self) -> ReadyState:
        return self.state

    def prepare(self) -> None:
        with self._count_lock:
            self.prepare_calls += 1
        if self.prepare_delay:
            time.sleep(self.prepare_delay)
        if self.prepare_error is not None:
            raise self.prepare_error

    def create(self) -> FakeHandle:
        with self._count_lock:
            self.create_calls += 1
        return FakeHandle(self.result, self.recognize_error)


def encode_png(image: np.ndarray) -> bytes:
    ok, buffer = cv2.imencode(".png", image)
    assert ok
    return buffer.tobytes()


@pytest.fixture
def png_bytes() -> bytes:
    image = np.full((20, 40, 3), 255, dtype=np.uint8)
    cv2.rectangle(image, (5, 5), (30, 15), (0, 0, 0), -1)
    return encode_png(image)


@pytest.fixture
def png_file(tmp_path, png_bytes):
    path = tmp_path / "sample.png"
    path.write_bytes(png_bytes)
    return path


@pytest.fixture
def make_pipeline():
    def _make(engine: Engine, config: Optional[PipelineConfig] = None) -> TextExtractionPipeline:
        return TextExtractionPipeline(gate=ReadinessGate(engine), config=config)

    return _make
