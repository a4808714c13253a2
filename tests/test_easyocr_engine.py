"""Tests for the EasyOCR backend with a fake ``easyocr`` module."""
import sys
import types

import numpy as np
import pytest

from ocr_extract.config import EngineConfig
from ocr_extract.engines.base import ReadyState
from ocr_extract.engines.easyocr_engine import EasyOcrEngine, EasyOcrHandle
from ocr_extract.errors import EngineUnavailable
from ocr_extract.readiness import ReadinessGate
from ocr_extract.utils.io import PixelImage


class FakeReader:
    instances = []

    def __init__(self, lang_list, **kwargs):
        self.lang_list = lang_list
        self.kwargs = kwargs
        FakeReader.instances.append(self)

    def readtext(self, image, detail, paragraph):
        assert image.ndim == 3
        return [
            ([[12, 3], [40, 9], [37, 21], [9, 15]], "tilted", np.float64(0.75)),
            ([[0, 30], [20, 30], [20, 40], [0, 40]], "flat", 0.5),
        ]


@pytest.fixture
def fake_easyocr(monkeypatch):
    FakeReader.instances = []
    module = types.ModuleType("easyocr")
    module.Reader = FakeReader
    monkeypatch.setitem(sys.modules, "easyocr", module)
    return module


def test_prepare_builds_reader_once(fake_easyocr):
    engine = EasyOcrEngine(EngineConfig(backend="easyocr", easyocr_languages=["en", "de"], model_storage_directory="/m"))
    gate = ReadinessGate(engine)
    gate.ensure_ready()
    gate.ensure_ready()
    assert len(FakeReader.instances) == 1
    reader = FakeReader.instances[0]
    assert reader.lang_list == ["en", "de"]
    assert reader.kwargs["model_storage_directory"] == "/m"
    assert reader.kwargs["gpu"] is False
    assert engine.ready_state() is ReadyState.READY


def test_each_detection_becomes_a_line(fake_easyocr):
    handle = EasyOcrHandle(FakeReader(["en"]))
    raw = handle.recognize(PixelImage(data=np.zeros((50, 50), dtype=np.uint8)))
    assert [line.text for line in raw.lines] == ["tilted", "flat"]
    word = raw.lines[0].words[0]
    assert word.corners == ((12.0, 3.0), (40.0, 9.0), (37.0, 21.0), (9.0, 15.0))
    assert word.confidence == 0.75
    assert isinstance(word.confidence, float)


def test_missing_package_is_unavailable(monkeypatch):
    monkeypatch.setitem(sys.modules, "easyocr", None)
    gate = ReadinessGate(EasyOcrEngine(EngineConfig(backend="easyocr")))
    with pytest.raises(EngineUnavailable, match="easyocr package is required"):
        gate.ensure_ready()


def test_create_before_prepare_fails():
    with pytest.raises(RuntimeError):
        EasyOcrEngine(EngineConfig()).create()
