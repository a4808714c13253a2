"""Recognition engine backends."""
from .base import Engine, EngineHandle, RawLine, RawRecognition, RawWord, ReadyState
from .easyocr_engine import EasyOcrEngine
from .tesseract_engine import TesseractEngine

__all__ = [
    "EasyOcrEngine",
    "Engine",
    "EngineHandle",
    "RawLine",
    "RawRecognition",
    "RawWord",
    "ReadyState",
    "TesseractEngine",
]
