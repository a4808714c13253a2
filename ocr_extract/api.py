"""Public API for the text extraction pipeline."""
from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Dict, Optional

from ocr_extract.config import EngineConfig, PipelineConfig, load_config
from ocr_extract.engines.base import Engine
from ocr_extract.engines.easyocr_engine import EasyOcrEngine
from ocr_extract.engines.tesseract_engine import TesseractEngine
from ocr_extract.errors import ConfigurationError
from ocr_extract.pipeline.document import ResultDocument
from ocr_extract.pipeline.pipeline import TextExtractionPipeline
from ocr_extract.readiness import ReadinessGate


LOGGER = logging.getLogger(__name__)

_DEFAULT_PIPELINES: Dict[Optional[str], TextExtractionPipeline] = {}
_DEFAULT_LOCK = threading.Lock()


def build_engine(config: EngineConfig) -> Engine:
    backend = config.backend.lower()
    LOGGER.info("Initializing recognition backend '%s'", backend)
    if backend == "tesseract":
        return TesseractEngine(config)
    if backend == "easyocr":
        return EasyOcrEngine(config)
    raise ConfigurationError(f"Unsupported engine backend: {backend}", config_key="engine.backend")


def build_pipeline(config: PipelineConfig) -> TextExtractionPipeline:
    """Wire an engine, its readiness gate and the pipeline for ``config``."""

    gate = ReadinessGate(build_engine(config.engine))
    return TextExtractionPipeline(gate=gate, config=config)


def create_pipeline(config_path: str | Path | None = None, overrides: dict | None = None) -> TextExtractionPipeline:
    """Instantiate a pipeline from config. The engine is prepared on first use."""

    return build_pipeline(load_config(config_path, overrides))


def default_pipeline(config_path: str | Path | None = None) -> TextExtractionPipeline:
    """Return the process-wide pipeline for ``config_path``, building it on first use.

    Every caller with the same config file shares one engine and one gate, so
    the engine is prepared at most once per process.
    """

    key = str(Path(config_path).resolve()) if config_path else None
    with _DEFAULT_LOCK:
        pipeline = _DEFAULT_PIPELINES.get(key)
        if pipeline is None:
            pipeline = _DEFAULT_PIPELINES[key] = create_pipeline(key)
    return pipeline


def recognize_image_file(path: str | Path, config_path: str | Path | None = None) -> ResultDocument:
    """Run the shared default pipeline on a single image file."""

    return default_pipeline(config_path).recognize_from_path(path)


def recognize_image_bytes(data: bytes, config_path: str | Path | None = None) -> ResultDocument:
    """Run the shared default pipeline on an in-memory encoded image."""

    return default_pipeline(config_path).recognize_from_bytes(data)


__all__ = [
    "build_engine",
    "build_pipeline",
    "create_pipeline",
    "default_pipeline",
    "recognize_image_bytes",
    "recognize_image_file",
    "ResultDocument",
    "TextExtractionPipeline",
]
