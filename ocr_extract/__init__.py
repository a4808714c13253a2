"""Text extraction from raster images: full text, lines, words and word boxes."""
from ocr_extract.api import build_pipeline, create_pipeline, default_pipeline, recognize_image_bytes, recognize_image_file
from ocr_extract.config import PipelineConfig, load_config
from ocr_extract.errors import (
    ConfigurationError,
    DecodeFailure,
    EmptyInput,
    EngineUnavailable,
    InputNotFound,
    OcrExtractError,
    RecognitionFailure,
)
from ocr_extract.pipeline import BoundingQuad, Line, Point2D, ResultDocument, TextExtractionPipeline, Word
from ocr_extract.pipeline.serialize import deserialize, serialize
from ocr_extract.readiness import GateState, ReadinessGate

__version__ = "0.1.0"

__all__ = [
    "BoundingQuad",
    "ConfigurationError",
    "DecodeFailure",
    "EmptyInput",
    "EngineUnavailable",
    "GateState",
    "InputNotFound",
    "Line",
    "OcrExtractError",
    "PipelineConfig",
    "Point2D",
    "ReadinessGate",
    "RecognitionFailure",
    "ResultDocument",
    "TextExtractionPipeline",
    "Word",
    "build_pipeline",
    "create_pipeline",
    "default_pipeline",
    "deserialize",
    "load_config",
    "recognize_image_bytes",
    "recognize_image_file",
    "serialize",
]
