"""Failure taxonomy for the text extraction pipeline."""
from __future__ import annotations

from typing import Optional


class OcrExtractError(Exception):
    """Base exception for all pipeline failures.

    Attributes:
        message: Human-readable error description
        error_code: Stable code for programmatic handling
    """

    error_code = "OCR_EXTRACT_ERROR"

    def __init__(self, message: str, error_code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        if error_code is not None:
            self.error_code = error_code

    def __str__(self) -> str:
        return self.message


class InputNotFound(OcrExtractError, FileNotFoundError):
    """The image path is blank or does not reference a readable file."""

    error_code = "INPUT_NOT_FOUND"

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class EmptyInput(OcrExtractError, ValueError):
    """No image bytes were supplied."""

    error_code = "EMPTY_INPUT"


class DecodeFailure(OcrExtractError):
    """The codec could not turn the bytes into a pixel image."""

    error_code = "DECODE_FAILURE"


class EngineUnavailable(OcrExtractError):
    """The recognition engine could not be prepared.

    Attributes:
        detail: Message reported by the engine's preparation step
    """

    error_code = "ENGINE_UNAVAILABLE"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class RecognitionFailure(OcrExtractError):
    """The engine reported an internal error during inference."""

    error_code = "RECOGNITION_FAILURE"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ConfigurationError(OcrExtractError):
    """Error in configuration or settings.

    Attributes:
        config_key: The configuration key that caused the error (if applicable)
    """

    error_code = "CONFIG_ERROR"

    def __init__(self, message: str, config_key: Optional[str] = None) -> None:
        super().__init__(message)
        self.config_key = config_key


__all__ = [
    "ConfigurationError",
    "DecodeFailure",
    "EmptyInput",
    "EngineUnavailable",
    "InputNotFound",
    "OcrExtractError",
    "RecognitionFailure",
]
