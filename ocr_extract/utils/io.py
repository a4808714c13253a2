"""Image decoding helpers and conversions into engine input form."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import cv2
import numpy as np

from ocr_extract.config import DecoderConfig
from ocr_extract.errors import ConfigurationError, DecodeFailure, EmptyInput, InputNotFound


LOGGER = logging.getLogger(__name__)

_READ_FLAGS = {
    "color": cv2.IMREAD_COLOR,
    "grayscale": cv2.IMREAD_GRAYSCALE,
}


@dataclass
class PixelImage:
    """Decoded raster owned by a single pipeline invocation.

    ``data`` is ``(height, width)`` for grayscale or ``(height, width, 3)`` in
    BGR order, matching what OpenCV hands back.
    """

    data: np.ndarray

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def channels(self) -> int:
        return 1 if self.data.ndim == 2 else int(self.data.shape[2])

    @property
    def pixel_format(self) -> str:
        return "GRAY8" if self.channels == 1 else "BGR8"


def _read_flag(config: DecoderConfig | None) -> int:
    mode = (config.mode if config is not None else "color").lower()
    try:
        return _READ_FLAGS[mode]
    except KeyError:
        raise ConfigurationError(f"Unsupported decoder mode: {mode}", config_key="decoder.mode") from None


def _decode(buffer: bytes | bytearray | memoryview, config: DecoderConfig | None, source: str) -> PixelImage:
    flag = _read_flag(config)
    encoded = np.frombuffer(buffer, dtype=np.uint8)
    try:
        image = cv2.imdecode(encoded, flag)
    except cv2.error as exc:
        raise DecodeFailure(f"Failed to decode image from {source}: {exc}") from exc
    if image is None or image.size == 0 or image.shape[0] == 0 or image.shape[1] == 0:
        raise DecodeFailure(f"Failed to decode image from {source}.")
    decoded = PixelImage(data=image)
    LOGGER.debug("Decoded %s: %dx%d %s", source, decoded.width, decoded.height, decoded.pixel_format)
    return decoded


def decode_from_path(path: str | Path, config: DecoderConfig | None = None) -> PixelImage:
    """Decode the image file at ``path``."""

    if path is None or not str(path).strip():
        raise InputNotFound("Image not found.", path=None)
    file_path = Path(path)
    if not file_path.is_file() or not os.access(file_path, os.R_OK):
        raise InputNotFound(f"Image not found: {file_path}", path=str(file_path))
    try:
        with open(file_path, "rb") as f:
            buffer = f.read()
    except OSError as exc:
        raise InputNotFound(f"Image not readable: {file_path} ({exc.strerror})", path=str(file_path)) from exc
    return _decode(buffer, config, str(file_path))


def decode_from_bytes(data: bytes | bytearray | memoryview | None, config: DecoderConfig | None = None) -> PixelImage:
    """Decode an in-memory encoded image (PNG, JPEG, BMP, TIFF, ...)."""

    if data is None or len(data) == 0:
        raise EmptyInput("No image bytes provided.")
    return _decode(data, config, "bytes")


def to_rgb(image: PixelImage) -> np.ndarray:
    """Return the pixels as an RGB (or single channel) array."""

    if image.channels == 1:
        return image.data
    return cv2.cvtColor(image.data, cv2.COLOR_BGR2RGB)


def to_bgr(image: PixelImage) -> np.ndarray:
    """Return the pixels as a three channel BGR array."""

    if image.channels == 1:
        return cv2.cvtColor(image.data, cv2.COLOR_GRAY2BGR)
    return image.data


__all__ = ["PixelImage", "decode_from_bytes", "decode_from_path", "to_bgr", "to_rgb"]
