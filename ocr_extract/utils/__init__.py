"""Utility helpers."""
from .io import PixelImage, decode_from_bytes, decode_from_path, to_bgr, to_rgb

__all__ = ["PixelImage", "decode_from_bytes", "decode_from_path", "to_bgr", "to_rgb"]
