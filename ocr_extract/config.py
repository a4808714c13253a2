"""Configuration utilities for the text extraction pipeline."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ocr_extract.errors import ConfigurationError


@dataclass
class EngineConfig:
    """Configuration options for the recognition engine."""

    backend: str = "tesseract"
    language: str = "eng"
    page_segmentation_mode: int = 3
    extra_config: str = ""
    tesseract_cmd: Optional[str] = None
    easyocr_languages: List[str] = field(default_factory=lambda: ["en"])
    gpu: bool = False
    model_storage_directory: Optional[str] = None
    download_enabled: bool = True


@dataclass
class DecoderConfig:
    """How raw image bytes are decoded into pixels."""

    mode: str = "color"


@dataclass
class OutputConfig:
    """Serialization options for the result document."""

    pretty: bool = True
    ensure_ascii: bool = False


@dataclass
class PipelineConfig:
    """High level pipeline configuration."""

    engine: EngineConfig = field(default_factory=EngineConfig)
    decoder: DecoderConfig = field(default_factory=DecoderConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def _deep_update(target: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            target[key] = _deep_update(dict(target[key]), value)
        else:
            target[key] = value
    return target


def _build_section(cls: type, section: str, values: Any) -> Any:
    if values is None:
        values = {}
    if not isinstance(values, dict):
        raise ConfigurationError(f"Config section '{section}' must be a mapping", config_key=section)
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown option(s) in '{section}': {', '.join(unknown)}",
            config_key=f"{section}.{unknown[0]}",
        )
    return cls(**values)


def load_config(path: str | Path | None = None, overrides: Optional[Dict[str, Any]] = None) -> PipelineConfig:
    """Load configuration from a YAML file and optional overrides."""

    data: Dict[str, Any] = {}
    if path:
        with open(Path(path), "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
    if overrides:
        data = _deep_update(data, overrides)

    unknown = sorted(set(data) - {"engine", "decoder", "output"})
    if unknown:
        raise ConfigurationError(f"Unknown config section(s): {', '.join(unknown)}", config_key=unknown[0])

    return PipelineConfig(
        engine=_build_section(EngineConfig, "engine", data.get("engine")),
        decoder=_build_section(DecoderConfig, "decoder", data.get("decoder")),
        output=_build_section(OutputConfig, "output", data.get("output")),
    )


__all__ = [
    "DecoderConfig",
    "EngineConfig",
    "OutputConfig",
    "PipelineConfig",
    "load_config",
]
