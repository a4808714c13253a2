"""End-to-end decode + recognition pipeline."""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

from ocr_extract.config import PipelineConfig
from ocr_extract.pipeline.assemble import assemble
from ocr_extract.pipeline.document import ResultDocument
from ocr_extract.pipeline.recognize import recognize
from ocr_extract.pipeline.serialize import serialize
from ocr_extract.readiness import ReadinessGate
from ocr_extract.utils.io import PixelImage, decode_from_bytes, decode_from_path


LOGGER = logging.getLogger(__name__)


class TextExtractionPipeline:
    """Coordinates decoding, engine readiness, recognition and assembly.

    Steps run strictly in sequence and any failure propagates unchanged.
    The gate is the only state shared between invocations.
    """

    def __init__(self, gate: ReadinessGate, config: Optional[PipelineConfig] = None) -> None:
        self.gate = gate
        self.config = config or PipelineConfig()

    def _run(self, image: PixelImage) -> ResultDocument:
        handle = self.gate.ensure_ready()
        raw = recognize(handle, image)
        doc = assemble(raw)
        LOGGER.debug("Recognized %d line(s), %d word(s)", len(doc.lines), doc.word_count)
        return doc

    def recognize_from_path(self, path: str | Path) -> ResultDocument:
        return self._run(decode_from_path(path, self.config.decoder))

    def recognize_from_bytes(self, data: bytes) -> ResultDocument:
        return self._run(decode_from_bytes(data, self.config.decoder))

    def to_json(self, doc: ResultDocument, pretty: Optional[bool] = None) -> str:
        output = self.config.output
        return serialize(doc, output.pretty if pretty is None else pretty, ensure_ascii=output.ensure_ascii)

    def recognize_as_json_from_path(self, path: str | Path, pretty: Optional[bool] = None) -> str:
        return self.to_json(self.recognize_from_path(path), pretty)

    def recognize_as_json_from_bytes(self, data: bytes, pretty: Optional[bool] = None) -> str:
        return self.to_json(self.recognize_from_bytes(data), pretty)

    async def recognize_from_path_async(self, path: str | Path) -> ResultDocument:
        return await asyncio.to_thread(self.recognize_from_path, path)

    async def recognize_from_bytes_async(self, data: bytes) -> ResultDocument:
        return await asyncio.to_thread(self.recognize_from_bytes, data)


__all__ = ["TextExtractionPipeline"]
