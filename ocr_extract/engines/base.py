"""Recognition engine interface."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from ocr_extract.utils.io import PixelImage


Corner = Tuple[float, float]


class ReadyState(Enum):
    """What an engine needs before a handle can be created."""

    READY = "ready"
    ENSURE_NEEDED = "ensure_needed"
    NOT_SUPPORTED = "not_supported"


@dataclass
class RawWord:
    """Word as reported by an engine.

    ``corners`` holds four ``(x, y)`` pairs: top-left, top-right,
    bottom-right, bottom-left.
    """

    text: str
    confidence: float
    corners: Tuple[Corner, Corner, Corner, Corner]


@dataclass
class RawLine:
    text: str
    words: List[RawWord] = field(default_factory=list)


@dataclass
class RawRecognition:
    """Engine output before assembly into a ``ResultDocument``."""

    lines: List[RawLine] = field(default_factory=list)


class EngineHandle(ABC):
    """A loaded recognizer, shared read-only across invocations."""

    @abstractmethod
    def recognize(self, image: PixelImage) -> RawRecognition:
        """Return recognized lines and words for ``image``."""


class Engine(ABC):
    """Abstract recognition backend."""

    name: str = "engine"

    @abstractmethod
    def ready_state(self) -> ReadyState:
        """Report whether ``prepare`` must run before ``create``."""

    @abstractmethod
    def prepare(self) -> None:
        """Deploy models or verify installation. Raises on failure."""

    @abstractmethod
    def create(self) -> EngineHandle:
        """Construct the recognizer handle."""


__all__ = ["Corner", "Engine", "EngineHandle", "RawLine", "RawRecognition", "RawWord", "ReadyState"]
