"""Single-flight readiness gate for the recognition engine."""
from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Optional

from ocr_extract.engines.base import Engine, EngineHandle, ReadyState
from ocr_extract.errors import EngineUnavailable


LOGGER = logging.getLogger(__name__)


class GateState(Enum):
    UNCHECKED = "unchecked"
    CHECKING = "checking"
    READY = "ready"
    UNAVAILABLE = "unavailable"


class ReadinessGate:
    """Prepares an engine at most once and caches the resulting handle.

    Concurrent first callers serialize on an internal lock; the one that wins
    performs preparation while the others wait and then observe its outcome.
    A failed preparation is sticky: later calls raise ``EngineUnavailable``
    with the same detail and never retry. An attempt interrupted by a
    ``BaseException`` such as ``KeyboardInterrupt`` has no outcome and leaves
    the gate unchecked.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._lock = threading.Lock()
        self._state = GateState.UNCHECKED
        self._handle: Optional[EngineHandle] = None
        self._failure: Optional[EngineUnavailable] = None

    @property
    def state(self) -> GateState:
        return self._state

    def ensure_ready(self) -> EngineHandle:
        handle = self._handle
        if handle is not None:
            return handle

        with self._lock:
            if self._state is GateState.READY and self._handle is not None:
                LOGGER.debug("Engine '%s' already ready", self.engine.name)
                return self._handle
            if self._state is GateState.UNAVAILABLE and self._failure is not None:
                raise EngineUnavailable(self._failure.detail) from self._failure

            self._state = GateState.CHECKING
            try:
                handle = self._initialize()
            except EngineUnavailable as exc:
                self._failure = exc
                self._state = GateState.UNAVAILABLE
                LOGGER.info("Engine '%s' unavailable: %s", self.engine.name, exc.detail)
                raise
            except BaseException:
                # Interrupted, not failed.
                self._state = GateState.UNCHECKED
                raise

            self._handle = handle
            self._state = GateState.READY
            LOGGER.info("Engine '%s' ready", self.engine.name)
            return handle

    def _initialize(self) -> EngineHandle:
        try:
            ready_state = self.engine.ready_state()
        except Exception as exc:
            raise EngineUnavailable(f"Could not query engine readiness: {exc}") from exc

        if ready_state is ReadyState.NOT_SUPPORTED:
            raise EngineUnavailable(f"Engine '{self.engine.name}' is not supported on this system.")
        if ready_state is ReadyState.ENSURE_NEEDED:
            LOGGER.info("Preparing engine '%s'", self.engine.name)
            try:
                self.engine.prepare()
            except Exception as exc:
                raise EngineUnavailable(str(exc) or type(exc).__name__) from exc

        try:
            return self.engine.create()
        except Exception as exc:
            raise EngineUnavailable(str(exc) or type(exc).__name__) from exc


__all__ = ["GateState", "ReadinessGate"]
