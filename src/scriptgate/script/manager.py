"""Concrete script evaluator backed by the engine registry."""

from __future__ import annotations

import logging
import threading
from typing import Any

from scriptgate.errors import ScriptEvaluationError
from scriptgate.models.script import Script
from scriptgate.script.engines import BaseScriptEngine, ScriptError, get_engine
from scriptgate.script.evaluator import ScriptEvaluator

logger = logging.getLogger(__name__)


class ScriptExecutionManager(ScriptEvaluator):
    """Evaluates scripts, caching engines and compiled scripts.

    Engines are created once per engine name and each distinct
    (engine, source) pair is compiled once. Cache access is guarded by a
    lock; evaluation itself runs outside the lock.
    """

    def __init__(self) -> None:
        self._engines: dict[str, BaseScriptEngine] = {}
        self._compiled: dict[tuple[str, str], Any] = {}
        self._lock = threading.Lock()

    def get_engine(self, name: str) -> BaseScriptEngine:
        """Return the engine registered under *name*, creating it on first use.

        Raises:
            ScriptEvaluationError: If no such engine exists or it cannot be loaded.
        """
        key = name.lower()
        with self._lock:
            engine = self._engines.get(key)
            if engine is None:
                logger.debug("Creating script engine %r", name)
                try:
                    engine = get_engine(name)
                except (ValueError, ImportError, TypeError) as exc:
                    raise ScriptEvaluationError(str(exc)) from exc
                self._engines[key] = engine
            return engine

    def compile_script(self, script: Script) -> Any:
        """Return the compiled form of *script*, compiling it on first use.

        Raises:
            ScriptError: If the engine rejects the source.
        """
        engine = self.get_engine(script.engine_name)
        key = (script.engine_name.lower(), script.source)
        with self._lock:
            compiled = self._compiled.get(key)
            if compiled is None:
                logger.debug("Compiling %s", script)
                compiled = engine.compile(script.source)
                self._compiled[key] = compiled
            return compiled

    def evaluate(self, script: Script, bindings: dict[str, Any]) -> Any:
        engine = self.get_engine(script.engine_name)
        try:
            compiled = self.compile_script(script)
            return engine.evaluate(compiled, bindings)
        except ScriptError as exc:
            raise ScriptEvaluationError(
                f"Evaluation of {script.label} failed: {exc}\n{script}"
            ) from exc
