"""Resolve the script evaluator once per session root.

The evaluator class is loaded by dotted path so the scripting backend
stays an import-time detail of the evaluator module. If it cannot be
loaded or instantiated, a ThrowingEvaluator is cached instead and every
evaluation in the session fails with the same diagnostic.
"""

from __future__ import annotations

import importlib
import logging
from types import ModuleType

from scriptgate.script.evaluator import ScriptEvaluator, ThrowingEvaluator
from scriptgate.store import RootStore

logger = logging.getLogger(__name__)

DEFAULT_EVALUATOR_PATH = "scriptgate.script.manager.ScriptExecutionManager"

# Key of the cached evaluator in the root store.
EVALUATOR_STORE_KEY = "scriptgate.script.resolver.ScriptEvaluator"


class EvaluatorResolver:
    """Resolves and caches the :class:`ScriptEvaluator` of a root store."""

    def __init__(self, evaluator_path: str = DEFAULT_EVALUATOR_PATH) -> None:
        self.evaluator_path = evaluator_path

    def resolve(self, root_store: RootStore) -> ScriptEvaluator:
        """Return the evaluator cached in *root_store*, creating it on first use."""
        return root_store.get_or_compute(EVALUATOR_STORE_KEY, self._create_evaluator)

    def _import_module(self, module_path: str) -> ModuleType:
        return importlib.import_module(module_path)

    def _create_evaluator(self, key: str) -> ScriptEvaluator:
        name = self.evaluator_path
        logger.debug("Creating instance of %s", name)
        module_path, _, class_name = name.rpartition(".")
        try:
            module = self._import_module(module_path)
        except (ImportError, ValueError) as exc:
            logger.error("Loading scripting backend `%s` failed", name, exc_info=exc)
            return ThrowingEvaluator(exc)

        try:
            cls = getattr(module, class_name)
            if not isinstance(cls, type) or not issubclass(cls, ScriptEvaluator):
                raise TypeError(f"'{name}' is not a subclass of ScriptEvaluator")
            return cls()
        except Exception as exc:
            logger.error("Creating `%s` failed", name, exc_info=exc)
            return ThrowingEvaluator(exc)
