"""Script evaluator capability and its permanently-failing variant."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from scriptgate.errors import ScriptEvaluationError
from scriptgate.models.script import Script

THROWING_EVALUATOR_MESSAGE = (
    "ScriptExecutionCondition extension is in an illegal state, "
    "script evaluation is disabled. "
    "If the originating cause is a `ModuleNotFoundError: No module named ...` "
    "the scripting backend is not importable in the current environment; "
    "install it via `pip install scriptgate` or point the `scriptgate_evaluator` "
    "option at an importable ScriptEvaluator class"
)


class ScriptEvaluator(ABC):
    """Evaluates a script against bindings and returns the raw result.

    The raw result is a ``bool``, a ``str`` or ``None``. Implementations
    are shared by every test of a session and must be thread-safe.
    """

    @abstractmethod
    def evaluate(self, script: Script, bindings: dict[str, Any]) -> Any:
        """Evaluate *script*.

        Raises:
            ScriptEvaluationError: If the script cannot be evaluated.
        """


class ThrowingEvaluator(ScriptEvaluator):
    """Evaluator that always raises the same :class:`ScriptEvaluationError`.

    Cached in place of a working evaluator when the scripting backend
    cannot be loaded, so every evaluation fails with one diagnostic.
    """

    def __init__(self, cause: BaseException | None) -> None:
        self.exception = ScriptEvaluationError(THROWING_EVALUATOR_MESSAGE)
        self.exception.__cause__ = cause

    def evaluate(self, script: Script | None, bindings: dict[str, Any] | None) -> Any:
        raise self.exception.with_traceback(None)
