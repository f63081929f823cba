"""Base class for expression backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar


class ScriptError(Exception):
    """Raised by an engine when a script cannot be compiled or evaluated."""


class BaseScriptEngine(ABC):
    """Abstract base class for script engines.

    An engine compiles source text once and evaluates the compiled form
    any number of times against different bindings. Implementations must
    allow concurrent calls to :meth:`evaluate`.
    """

    name: ClassVar[str] = ""

    @abstractmethod
    def compile(self, source: str) -> Any:
        """Compile *source* into a reusable form.

        Raises:
            ScriptError: If the source is not a valid script.
        """

    @abstractmethod
    def evaluate(self, compiled: Any, bindings: dict[str, Any]) -> Any:
        """Evaluate a compiled script against *bindings*.

        Raises:
            ScriptError: If evaluation fails.
        """
