"""Exception raised when a script condition cannot be evaluated."""

from __future__ import annotations


class ScriptEvaluationError(Exception):
    """Raised when evaluating a script-based condition fails.

    Covers an unavailable scripting backend, an evaluator that could not
    be created, an unsupported annotation kind, a script that returned
    ``null`` or a non-boolean value, and syntax or runtime errors raised
    by the expression backend (chained as ``__cause__``).
    """
