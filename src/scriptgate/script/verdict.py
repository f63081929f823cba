"""Translate a raw script result into an enabled/disabled verdict."""

from __future__ import annotations

from typing import Any

from scriptgate.errors import ScriptEvaluationError
from scriptgate.models.result import ConditionEvaluationResult
from scriptgate.models.script import DisabledIf, EnabledIf, Script

_BOOLEAN_LITERALS: dict[str, bool] = {"true": True, "false": False}


def result_to_string(result: Any) -> str:
    """Textual form of a raw result; booleans render as ``true``/``false``."""
    if isinstance(result, bool):
        return "true" if result else "false"
    return str(result)


def _to_bool(script: Script, result: Any) -> bool:
    if isinstance(result, bool):
        return result
    if isinstance(result, str):
        value = _BOOLEAN_LITERALS.get(result.strip().lower())
        if value is not None:
            return value
        raise ScriptEvaluationError(
            f"Script returned non-boolean string `{result}`: {script.source}"
        )
    raise ScriptEvaluationError(
        f"Script returned unsupported result type `{type(result).__name__}`: {script.source}"
    )


def compute_condition_evaluation_result(script: Script, result: Any) -> ConditionEvaluationResult:
    """Convert the raw *result* of *script* into a verdict.

    For ``EnabledIf`` a true result enables the element; for ``DisabledIf``
    the polarity is inverted. The reason is the script's reason template
    rendered with its source and the result text.

    Raises:
        ScriptEvaluationError: For an unsupported annotation kind, a
            ``None`` result, or a result that is not a boolean.
    """
    kind = script.annotation_kind
    if kind is not EnabledIf and kind is not DisabledIf:
        raise ScriptEvaluationError(f"Unsupported annotation type: {kind}")

    if result is None:
        raise ScriptEvaluationError(f"Script returned `null`: {script.source}")

    is_true = _to_bool(script, result)
    reason = script.to_reason_string(result_to_string(result))

    enabled = is_true if kind is EnabledIf else not is_true
    if enabled:
        return ConditionEvaluationResult.enabled(reason)
    return ConditionEvaluationResult.disabled(reason)
