"""scriptgate data models - re-exports all public model classes."""

from scriptgate.models.result import ConditionEvaluationResult
from scriptgate.models.script import (
    DEFAULT_ENGINE_NAME,
    DEFAULT_REASON_TEMPLATE,
    DisabledIf,
    EnabledIf,
    Script,
    ScriptAnnotation,
)

__all__ = [
    "DEFAULT_ENGINE_NAME",
    "DEFAULT_REASON_TEMPLATE",
    "ConditionEvaluationResult",
    "DisabledIf",
    "EnabledIf",
    "Script",
    "ScriptAnnotation",
]
