"""scriptgate - script-driven enable/disable conditions for pytest tests."""

__version__ = "0.1.0"

from scriptgate.errors import ScriptEvaluationError
from scriptgate.markers import disabled_if, enabled_if
from scriptgate.models.result import ConditionEvaluationResult

__all__ = [
    "ConditionEvaluationResult",
    "ScriptEvaluationError",
    "__version__",
    "disabled_if",
    "enabled_if",
]
