"""Script evaluation: bindings, evaluators, resolution and verdicts."""

from scriptgate.script.bindings import BINDING_NAMES, ConfigurationParameters, build_bindings
from scriptgate.script.evaluator import ScriptEvaluator, ThrowingEvaluator
from scriptgate.script.resolver import DEFAULT_EVALUATOR_PATH, EvaluatorResolver
from scriptgate.script.verdict import compute_condition_evaluation_result

__all__ = [
    "BINDING_NAMES",
    "DEFAULT_EVALUATOR_PATH",
    "ConfigurationParameters",
    "EvaluatorResolver",
    "ScriptEvaluator",
    "ThrowingEvaluator",
    "build_bindings",
    "compute_condition_evaluation_result",
]
