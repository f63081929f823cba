"""Execution condition for the ``enabled_if`` and ``disabled_if`` markers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from scriptgate.context import ExtensionContext
from scriptgate.markers import find_annotation
from scriptgate.models.result import ConditionEvaluationResult
from scriptgate.models.script import DisabledIf, EnabledIf, Script
from scriptgate.script.bindings import build_bindings
from scriptgate.script.evaluator import ScriptEvaluator
from scriptgate.script.resolver import DEFAULT_EVALUATOR_PATH, EvaluatorResolver
from scriptgate.script.verdict import compute_condition_evaluation_result

ENABLED_NO_ELEMENT = ConditionEvaluationResult.enabled("AnnotatedElement not present")

ENABLED_NO_ANNOTATION = ConditionEvaluationResult.enabled("Annotation not present")

# Disable scripts are evaluated first so that a disabling verdict wins.
ANNOTATION_KINDS: tuple[type[DisabledIf] | type[EnabledIf], ...] = (DisabledIf, EnabledIf)

AnnotationLookup = Callable[[Any, type], Any]


class ScriptExecutionCondition:
    """Decides whether a test runs based on its script markers.

    Args:
        evaluator_path: Dotted path of the ScriptEvaluator class to resolve.
        annotation_lookup: ``find(element, kind)`` returning zero or one
            annotation of *kind*; defaults to the pytest marker lookup.
    """

    def __init__(
        self,
        evaluator_path: str = DEFAULT_EVALUATOR_PATH,
        annotation_lookup: AnnotationLookup = find_annotation,
    ) -> None:
        self.resolver = EvaluatorResolver(evaluator_path)
        self.annotation_lookup = annotation_lookup

    def evaluate_execution_condition(self, context: ExtensionContext) -> ConditionEvaluationResult:
        if context.element is None:
            return ENABLED_NO_ELEMENT

        scripts = self.create_scripts(context.element)
        if not scripts:
            return ENABLED_NO_ANNOTATION

        evaluator = self.resolver.resolve(context.root_store)
        return self.evaluate_scripts(evaluator, context, scripts)

    def create_scripts(self, element: Any) -> list[Script]:
        """Scripts declared on *element*, disable script first."""
        scripts = []
        for kind in ANNOTATION_KINDS:
            annotation = self.annotation_lookup(element, kind)
            if annotation is not None:
                scripts.append(annotation.to_script())
        return scripts

    def evaluate_scripts(
        self,
        evaluator: ScriptEvaluator,
        context: ExtensionContext,
        scripts: list[Script],
    ) -> ConditionEvaluationResult:
        """Evaluate *scripts* in order; the first disabling verdict wins."""
        result = ENABLED_NO_ANNOTATION
        for script in scripts:
            bindings = build_bindings(
                context.tags,
                context.unique_id,
                context.display_name,
                context.configuration_parameter,
            )
            raw = evaluator.evaluate(script, bindings)
            result = compute_condition_evaluation_result(script, raw)
            if result.is_disabled:
                return result
        return result
