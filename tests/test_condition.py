"""Tests for scriptgate.condition - ScriptExecutionCondition."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from scriptgate.condition import ScriptExecutionCondition
from scriptgate.context import ExtensionContext
from scriptgate.errors import ScriptEvaluationError
from scriptgate.markers import disabled_if, enabled_if
from scriptgate.models.script import DisabledIf, EnabledIf
from scriptgate.script.evaluator import ScriptEvaluator
from scriptgate.script.resolver import EVALUATOR_STORE_KEY
from scriptgate.store import RootStore


@enabled_if("true")
def _enabled() -> None:
    pass


@enabled_if("false")
def _not_enabled() -> None:
    pass


@disabled_if("false")
def _not_disabled() -> None:
    pass


@disabled_if("true")
def _disabled() -> None:
    pass


@disabled_if("true")
@enabled_if("false")
def _both_disabling() -> None:
    pass


@disabled_if("false")
@enabled_if("true")
def _both_enabling() -> None:
    pass


@disabled_if("false")
@enabled_if("false")
def _enable_script_disables() -> None:
    pass


@enabled_if("syntax error")
def _syntax_error() -> None:
    pass


@disabled_if("junitConfigurationParameter.get('does-not-exist') == null")
def _missing_parameter() -> None:
    pass


@enabled_if("'db' in tags and uniqueId.endswith('::t') and displayName == 't'")
def _uses_bindings() -> None:
    pass


def _context(element: object, store: RootStore | None = None, **kwargs) -> ExtensionContext:
    return ExtensionContext(element=element, root_store=store or RootStore(), **kwargs)


def _store_with(evaluator: ScriptEvaluator) -> RootStore:
    store = RootStore()
    store.get_or_compute(EVALUATOR_STORE_KEY, lambda key: evaluator)
    return store


class TestShortCircuits:
    """Test verdicts returned without evaluating any script."""

    def test_enabled_due_to_annotated_element_not_present(self) -> None:
        """No element enables without a script."""
        result = ScriptExecutionCondition().evaluate_execution_condition(ExtensionContext())
        assert result.is_disabled is False
        assert result.reason == "AnnotatedElement not present"

    def test_enabled_due_to_annotation_not_present(self) -> None:
        """No annotation enables without a script."""
        condition = ScriptExecutionCondition()
        result = condition.evaluate_execution_condition(_context(TestShortCircuits))
        assert result.is_disabled is False
        assert result.reason == "Annotation not present"

    def test_evaluator_not_resolved_without_annotation(self) -> None:
        """The evaluator is resolved only when a script exists."""
        store = RootStore()
        ScriptExecutionCondition().evaluate_execution_condition(_context(TestShortCircuits, store))
        assert EVALUATOR_STORE_KEY not in store


class TestVerdicts:
    """Test verdicts for single and combined scripts."""

    @pytest.mark.parametrize(
        ("element", "disabled"),
        [
            (_enabled, False),
            (_not_enabled, True),
            (_not_disabled, False),
            (_disabled, True),
            (_both_disabling, True),
            (_both_enabling, False),
            (_enable_script_disables, True),
            (_missing_parameter, True),
        ],
    )
    def test_verdict(self, element: object, disabled: bool) -> None:
        """Each annotation and result combination yields its verdict."""
        result = ScriptExecutionCondition().evaluate_execution_condition(_context(element))
        assert result.is_disabled is disabled

    def test_enable_script_verdict_is_returned_as_is(self) -> None:
        """The enable script's verdict is the final verdict."""
        result = ScriptExecutionCondition().evaluate_execution_condition(_context(_enabled))
        assert result.reason == "Script `true` evaluated to: true"

    def test_disabling_verdict_names_disable_script(self) -> None:
        """A disabling verdict names the disable script."""
        result = ScriptExecutionCondition().evaluate_execution_condition(_context(_both_disabling))
        assert result.reason == "Script `true` evaluated to: true"

    def test_last_enabled_verdict_wins(self) -> None:
        """With both scripts enabling, the enable script's verdict is returned."""
        result = ScriptExecutionCondition().evaluate_execution_condition(_context(_both_enabling))
        assert result.reason == "Script `true` evaluated to: true"

    def test_bindings_reach_the_script(self) -> None:
        """Context values are bound under their script names."""
        context = _context(
            _uses_bindings,
            tags=frozenset({"db"}),
            unique_id="tests/test_x.py::t",
            display_name="t",
        )
        result = ScriptExecutionCondition().evaluate_execution_condition(context)
        assert result.is_disabled is False

    def test_configuration_parameter_lookup_function(self) -> None:
        """A lookup function serves configuration parameters."""
        context = _context(_missing_parameter, configuration_parameter=lambda key: "set")
        result = ScriptExecutionCondition().evaluate_execution_condition(context)
        assert result.is_disabled is False


class TestEvaluationOrder:
    """Test that the disable script runs first and short-circuits."""

    def test_disable_script_short_circuits(self) -> None:
        """A disabling disable script stops evaluation."""
        evaluator = MagicMock(spec=ScriptEvaluator)
        evaluator.evaluate.return_value = True
        store = _store_with(evaluator)
        result = ScriptExecutionCondition().evaluate_execution_condition(
            _context(_both_disabling, store)
        )
        assert result.is_disabled is True
        evaluator.evaluate.assert_called_once()
        script = evaluator.evaluate.call_args.args[0]
        assert script.annotation_kind is DisabledIf

    def test_both_scripts_evaluated_in_order(self) -> None:
        """The disable script runs before the enable script."""
        evaluator = MagicMock(spec=ScriptEvaluator)
        evaluator.evaluate.side_effect = [False, True]
        store = _store_with(evaluator)
        result = ScriptExecutionCondition().evaluate_execution_condition(
            _context(_both_enabling, store)
        )
        assert result.is_disabled is False
        kinds = [c.args[0].annotation_kind for c in evaluator.evaluate.call_args_list]
        assert kinds == [DisabledIf, EnabledIf]

    def test_annotation_lookup_is_injectable(self) -> None:
        """A custom annotation lookup is used."""
        lookup = MagicMock(side_effect=lambda element, kind: None)
        condition = ScriptExecutionCondition(annotation_lookup=lookup)
        result = condition.evaluate_execution_condition(_context(_enabled))
        assert result.reason == "Annotation not present"
        assert [c.args[1] for c in lookup.call_args_list] == [DisabledIf, EnabledIf]


class TestFailures:
    """Test that failures propagate to the caller."""

    def test_syntax_error_propagates(self) -> None:
        """Evaluation errors reach the caller unwrapped."""
        with pytest.raises(ScriptEvaluationError, match="syntax error"):
            ScriptExecutionCondition().evaluate_execution_condition(_context(_syntax_error))

    def test_throwing_evaluator_is_created_when_script_engine_is_not_available(self) -> None:
        """A missing evaluator fails every conditional test the same way."""
        condition = ScriptExecutionCondition("illegal class name")
        with pytest.raises(ScriptEvaluationError) as exc_info:
            condition.evaluate_execution_condition(_context(_enabled))
        message = str(exc_info.value)
        for token in ("ScriptExecutionCondition", "illegal state", "ModuleNotFoundError", "pip install"):
            assert token in message

    def test_annotation_lookup_errors_propagate(self) -> None:
        """Annotation lookup failures are not swallowed."""
        lookup = MagicMock(side_effect=LookupError("lookup failed"))
        condition = ScriptExecutionCondition(annotation_lookup=lookup)
        with pytest.raises(LookupError, match="lookup failed"):
            condition.evaluate_execution_condition(_context(_enabled))
