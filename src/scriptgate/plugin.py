"""pytest plugin evaluating ``enabled_if`` / ``disabled_if`` before each test.

Registered through the ``pytest11`` entry point. A disabled verdict skips
the test with the verdict's reason; an evaluation error becomes the
test's setup error.
"""

from __future__ import annotations

import logging

import pytest
import yaml

from scriptgate.condition import ScriptExecutionCondition
from scriptgate.config import CONFIG_FILENAME, GateConfig, load_gate_config, parse_parameters
from scriptgate.context import ExtensionContext
from scriptgate.markers import MARKER_HELP
from scriptgate.store import RootStore

logger = logging.getLogger(__name__)

root_store_key = pytest.StashKey[RootStore]()
gate_config_key = pytest.StashKey[GateConfig]()
condition_key = pytest.StashKey[ScriptExecutionCondition]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("scriptgate", "script-driven test conditions")
    group.addoption(
        "--gate-param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        dest="scriptgate_params",
        help="Configuration parameter exposed to scripts (repeatable).",
    )
    parser.addini(
        "scriptgate_parameters",
        type="linelist",
        default=[],
        help="Configuration parameters exposed to scripts, one KEY=VALUE per line.",
    )
    parser.addini(
        "scriptgate_evaluator",
        default="",
        help="Dotted path of the ScriptEvaluator class used for script conditions.",
    )


def _build_gate_config(config: pytest.Config) -> GateConfig:
    try:
        gate_config = load_gate_config(config.rootpath)
    except (ValueError, yaml.YAMLError) as exc:
        raise pytest.UsageError(f"Invalid {CONFIG_FILENAME}: {exc}") from exc
    try:
        ini_parameters = parse_parameters(config.getini("scriptgate_parameters"))
        cli_parameters = parse_parameters(config.getoption("scriptgate_params") or [])
    except ValueError as exc:
        raise pytest.UsageError(str(exc)) from exc
    gate_config = gate_config.with_parameters(ini_parameters).with_parameters(cli_parameters)
    evaluator = config.getini("scriptgate_evaluator")
    if evaluator:
        gate_config = gate_config.model_copy(update={"evaluator": evaluator})
    return gate_config


def pytest_configure(config: pytest.Config) -> None:
    for help_text in MARKER_HELP.values():
        config.addinivalue_line("markers", help_text)
    gate_config = _build_gate_config(config)
    config.stash[gate_config_key] = gate_config
    config.stash[root_store_key] = RootStore()
    config.stash[condition_key] = ScriptExecutionCondition(gate_config.evaluator)


def pytest_unconfigure(config: pytest.Config) -> None:
    store = config.stash.get(root_store_key, None)
    if store is not None:
        store.close()


def build_context(item: pytest.Item) -> ExtensionContext:
    """Build the ExtensionContext of a collected test item."""
    config = item.config
    return ExtensionContext(
        element=item,
        root_store=config.stash[root_store_key],
        tags=frozenset(mark.name for mark in item.iter_markers()),
        unique_id=item.nodeid,
        display_name=item.name,
        configuration_parameter=config.stash[gate_config_key].parameters,
    )


@pytest.hookimpl(tryfirst=True)
def pytest_runtest_setup(item: pytest.Item) -> None:
    condition = item.config.stash[condition_key]
    result = condition.evaluate_execution_condition(build_context(item))
    if result.is_disabled:
        logger.debug("Skipping %s: %s", item.nodeid, result.reason)
        pytest.skip(result.reason or "disabled by script condition")
