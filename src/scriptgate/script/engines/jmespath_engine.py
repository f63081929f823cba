"""JMESPath engine -- scripts are JMESPath queries over the bindings."""

from __future__ import annotations

from typing import Any

import jmespath
import jmespath.exceptions

from scriptgate.script.bindings import BIND_CONFIGURATION_PARAMETER, BIND_TAGS
from scriptgate.script.engines.base import BaseScriptEngine, ScriptError


def build_search_data(bindings: dict[str, Any]) -> dict[str, Any]:
    """Convert bindings into plain JSON-like data for JMESPath.

    Tags become a sorted list and the configuration parameter accessor
    becomes a dict of the known parameters.
    """
    data = dict(bindings)
    if BIND_TAGS in data:
        data[BIND_TAGS] = sorted(data[BIND_TAGS])
    parameters = data.get(BIND_CONFIGURATION_PARAMETER)
    if parameters is not None and hasattr(parameters, "as_dict"):
        data[BIND_CONFIGURATION_PARAMETER] = parameters.as_dict()
    return data


class JMESPathScriptEngine(BaseScriptEngine):
    """Evaluates scripts as JMESPath expressions.

    Example: ``junitConfigurationParameter.region == 'eu'`` or
    ``contains(tags, 'slow')``.
    """

    name = "jmespath"

    def compile(self, source: str) -> Any:
        try:
            return jmespath.compile(source)
        except jmespath.exceptions.JMESPathError as exc:
            raise ScriptError(f"syntax error: {exc}") from exc

    def evaluate(self, compiled: Any, bindings: dict[str, Any]) -> Any:
        try:
            return compiled.search(build_search_data(bindings))
        except jmespath.exceptions.JMESPathError as exc:
            raise ScriptError(f"{type(exc).__name__}: {exc}") from exc
