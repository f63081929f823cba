"""The view of one test item that the execution condition works on."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from scriptgate.script.bindings import ParameterLookup
from scriptgate.store import RootStore


@dataclass(frozen=True)
class ExtensionContext:
    """Context for evaluating the execution condition of one test or container.

    Attributes:
        element: The annotated element (a pytest item, function or class),
            or None when the context has no element.
        root_store: Store of the session root, used to cache the evaluator.
        tags: Tags of the element.
        unique_id: Unique id of the element (pytest node id).
        display_name: Display name of the element.
        configuration_parameter: Parameter mapping or ``get(key)`` lookup.
    """

    element: Any = None
    root_store: RootStore = field(default_factory=RootStore)
    tags: frozenset[str] = frozenset()
    unique_id: str = ""
    display_name: str = ""
    configuration_parameter: ParameterLookup = field(default_factory=dict)
