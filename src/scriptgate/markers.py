"""Marker factories for script conditions and the annotation lookup.

``enabled_if`` and ``disabled_if`` are thin wrappers around
``pytest.mark.enabled_if`` / ``pytest.mark.disabled_if``; using the raw
pytest marks works the same way.
"""

from __future__ import annotations

from typing import Any, TypeVar

import pytest

from scriptgate.models.script import (
    DEFAULT_ENGINE_NAME,
    DEFAULT_REASON_TEMPLATE,
    DisabledIf,
    EnabledIf,
    ScriptAnnotation,
)

A = TypeVar("A", bound=ScriptAnnotation)

MARKER_HELP: dict[str, str] = {
    EnabledIf.marker_name: (
        "enabled_if(*lines, engine='python', reason=...): run the test only if "
        "the script evaluates to true"
    ),
    DisabledIf.marker_name: (
        "disabled_if(*lines, engine='python', reason=...): skip the test if "
        "the script evaluates to true"
    ),
}


def enabled_if(
    *lines: str,
    engine: str = DEFAULT_ENGINE_NAME,
    reason: str = DEFAULT_REASON_TEMPLATE,
) -> pytest.MarkDecorator:
    """Mark a test, class or module to run only if the script is true."""
    return pytest.mark.enabled_if(*lines, engine=engine, reason=reason)


def disabled_if(
    *lines: str,
    engine: str = DEFAULT_ENGINE_NAME,
    reason: str = DEFAULT_REASON_TEMPLATE,
) -> pytest.MarkDecorator:
    """Mark a test, class or module to be skipped if the script is true."""
    return pytest.mark.disabled_if(*lines, engine=engine, reason=reason)


def _iter_marks(element: Any):
    marks = getattr(element, "pytestmark", [])
    if not isinstance(marks, list):
        marks = [marks]
    for mark in marks:
        yield getattr(mark, "mark", mark)


def find_annotation(element: Any, kind: type[A]) -> A | None:
    """Find the effective annotation of *kind* on *element*, if any.

    For pytest items the closest marker wins (function over class over
    module). Plain functions and classes are searched through their
    ``pytestmark`` attribute.
    """
    get_closest_marker = getattr(element, "get_closest_marker", None)
    if get_closest_marker is not None:
        mark = get_closest_marker(kind.marker_name)
    else:
        mark = next((m for m in _iter_marks(element) if m.name == kind.marker_name), None)
    if mark is None:
        return None
    return kind.from_marker(mark)
