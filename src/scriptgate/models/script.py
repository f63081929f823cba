"""Script descriptor and the annotation kinds that declare scripts.

A Script is the immutable description of one conditional expression:
which annotation declared it, which engine evaluates it, the source text,
and the template used to render the human-readable reason.
"""

from __future__ import annotations

import os
from typing import Any, ClassVar

from pydantic import BaseModel, Field, field_validator

DEFAULT_ENGINE_NAME = "python"

DEFAULT_REASON_TEMPLATE = "Script `{source}` evaluated to: {result}"

# Placeholders substituted by Script.to_reason_string()
SOURCE_PLACEHOLDER = "{source}"
RESULT_PLACEHOLDER = "{result}"


class Script(BaseModel):
    """Immutable descriptor of one conditional expression."""

    model_config = {"frozen": True, "extra": "forbid"}

    annotation_kind: Any
    label: str
    engine_name: str
    source: str
    reason_template: str

    @field_validator("annotation_kind")
    @classmethod
    def _kind_not_none(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("annotation_kind must not be None")
        return value

    def to_reason_string(self, result: str) -> str:
        """Render the reason template with this script's source and *result*."""
        return self.reason_template.replace(SOURCE_PLACEHOLDER, self.source).replace(
            RESULT_PLACEHOLDER, result
        )

    def __str__(self) -> str:
        kind = getattr(self.annotation_kind, "__name__", self.annotation_kind)
        return (
            f"Script [annotation={kind}, label={self.label}, engine={self.engine_name}, "
            f"source={self.source!r}, reason={self.reason_template!r}]"
        )


class ScriptAnnotation(BaseModel):
    """Base for the enable/disable annotation kinds.

    Instances mirror the arguments of a ``pytest.mark.enabled_if`` or
    ``pytest.mark.disabled_if`` marker: positional arguments are source
    lines, ``engine`` and ``reason`` are keyword arguments.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    marker_name: ClassVar[str]

    value: tuple[str, ...] = Field(min_length=1)
    engine: str = DEFAULT_ENGINE_NAME
    reason: str = DEFAULT_REASON_TEMPLATE

    @classmethod
    def from_marker(cls, mark: Any) -> ScriptAnnotation:
        """Build an annotation from a pytest ``Mark`` carrying this kind's name."""
        return cls(value=tuple(mark.args), **mark.kwargs)

    def source(self) -> str:
        """Join the source lines with the platform line separator."""
        return os.linesep.join(self.value)

    def to_script(self) -> Script:
        """Create the Script described by this annotation.

        An empty engine name selects the default engine.
        """
        return Script(
            annotation_kind=type(self),
            label=str(self),
            engine_name=self.engine or DEFAULT_ENGINE_NAME,
            source=self.source(),
            reason_template=self.reason,
        )

    def __str__(self) -> str:
        lines = ", ".join(repr(line) for line in self.value)
        return f"@{self.marker_name}({lines}, engine={self.engine!r}, reason={self.reason!r})"


class EnabledIf(ScriptAnnotation):
    """Run the test only if the script evaluates to ``true``."""

    marker_name: ClassVar[str] = "enabled_if"


class DisabledIf(ScriptAnnotation):
    """Skip the test if the script evaluates to ``true``."""

    marker_name: ClassVar[str] = "disabled_if"
