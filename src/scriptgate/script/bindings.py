"""Names and values bound into a script's evaluation namespace."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, Optional, Union

BIND_TAGS = "tags"
BIND_UNIQUE_ID = "uniqueId"
BIND_DISPLAY_NAME = "displayName"
BIND_CONFIGURATION_PARAMETER = "junitConfigurationParameter"

BINDING_NAMES: tuple[str, ...] = (
    BIND_TAGS,
    BIND_UNIQUE_ID,
    BIND_DISPLAY_NAME,
    BIND_CONFIGURATION_PARAMETER,
)

ParameterLookup = Union[Callable[[str], Optional[str]], Mapping[str, str]]


class ConfigurationParameters:
    """Read-only accessor for configuration parameters.

    Scripts call ``get(key)``; a missing parameter yields ``None``.
    """

    def __init__(self, lookup: ParameterLookup) -> None:
        if isinstance(lookup, Mapping):
            self._parameters: dict[str, str] | None = dict(lookup)
            self._lookup = self._parameters.get
        else:
            self._parameters = None
            self._lookup = lookup

    def get(self, key: str) -> str | None:
        return self._lookup(key)

    def as_dict(self) -> dict[str, str]:
        """Known parameters; empty when backed by an opaque lookup function."""
        return dict(self._parameters or {})

    def __repr__(self) -> str:
        return f"ConfigurationParameters({sorted(self.as_dict())})"


def build_bindings(
    tags: Iterable[str],
    unique_id: str,
    display_name: str,
    configuration_parameter: ParameterLookup,
) -> dict[str, Any]:
    """Build the bindings exposed to a script.

    Returns a new dict with exactly the keys in :data:`BINDING_NAMES`.
    """
    return {
        BIND_TAGS: frozenset(tags),
        BIND_UNIQUE_ID: unique_id,
        BIND_DISPLAY_NAME: display_name,
        BIND_CONFIGURATION_PARAMETER: ConfigurationParameters(configuration_parameter),
    }
