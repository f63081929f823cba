"""Gate configuration loaded from scriptgate.yaml.

Captures configuration parameters exposed to scripts and the evaluator
class to resolve. Command line and ini options are merged on top by the
pytest plugin.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from scriptgate.script.resolver import DEFAULT_EVALUATOR_PATH

CONFIG_FILENAME = "scriptgate.yaml"


def _scalar_to_str(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


class GateConfig(BaseModel):
    """Configuration for script conditions."""

    model_config = {"extra": "forbid"}

    parameters: dict[str, str] = Field(default_factory=dict)
    evaluator: str = DEFAULT_EVALUATOR_PATH

    @field_validator("parameters", mode="before")
    @classmethod
    def _scalars_to_str(cls, value: Any) -> Any:
        # YAML turns `retries: 3` and `ci: true` into int and bool
        if not isinstance(value, dict):
            return value
        return {_scalar_to_str(key): _scalar_to_str(item) for key, item in value.items()}

    def with_parameters(self, parameters: dict[str, str]) -> GateConfig:
        """Return a copy with *parameters* merged over the current ones."""
        return self.model_copy(update={"parameters": {**self.parameters, **parameters}})


def parse_parameter(item: str) -> tuple[str, str]:
    """Split a ``KEY=VALUE`` string.

    Raises:
        ValueError: If *item* has no ``=`` or an empty key.
    """
    key, sep, value = item.partition("=")
    key = key.strip()
    if not sep or not key:
        raise ValueError(f"Invalid configuration parameter {item!r}, expected KEY=VALUE")
    return key, value.strip()


def parse_parameters(items: Iterable[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` strings into a dict; later keys win."""
    return dict(parse_parameter(item) for item in items if item.strip())


def load_gate_config(path: Path) -> GateConfig:
    """Load GateConfig from a YAML file. Returns defaults if not found.

    *path* may be the file itself or a directory containing
    ``scriptgate.yaml``.
    """
    config_path = path / CONFIG_FILENAME if path.is_dir() else path
    if not config_path.exists():
        return GateConfig()
    import yaml

    raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if raw is None:
        return GateConfig()
    return GateConfig.model_validate(raw)
