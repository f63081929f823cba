"""Shared fixtures for scriptgate tests."""

from __future__ import annotations

import pytest

from scriptgate.script.bindings import build_bindings


@pytest.fixture
def bindings() -> dict:
    """Default bindings with no tags and no configuration parameters."""
    return build_bindings(
        tags=frozenset(),
        unique_id="Mock for UniqueId",
        display_name="Mock for DisplayName",
        configuration_parameter={},
    )
