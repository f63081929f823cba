"""Tests for scriptgate.script.bindings."""

from __future__ import annotations

from scriptgate.script.bindings import (
    BINDING_NAMES,
    ConfigurationParameters,
    build_bindings,
)


class TestBuildBindings:
    """Test the binding context builder."""

    def test_exposes_exactly_the_binding_names(self) -> None:
        """Only the four binding names are exposed."""
        bindings = build_bindings(["a"], "[uid]", "name", {})
        assert tuple(bindings) == BINDING_NAMES
        assert BINDING_NAMES == ("tags", "uniqueId", "displayName", "junitConfigurationParameter")

    def test_values(self) -> None:
        """Each binding carries its context value."""
        bindings = build_bindings(["fast", "db", "fast"], "[uid]", "test_x", {"k": "v"})
        assert bindings["tags"] == frozenset({"fast", "db"})
        assert bindings["uniqueId"] == "[uid]"
        assert bindings["displayName"] == "test_x"
        assert bindings["junitConfigurationParameter"].get("k") == "v"

    def test_fresh_dict_per_call(self) -> None:
        """Every call builds a new mapping."""
        first = build_bindings([], "a", "b", {})
        second = build_bindings([], "a", "b", {})
        assert first is not second


class TestConfigurationParameters:
    """Test the configuration parameter accessor."""

    def test_mapping_lookup(self) -> None:
        """A mapping serves lookups."""
        parameters = ConfigurationParameters({"region": "eu"})
        assert parameters.get("region") == "eu"
        assert parameters.as_dict() == {"region": "eu"}

    def test_missing_key_returns_none(self) -> None:
        """Absent keys yield None."""
        assert ConfigurationParameters({}).get("does-not-exist") is None

    def test_function_lookup(self) -> None:
        """A lookup function serves lookups."""
        parameters = ConfigurationParameters(lambda key: key.upper() if key == "x" else None)
        assert parameters.get("x") == "X"
        assert parameters.get("y") is None
        assert parameters.as_dict() == {}

    def test_mapping_is_copied(self) -> None:
        """Later changes to the source mapping are not seen."""
        source = {"k": "v"}
        parameters = ConfigurationParameters(source)
        source["k"] = "changed"
        assert parameters.get("k") == "v"
