"""Script engines and their lookup by name.

An engine name is either one of :data:`BUILTIN_ENGINES` (matched
case-insensitively) or the dotted path of a :class:`BaseScriptEngine`
subclass, e.g. ``"my_project.engines.TomlEngine"``.
"""

from __future__ import annotations

import importlib

from scriptgate.script.engines.base import BaseScriptEngine, ScriptError

BUILTIN_ENGINES: dict[str, str] = {
    "python": "scriptgate.script.engines.python_engine.PythonScriptEngine",
    "py": "scriptgate.script.engines.python_engine.PythonScriptEngine",
    "jmespath": "scriptgate.script.engines.jmespath_engine.JMESPathScriptEngine",
}


def engine_path(name: str) -> str:
    """Return the dotted class path an engine name refers to."""
    builtin = BUILTIN_ENGINES.get(name.lower())
    if builtin is not None:
        return builtin
    module_path, _, class_name = name.rpartition(".")
    if not module_path or not class_name:
        raise ValueError(
            f"Script engine not found: '{name}'. "
            f"Use one of {', '.join(sorted(BUILTIN_ENGINES))} "
            f"or the dotted path of a BaseScriptEngine subclass."
        )
    return name


def get_engine(name: str) -> BaseScriptEngine:
    """Instantiate the engine *name* refers to.

    Raises:
        ValueError: the name is neither builtin nor a dotted path.
        ImportError: the module or the class does not exist.
        TypeError: the class is not a BaseScriptEngine subclass.
    """
    dotted_path = engine_path(name)
    module_path, _, class_name = dotted_path.rpartition(".")
    engine_cls = getattr(importlib.import_module(module_path), class_name, None)
    if engine_cls is None:
        raise ImportError(f"Module '{module_path}' has no attribute '{class_name}'.")
    if not isinstance(engine_cls, type) or not issubclass(engine_cls, BaseScriptEngine):
        raise TypeError(f"'{dotted_path}' is not a subclass of BaseScriptEngine.")
    return engine_cls()


__all__ = ["BUILTIN_ENGINES", "BaseScriptEngine", "ScriptError", "engine_path", "get_engine"]
