"""Python expression engine (the default engine).

A script is a Python expression, optionally preceded by statements on
earlier lines. The value of the final expression is the script's result.
The names ``true``, ``false`` and ``null`` are predefined so that short
scripts such as ``"true"`` or ``"x.get('k') == null"`` read naturally.
"""

from __future__ import annotations

import ast
import builtins
from types import CodeType
from typing import Any, NamedTuple

from scriptgate.script.engines.base import BaseScriptEngine, ScriptError

LITERALS: dict[str, Any] = {"true": True, "false": False, "null": None}

SAFE_BUILTINS: dict[str, Any] = {
    name: getattr(builtins, name)
    for name in (
        "abs",
        "all",
        "any",
        "bool",
        "dict",
        "float",
        "frozenset",
        "int",
        "isinstance",
        "len",
        "list",
        "max",
        "min",
        "set",
        "sorted",
        "str",
        "sum",
        "tuple",
    )
}

_FILENAME = "<script>"


class CompiledPythonScript(NamedTuple):
    """Statements to run first (may be None) and the final expression."""

    body: CodeType | None
    expression: CodeType


# Frame, code and traceback attributes of generators, coroutines and
# tracebacks lead back to the globals of the evaluating module.
_BLOCKED_ATTRIBUTE_PREFIXES = ("_", "gi_", "cr_", "ag_", "f_", "co_", "tb_")

# str.format can reach attributes without an ast.Attribute node
_BLOCKED_ATTRIBUTES = frozenset({"format", "format_map"})


def _check_tree(tree: ast.AST) -> None:
    """Reject imports, dunder names and attributes that reach interpreter internals."""
    for node in ast.walk(tree):
        if isinstance(node, (ast.Import, ast.ImportFrom)):
            raise ScriptError("import statements are not allowed in scripts")
        if isinstance(node, ast.Name) and node.id.startswith("__"):
            raise ScriptError(f"access to name {node.id!r} is not allowed in scripts")
        if isinstance(node, ast.Attribute) and (
            node.attr.startswith(_BLOCKED_ATTRIBUTE_PREFIXES) or node.attr in _BLOCKED_ATTRIBUTES
        ):
            raise ScriptError(f"access to attribute {node.attr!r} is not allowed in scripts")


class PythonScriptEngine(BaseScriptEngine):
    """Evaluates scripts written as Python expressions."""

    name = "python"

    def compile(self, source: str) -> CompiledPythonScript:
        try:
            tree = ast.parse(source.strip(), filename=_FILENAME, mode="exec")
        except SyntaxError as exc:
            raise ScriptError(
                f"syntax error: {exc.msg} (line {exc.lineno}, column {exc.offset})"
            ) from exc
        _check_tree(tree)

        statements = list(tree.body)
        if statements and isinstance(statements[-1], ast.Expr):
            last = statements.pop()
            expression = ast.Expression(body=last.value)
        else:
            # No trailing expression: the script evaluates to None
            expression = ast.Expression(body=ast.Constant(value=None))
        ast.fix_missing_locations(expression)

        body = None
        if statements:
            body = compile(ast.Module(body=statements, type_ignores=[]), _FILENAME, "exec")
        return CompiledPythonScript(body, compile(expression, _FILENAME, "eval"))

    def evaluate(self, compiled: CompiledPythonScript, bindings: dict[str, Any]) -> Any:
        namespace: dict[str, Any] = {"__builtins__": SAFE_BUILTINS, **LITERALS, **bindings}
        try:
            if compiled.body is not None:
                exec(compiled.body, namespace)  # noqa: S102
            return eval(compiled.expression, namespace)  # noqa: S307
        except Exception as exc:
            raise ScriptError(f"{type(exc).__name__}: {exc}") from exc
