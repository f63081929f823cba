"""scriptgate engines CLI command listing builtin script engines."""

from __future__ import annotations

from rich.console import Console

from scriptgate.cli.output import render_engines
from scriptgate.script.engines import BUILTIN_ENGINES, get_engine


def engines() -> None:
    """List builtin script engines and whether each can be loaded."""
    rows: list[tuple[str, str, str | None]] = []
    for name, path in sorted(BUILTIN_ENGINES.items()):
        try:
            get_engine(name)
            error = None
        except (ImportError, TypeError) as exc:
            error = str(exc)
        rows.append((name, path, error))
    render_engines(rows, Console())
