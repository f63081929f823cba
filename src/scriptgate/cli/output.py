"""Rich terminal output for condition verdicts and engine listings."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table

from scriptgate.models.result import ConditionEvaluationResult
from scriptgate.models.script import Script


def render_verdict(script: Script, result: ConditionEvaluationResult, console: Console) -> None:
    """Render the verdict of one script as a key-value table."""
    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Key", style="bold", no_wrap=True)
    table.add_column("Value")

    if result.is_disabled:
        table.add_row("Verdict", "[bold yellow]✗ DISABLED[/bold yellow]")
    else:
        table.add_row("Verdict", "[bold green]✓ ENABLED[/bold green]")
    table.add_row("Annotation", script.annotation_kind.marker_name)
    table.add_row("Engine", script.engine_name)
    table.add_row("Reason", result.reason or "")
    console.print(table)


def render_engines(rows: list[tuple[str, str, str | None]], console: Console) -> None:
    """Render (name, class path, error) rows; error is None when importable."""
    table = Table(box=box.SIMPLE, padding=(0, 2))
    table.add_column("Engine", style="bold", no_wrap=True)
    table.add_column("Class", overflow="fold")
    table.add_column("Status", no_wrap=True)
    for name, path, error in rows:
        status = "[green]available[/green]" if error is None else f"[red]{error}[/red]"
        table.add_row(name, path, status)
    console.print(table)
