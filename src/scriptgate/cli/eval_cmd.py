"""scriptgate eval CLI command.

Evaluates an enable/disable script the same way the pytest plugin does,
which helps when writing conditions. Exits with 0 when the condition
enables the test, 1 when it disables it and 2 on evaluation errors.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from scriptgate.cli.output import render_verdict
from scriptgate.condition import ScriptExecutionCondition
from scriptgate.config import load_gate_config, parse_parameters
from scriptgate.context import ExtensionContext
from scriptgate.errors import ScriptEvaluationError
from scriptgate.models.script import (
    DEFAULT_ENGINE_NAME,
    DEFAULT_REASON_TEMPLATE,
    DisabledIf,
    EnabledIf,
)
from scriptgate.store import RootStore

_KINDS = {"enabled-if": EnabledIf, "disabled-if": DisabledIf}


def eval_script(
    source: list[str] = typer.Argument(..., help="Script source lines"),
    kind: str = typer.Option("enabled-if", "--kind", "-k", help="enabled-if or disabled-if"),
    engine: str = typer.Option(DEFAULT_ENGINE_NAME, "--engine", "-e", help="Script engine name"),
    reason: str = typer.Option(DEFAULT_REASON_TEMPLATE, "--reason", help="Reason template"),
    params: Optional[list[str]] = typer.Option(
        None, "--param", "-p", help="Configuration parameter KEY=VALUE (repeatable)"
    ),
    tags: Optional[list[str]] = typer.Option(None, "--tag", "-t", help="Tag (repeatable)"),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to scriptgate.yaml (default: current directory)"
    ),
) -> None:
    """Evaluate a script condition and print the verdict."""
    console = Console()
    annotation_kind = _KINDS.get(kind)
    if annotation_kind is None:
        typer.echo(f"Error: Unknown kind {kind!r}, expected one of: {', '.join(_KINDS)}", err=True)
        raise typer.Exit(code=2)

    try:
        gate_config = load_gate_config(config_file or Path.cwd())
        gate_config = gate_config.with_parameters(parse_parameters(params or []))
    except (ValueError, yaml.YAMLError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)

    script = annotation_kind(value=tuple(source), engine=engine, reason=reason).to_script()
    context = ExtensionContext(
        element=None,
        root_store=RootStore(),
        tags=frozenset(tags or []),
        unique_id="[cli]",
        display_name="scriptgate eval",
        configuration_parameter=gate_config.parameters,
    )
    condition = ScriptExecutionCondition(gate_config.evaluator)
    evaluator = condition.resolver.resolve(context.root_store)
    try:
        result = condition.evaluate_scripts(evaluator, context, [script])
    except ScriptEvaluationError as exc:
        console.print(
            f"[bold red]Evaluation failed:[/bold red] {escape(str(exc))}",
            highlight=False,
            soft_wrap=True,
        )
        raise typer.Exit(code=2)
    finally:
        context.root_store.close()

    render_verdict(script, result, console)
    if result.is_disabled:
        raise typer.Exit(code=1)
