"""scriptgate CLI entry point."""

import typer

from scriptgate import __version__
from scriptgate.cli.engines_cmd import engines
from scriptgate.cli.eval_cmd import eval_script

app = typer.Typer(
    name="scriptgate",
    help="Evaluate script-driven test conditions outside pytest",
    no_args_is_help=True,
)

# Register subcommands
app.command(name="eval")(eval_script)
app.command()(engines)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"scriptgate {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Evaluate script-driven test conditions outside pytest."""
