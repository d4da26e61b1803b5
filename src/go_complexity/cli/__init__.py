"""CLI entry point - registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="go-complexity",
    help="go-complexity - per-function complexity metrics for Go source files",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Compute cyclomatic, cognitive, Halstead and maintainability metrics
    for every function in a Go file.

    [bold cyan]Examples:[/bold cyan]

      go-complexity analyze main.go

      go-complexity analyze handler.go --format json --sort cognitive_complexity
    """
    if version:
        console.print(f"[bold cyan]go-complexity[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(0)


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
