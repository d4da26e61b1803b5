"""Single-file analysis command."""

from pathlib import Path
from typing import Optional

import click
import typer
from rich.markup import escape

from ..api import analyze_file, sort_results
from ..config import OUTPUT_FORMATS, SORTABLE_FIELDS
from ..exceptions import GoComplexityError
from ..formatters import JsonFormatter, ReportContext, get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import err_console, resolve_config


@app.command()
def analyze(
    file: Path = typer.Argument(
        ...,
        help="Go source file to analyze",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: rich | json | csv | quiet",
        click_type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the JSON records to this file",
        dir_okay=False,
        writable=True,
    ),
    sort_by: Optional[str] = typer.Option(
        None,
        "--sort",
        help="Order functions by 'source' or a metric field (worst first)",
        click_type=click.Choice(("source",) + SORTABLE_FIELDS),
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    fail_on_threshold: bool = typer.Option(
        False,
        "--fail-on-threshold",
        help="Exit 1 if any function crosses a configured threshold",
    ),
):
    """
    Analyze every function declared in a Go file.

    [bold cyan]Examples:[/bold cyan]

      go-complexity analyze main.go

      go-complexity analyze main.go -f json -o metrics.json

      go-complexity analyze main.go --sort maintainability_index --fail-on-threshold
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = resolve_config(
            config=config,
            output_format=output_format.lower() if output_format else None,
            sort_by=sort_by,
            verbose=verbose,
            quiet=quiet,
        )

        results = analyze_file(file, settings, require_functions=True)
        results = sort_results(results, settings.sort_by)
        context = ReportContext(file_name=file.name, thresholds=settings.thresholds)

        get_formatter(settings.output_format).render(results, context)

        if output is not None:
            output.write_text(JsonFormatter().format(results, context) + "\n", encoding="utf-8")
            logger.info(f"Wrote {len(results)} records to {output}")

        if fail_on_threshold:
            flagged = [r for r in results if settings.thresholds.breaches(r)]
            if flagged:
                names = ", ".join(r.name for r in flagged)
                err_console.print(
                    f"[red]{len(flagged)} function(s) over thresholds:[/red] {names}",
                    highlight=False,
                )
                raise typer.Exit(1)

    except typer.Exit:
        raise

    except GoComplexityError as e:
        logger.debug(f"{e.__class__.__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)

    except OSError as e:
        logger.debug(f"Cannot write output: {e}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        err_console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)
