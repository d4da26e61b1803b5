"""Rich terminal formatter for go-complexity."""

import io
from typing import List

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..metrics.models import MetricsResult
from .base import BaseFormatter, ReportContext

console = Console()


def _maintainability_label(mi: float, low: float) -> str:
    if mi < low:
        return "[red]low[/red]"
    elif mi < 2 * low:
        return "[yellow]moderate[/yellow]"
    else:
        return "[green]good[/green]"


def _cell(value, flagged: bool) -> str:
    text = f"{value:.2f}" if isinstance(value, float) else str(value)
    return f"[red bold]{text}[/red bold]" if flagged else text


class RichFormatter(BaseFormatter):
    """Rich terminal output: summary panel plus one table row per function."""

    def render(self, results: List[MetricsResult], context: ReportContext) -> None:
        self._print(console, results, context)

    def format(self, results: List[MetricsResult], context: ReportContext) -> str:
        buffer = Console(file=io.StringIO(), width=160, color_system=None)
        self._print(buffer, results, context)
        return buffer.file.getvalue()

    # -- private helpers --

    def _print(self, out: Console, results: List[MetricsResult], context: ReportContext) -> None:
        out.print(self._summary(results, context))
        if not results:
            return
        out.print(self._table(results, context))

    def _summary(self, results: List[MetricsResult], context: ReportContext) -> Panel:
        count = len(results)
        mean_mi = sum(r.maintainability_index for r in results) / count if count else 0.0
        flagged = sum(1 for r in results if context.thresholds.breaches(r))
        text = (
            f"[bold]{escape(context.file_name)}[/bold]  |  "
            f"[cyan]{count}[/cyan] functions  |  "
            f"Mean maintainability: [blue]{mean_mi:.2f}[/blue] "
            f"({_maintainability_label(mean_mi, context.thresholds.maintainability_low)})  |  "
            f"[yellow]{flagged}[/yellow] over thresholds"
        )
        return Panel(text, title="[bold cyan]Summary[/bold cyan]", expand=False)

    def _table(self, results: List[MetricsResult], context: ReportContext) -> Table:
        table = Table(title="Function Metrics", expand=False)
        table.add_column("Function", style="yellow", no_wrap=True)
        table.add_column("Cyclo", justify="right")
        table.add_column("Cogn", justify="right")
        table.add_column("Depth", justify="right")
        table.add_column("LOC", justify="right")
        table.add_column("Volume", justify="right")
        table.add_column("Difficulty", justify="right")
        table.add_column("Effort", justify="right")
        table.add_column("MI", justify="right")
        table.add_column("Comments", justify="right")
        table.add_column("Params", justify="right")
        table.add_column("Returns", justify="right")

        for r in results:
            flagged = set(context.thresholds.breaches(r))
            table.add_row(
                r.name,
                _cell(r.cyclomatic_complexity, "cyclomatic_complexity" in flagged),
                _cell(r.cognitive_complexity, "cognitive_complexity" in flagged),
                _cell(r.nested_depth, "nested_depth" in flagged),
                _cell(r.lines_of_code, False),
                _cell(r.halstead_volume, False),
                _cell(r.halstead_difficulty, False),
                _cell(r.halstead_effort, False),
                _cell(r.maintainability_index, "maintainability_index" in flagged),
                _cell(r.comment_density, False),
                _cell(r.function_parameters, False),
                _cell(r.return_statements, False),
            )
        return table
