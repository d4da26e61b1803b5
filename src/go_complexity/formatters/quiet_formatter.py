"""Quiet formatter - function names only."""

from typing import List

from ..metrics.models import MetricsResult
from .base import BaseFormatter, ReportContext


class QuietFormatter(BaseFormatter):
    """Render just function names, one per line."""

    def render(self, results: List[MetricsResult], context: ReportContext) -> None:
        print(self.format(results, context))

    def format(self, results: List[MetricsResult], context: ReportContext) -> str:
        return "\n".join(r.name for r in results)
