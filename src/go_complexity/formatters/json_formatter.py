"""JSON formatter for go-complexity."""

import json
from typing import List

from ..metrics.models import MetricsResult
from .base import BaseFormatter, ReportContext


class JsonFormatter(BaseFormatter):
    """Render results as a JSON list of flat camelCase records."""

    def render(self, results: List[MetricsResult], context: ReportContext) -> None:
        print(self.format(results, context))

    def format(self, results: List[MetricsResult], context: ReportContext) -> str:
        data = [r.to_dict() for r in results]
        return json.dumps(data, indent=2)
