"""CSV formatter for go-complexity."""

import csv
import io
from typing import List

from ..metrics.models import WIRE_NAMES, MetricsResult
from .base import BaseFormatter, ReportContext


class CsvFormatter(BaseFormatter):
    """Render results as CSV, one row per function."""

    def render(self, results: List[MetricsResult], context: ReportContext) -> None:
        print(self.format(results, context), end="")

    def format(self, results: List[MetricsResult], context: ReportContext) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        header = list(WIRE_NAMES.values())
        writer.writerow(header)
        for r in results:
            record = r.to_dict()
            writer.writerow([record[key] for key in header])
        return output.getvalue()
