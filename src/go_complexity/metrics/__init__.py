"""Per-function complexity metrics for Go source."""

from .aggregator import (
    analyze_function,
    comment_density,
    count_return_statements,
    lines_of_code,
    maintainability_index,
)
from .cognitive import NestingScore, cognitive_complexity, max_nesting_depth, nesting_score
from .cyclomatic import cyclomatic_complexity
from .halstead import HalsteadMetrics, Label, Role, TallyTable, classify, halstead_metrics, tally
from .models import WIRE_NAMES, MetricsResult
from .numeric import finite_or_zero, round_half_away

__all__ = [
    "analyze_function",
    "comment_density",
    "count_return_statements",
    "lines_of_code",
    "maintainability_index",
    "NestingScore",
    "cognitive_complexity",
    "max_nesting_depth",
    "nesting_score",
    "cyclomatic_complexity",
    "HalsteadMetrics",
    "Label",
    "Role",
    "TallyTable",
    "classify",
    "halstead_metrics",
    "tally",
    "WIRE_NAMES",
    "MetricsResult",
    "finite_or_zero",
    "round_half_away",
]
