"""Per-function metric aggregation.

Runs the cyclomatic, nesting-weighted and Halstead walks over one function,
derives the maintainability index and comment density, and applies the
numeric guards before building an immutable ``MetricsResult``.
"""

from __future__ import annotations

import math
from typing import Any

from ..parsing.kinds import NodeKind, kind_of
from ..parsing.unit import CompilationUnit, FunctionUnit
from .cognitive import nesting_score
from .cyclomatic import cyclomatic_complexity
from .halstead import halstead_metrics
from .models import MetricsResult
from .numeric import clamp, finite_or_zero, round_half_away


def maintainability_index(cyclomatic: int, volume: float, lines_of_code: int) -> float:
    """Maintainability index normalized to [0, 100].

    MI = max(0, (171 - 5.2 ln(V) - 0.23 CC - 16.2 ln(LOC)) * 100 / 171),
    rounded to a whole number and capped at 100. Non-positive volume or
    line count is treated as 1.
    """
    if volume <= 0:
        volume = 1.0
    if lines_of_code <= 0:
        lines_of_code = 1
    raw = 171 - 5.2 * math.log(volume) - 0.23 * cyclomatic - 16.2 * math.log(lines_of_code)
    return clamp(round_half_away(raw * 100 / 171, 0), 0.0, 100.0)


def lines_of_code(function: FunctionUnit) -> int:
    """Span of the declaration plus its doc comment, at least 1."""
    if function.end_line < function.start_line:
        return 1
    count = function.end_line - function.start_line + 1
    if function.doc is not None:
        count += function.doc.line_span
    return max(count, 1)


def comment_density(unit: CompilationUnit, loc: int) -> float:
    """File-wide comment count divided by the function's lines of code.

    The numerator is shared by every function in the file.
    """
    if loc <= 0:
        return 0.0
    return unit.comment_count / loc


def count_return_statements(node: Any) -> int:
    """Count returns, excluding those that belong to closures."""
    if node is None:
        return 0
    count = 0
    stack = [node]
    while stack:
        current = stack.pop()
        kind = kind_of(current)
        if kind is NodeKind.FUNC_LITERAL:
            continue
        if kind is NodeKind.RETURN:
            count += 1
        stack.extend(current.named_children)
    return count


def _report(value: float) -> float:
    return round_half_away(finite_or_zero(value), 2)


def analyze_function(unit: CompilationUnit, function: FunctionUnit) -> MetricsResult:
    """Compute the full metric record for one function."""
    cyclomatic = cyclomatic_complexity(function.node)
    nesting = nesting_score(function.node)
    loc = lines_of_code(function)
    halstead = halstead_metrics(function.node)
    mi = maintainability_index(cyclomatic, halstead.volume, loc)
    density = comment_density(unit, loc)

    return MetricsResult(
        name=function.name,
        cyclomatic_complexity=cyclomatic,
        cognitive_complexity=nesting.cognitive,
        lines_of_code=loc,
        halstead_volume=_report(halstead.volume),
        halstead_difficulty=_report(halstead.difficulty),
        halstead_effort=_report(halstead.effort),
        maintainability_index=_report(mi),
        nested_depth=nesting.max_depth,
        comment_density=_report(density),
        function_parameters=function.parameter_count,
        return_statements=count_return_statements(function.body),
    )
