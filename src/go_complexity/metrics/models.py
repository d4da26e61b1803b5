"""Result records produced by the metrics engine."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict

# Python attribute -> wire (JSON) name
WIRE_NAMES: Dict[str, str] = {
    "name": "name",
    "cyclomatic_complexity": "cyclomaticComplexity",
    "cognitive_complexity": "cognitiveComplexity",
    "lines_of_code": "linesOfCode",
    "halstead_volume": "halsteadVolume",
    "halstead_difficulty": "halsteadDifficulty",
    "halstead_effort": "halsteadEffort",
    "maintainability_index": "maintainabilityIndex",
    "nested_depth": "nestedDepth",
    "comment_density": "commentDensity",
    "function_parameters": "functionParameters",
    "return_statements": "returnStatements",
}


@dataclass(frozen=True)
class MetricsResult:
    """Complexity metrics for a single function.

    Floating fields are finite and rounded to two decimals; the record is
    immutable once built.
    """

    name: str
    cyclomatic_complexity: int
    cognitive_complexity: int
    lines_of_code: int
    halstead_volume: float
    halstead_difficulty: float
    halstead_effort: float
    maintainability_index: float
    nested_depth: int
    comment_density: float
    function_parameters: int
    return_statements: int

    def to_dict(self) -> Dict[str, Any]:
        """Flat record keyed by wire names, in declaration order."""
        return {WIRE_NAMES[f.name]: getattr(self, f.name) for f in fields(self)}

