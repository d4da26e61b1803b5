"""
go-complexity - per-function complexity metrics for Go source files.

Computes cyclomatic and cognitive complexity, nesting depth, Halstead
volume/difficulty/effort, maintainability index, comment density,
parameter and return-statement counts for every function in a file.
"""

__version__ = "0.1.0"

from .analyzer import analyze_all, parse
from .api import analyze_file, analyze_source
from .metrics.models import MetricsResult

__all__ = [
    "analyze_file",  # Validate, read and analyze a .go file
    "analyze_source",  # Analyze in-memory source
    "parse",
    "analyze_all",
    "MetricsResult",
]
