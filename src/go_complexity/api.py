"""Public API for go-complexity.

Example:
    >>> from go_complexity import analyze_file, analyze_source
    >>>
    >>> results = analyze_source("main.go", source_bytes)
    >>> results = analyze_file("pkg/handler.go")
    >>> [r.to_dict() for r in results]
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .analyzer import analyze_source
from .config import AnalysisConfig, load_config
from .exceptions import (
    FileAccessError,
    FileTooLargeError,
    NoFunctionsFoundError,
    UnsupportedFileError,
)
from .logging_config import get_logger
from .metrics.models import MetricsResult

logger = get_logger(__name__)


def validate_file(path: Path, config: AnalysisConfig) -> None:
    """Check that a file may be analyzed under ``config``.

    Raises:
        FileAccessError: If the path is missing or not a regular file
        UnsupportedFileError: If the extension is not allowed
        FileTooLargeError: If the file exceeds the size limit
    """
    if not path.exists():
        raise FileAccessError(path, "File does not exist")
    if not path.is_file():
        raise FileAccessError(path, "Not a regular file")

    if path.suffix.lower() not in config.allowed_extensions:
        raise UnsupportedFileError(path, config.allowed_extensions)

    try:
        size = path.stat().st_size
    except OSError as e:
        raise FileAccessError(path, f"Cannot stat file: {e}")
    if size > config.max_file_size_bytes:
        raise FileTooLargeError(path, size, config.max_file_size_bytes)


def analyze_file(
    path: Union[str, Path],
    config: Optional[AnalysisConfig] = None,
    require_functions: bool = False,
) -> list[MetricsResult]:
    """Validate, read and analyze one Go file.

    Args:
        path: File to analyze
        config: Analysis configuration (default: auto-discovered)
        require_functions: Raise NoFunctionsFoundError instead of
            returning an empty list

    Returns:
        One MetricsResult per function, in source order

    Raises:
        FileAccessError, UnsupportedFileError, FileTooLargeError: validation
        ParsingError: If the file is not valid Go
        NoFunctionsFoundError: If require_functions and nothing was found
    """
    path = Path(path)
    if config is None:
        config = load_config()

    validate_file(path, config)

    try:
        source = path.read_bytes()
    except OSError as e:
        raise FileAccessError(path, f"Cannot read file: {e}")

    logger.info(f"Analyzing {path} ({len(source)} bytes)")
    results = analyze_source(path.name, source)

    if not results and require_functions:
        raise NoFunctionsFoundError(path.name)
    return results


def sort_results(results: list[MetricsResult], sort_by: str = "source") -> list[MetricsResult]:
    """Order results for display.

    "source" keeps declaration order and "name" sorts alphabetically.
    Any other metric sorts worst first: ascending for the maintainability
    index, descending otherwise. Ties keep declaration order.
    """
    if sort_by == "source":
        return list(results)
    if sort_by == "name":
        return sorted(results, key=lambda r: r.name)
    if sort_by == "maintainability_index":
        return sorted(results, key=lambda r: r.maintainability_index)
    return sorted(results, key=lambda r: getattr(r, sort_by), reverse=True)


__all__ = ["analyze_file", "analyze_source", "sort_results", "validate_file"]
