"""Compilation-unit driver: parse Go source and analyze every function.

Example:
    >>> unit = parse("main.go", b"package main\\n\\nfunc main() {}\\n")
    >>> [r.name for r in analyze_all(unit)]
    ['main']
"""

from __future__ import annotations

from typing import Union

from .exceptions import ParsingError
from .logging_config import get_logger
from .metrics.aggregator import analyze_function
from .metrics.models import MetricsResult
from .parsing.treesitter_parser import GoParser, first_error_node
from .parsing.unit import CompilationUnit

logger = get_logger(__name__)


def parse(name: str, text: Union[bytes, str]) -> CompilationUnit:
    """Parse Go source into a CompilationUnit.

    Args:
        name: File name, used in error messages
        text: Source as bytes, or str (encoded as UTF-8)

    Returns:
        CompilationUnit for the whole file

    Raises:
        ParsingError: If the text is not syntactically valid Go
    """
    source = text.encode("utf-8") if isinstance(text, str) else bytes(text)

    if not source.strip():
        raise ParsingError(name, "Empty code provided")

    try:
        source.decode("utf-8")
    except UnicodeDecodeError as e:
        line = source.count(b"\n", 0, e.start) + 1
        raise ParsingError(name, "illegal UTF-8 encoding", line=line)

    tree = GoParser().parse(source)
    root = tree.root_node
    if root.has_error:
        error_node = first_error_node(root) or root
        line = error_node.start_point[0] + 1
        reason = "missing " + error_node.type if error_node.is_missing else "syntax error"
        logger.debug(f"Parse of {name} failed at line {line}: {reason}")
        raise ParsingError(name, reason, line=line)

    # tree-sitter accepts bare declarations; a Go file must open with a package clause
    first = next((c for c in root.named_children if c.type != "comment"), None)
    if first is None or first.type != "package_clause":
        line = first.start_point[0] + 1 if first is not None else 1
        raise ParsingError(name, "expected 'package'", line=line)

    unit = CompilationUnit.build(name, source, tree)
    logger.debug(
        f"Parsed {name}: {unit.line_index.line_count} lines, "
        f"{unit.comment_count} comments"
    )
    return unit


def analyze_all(unit: CompilationUnit) -> list[MetricsResult]:
    """Analyze every function declaration in source order.

    Returns an empty list when the unit declares no functions.
    """
    functions = unit.functions()
    results = [analyze_function(unit, function) for function in functions]
    logger.debug(f"Analyzed {len(results)} functions in {unit.name}")
    return results


def analyze_source(file_name: str, source: Union[bytes, str]) -> list[MetricsResult]:
    """Parse and analyze in one call."""
    return analyze_all(parse(file_name, source))
