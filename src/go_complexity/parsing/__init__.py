"""Go source parsing: tree-sitter wrapper, node kinds, compilation units."""

from .kinds import CASE_KINDS, NESTING_KINDS, NodeKind, kind_of, node_text
from .treesitter_parser import GoParser, first_error_node, go_language
from .unit import CommentGroup, CompilationUnit, FunctionUnit, LineIndex

__all__ = [
    "CASE_KINDS",
    "NESTING_KINDS",
    "NodeKind",
    "kind_of",
    "node_text",
    "GoParser",
    "first_error_node",
    "go_language",
    "CommentGroup",
    "CompilationUnit",
    "FunctionUnit",
    "LineIndex",
]
