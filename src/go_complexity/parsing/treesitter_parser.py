"""Tree-sitter parser wrapper for Go.

Usage:
    parser = GoParser()
    tree = parser.parse(code_bytes)
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Any

import tree_sitter
import tree_sitter_go

if TYPE_CHECKING:
    # Structural stand-ins for the tree-sitter binding types
    class Node:
        type: str
        text: bytes | None
        start_byte: int
        end_byte: int
        start_point: tuple[int, int]
        end_point: tuple[int, int]
        children: list[Node]
        named_children: list[Node]
        is_named: bool
        is_missing: bool
        has_error: bool
        parent: Node | None

    class Tree:
        root_node: Node


@lru_cache(maxsize=1)
def go_language() -> Any:
    """Return the tree-sitter Language for Go (built once per process)."""
    # tree-sitter >= 0.23 returns a PyCapsule; wrap in Language()
    return tree_sitter.Language(tree_sitter_go.language())


class GoParser:
    """Thin wrapper around a tree-sitter Parser configured for Go.

    Parsers are cheap and not shared between threads, so each analysis run
    builds its own; only the Language object is cached.
    """

    def __init__(self) -> None:
        self._parser = tree_sitter.Parser(go_language())

    def parse(self, code: bytes) -> Tree:
        """Parse code and return the syntax tree.

        tree-sitter never raises on malformed input; callers inspect
        ``tree.root_node.has_error`` to detect syntax errors.
        """
        tree: Tree = self._parser.parse(code)
        return tree


def first_error_node(node: Node) -> Node | None:
    """Return the first ERROR or MISSING node in source order, if any."""
    if node.type == "ERROR" or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = first_error_node(child)
        if found is not None:
            return found
    return None
