"""Cyclomatic complexity: McCabe decision points + 1.

Refinements over the textbook count:
    - each value listed in a case clause is its own decision point
    - every ``&&`` / ``||`` is a decision point
    - closures count toward the enclosing function
"""

from __future__ import annotations

from typing import Any

from ..parsing.kinds import NodeKind, kind_of, node_text

_SHORT_CIRCUIT_OPERATORS = frozenset({"&&", "||"})


def cyclomatic_complexity(decl: Any) -> int:
    """Compute cyclomatic complexity of a function declaration node."""
    if decl is None:
        return 1
    return 1 + _decision_points(decl, decl)


def _decision_points(node: Any, root: Any) -> int:
    kind = kind_of(node)

    if kind is NodeKind.FUNCTION_DECL and node is not root:
        return 0

    points = 0
    if kind is NodeKind.IF:
        points += 1 + _else_if_links(node)
    elif kind in (NodeKind.FOR, NodeKind.SWITCH, NodeKind.TYPE_SWITCH, NodeKind.SELECT):
        points += 1
    elif kind is NodeKind.EXPRESSION_CASE:
        values = node.child_by_field_name("value")
        points += len(values.named_children) if values is not None else 0
    elif kind is NodeKind.TYPE_CASE:
        points += sum(1 for t in node.children_by_field_name("type") if t.is_named)
    elif kind is NodeKind.COMM_CASE:
        points += 1
    elif kind is NodeKind.BINARY:
        if _operator(node) in _SHORT_CIRCUIT_OPERATORS:
            points += 1
    elif kind in (NodeKind.LITERAL, NodeKind.COMMENT):
        return 0

    for child in node.named_children:
        points += _decision_points(child, root)
    return points


def _else_if_links(if_node: Any) -> int:
    """Count ``else if`` links hanging off an if statement.

    The chained ifs are visited again by the main recursion, so each link
    is weighted twice overall.
    """
    links = 0
    alternative = if_node.child_by_field_name("alternative")
    while alternative is not None and kind_of(alternative) is NodeKind.IF:
        links += 1
        alternative = alternative.child_by_field_name("alternative")
    return links


def _operator(node: Any) -> str:
    operator = node.child_by_field_name("operator")
    return node_text(operator) if operator is not None else ""
