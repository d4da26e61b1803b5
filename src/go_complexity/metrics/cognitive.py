"""Cognitive complexity and nesting depth, computed in one traversal.

Each if/for/switch/type switch/select adds ``1 + nesting level`` and opens a
new level for its body. A terminal ``else`` adds a flat 1. Each closure adds
a flat 1; its body still counts toward nesting depth but is not scored.

The nesting level is an argument of the recursion and the scores are return
values, so a walk holds no state outside its own call stack.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from ..parsing.kinds import CASE_KINDS, NESTING_KINDS, NodeKind, kind_of


@dataclass(frozen=True)
class NestingScore:
    """Result of a nesting-weighted walk.

    Attributes:
        cognitive: Cognitive complexity contribution
        max_depth: Deepest nesting level reached
    """

    cognitive: int = 0
    max_depth: int = 0

    def __add__(self, other: NestingScore) -> NestingScore:
        return NestingScore(
            cognitive=self.cognitive + other.cognitive,
            max_depth=max(self.max_depth, other.max_depth),
        )


def nesting_score(decl: Any) -> NestingScore:
    """Walk a function declaration and return its cognitive score and depth."""
    if decl is None:
        return NestingScore()
    body = decl.child_by_field_name("body")
    if body is None:
        return NestingScore()
    return _walk(body, level=0, scoring=True)


def cognitive_complexity(decl: Any) -> int:
    return nesting_score(decl).cognitive


def max_nesting_depth(decl: Any) -> int:
    return nesting_score(decl).max_depth


def _walk(node: Any, level: int, scoring: bool) -> NestingScore:
    kind = kind_of(node)

    if kind in NESTING_KINDS:
        return _enter(node, kind, level, scoring)

    if kind is NodeKind.FUNC_LITERAL:
        flat = NestingScore(cognitive=1 if scoring else 0, max_depth=level)
        body = node.child_by_field_name("body")
        if body is None:
            return flat
        return flat + _walk(body, level, scoring=False)

    if kind in (NodeKind.FUNCTION_DECL, NodeKind.LITERAL, NodeKind.COMMENT):
        return NestingScore(max_depth=level)

    return _walk_all(node.named_children, level, scoring)


def _enter(node: Any, kind: NodeKind, level: int, scoring: bool) -> NestingScore:
    inner = level + 1
    score = NestingScore(cognitive=(1 + level) if scoring else 0, max_depth=inner)

    if kind is NodeKind.IF:
        consequence = node.child_by_field_name("consequence")
        if consequence is not None:
            score = score + _walk(consequence, inner, scoring)
        alternative = node.child_by_field_name("alternative")
        if alternative is not None:
            if kind_of(alternative) is not NodeKind.IF and scoring:
                score = score + NestingScore(cognitive=1, max_depth=inner)
            score = score + _walk(alternative, inner, scoring)
        return score

    if kind is NodeKind.FOR:
        body = node.child_by_field_name("body")
        if body is not None:
            score = score + _walk(body, inner, scoring)
        return score

    # switch, type switch, select: walk the clauses, not the header
    clauses = [child for child in node.named_children if kind_of(child) in CASE_KINDS]
    return score + _walk_all(clauses, inner, scoring)


def _walk_all(nodes: Iterable[Any], level: int, scoring: bool) -> NestingScore:
    total = NestingScore(max_depth=level)
    for child in nodes:
        total = total + _walk(child, level, scoring)
    return total
