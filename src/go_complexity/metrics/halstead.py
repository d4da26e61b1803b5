"""Halstead software-science metrics for Go functions.

Operators and operands are tallied over the whole declaration (signature and
body). Operator categories are keyed by their Go symbol or keyword; operands
by their source text.

    vocabulary = eta1 + eta2
    length     = N1 + N2
    volume     = length * log2(vocabulary)
    difficulty = (eta1 / 2) * (N2 / eta2)
    effort     = difficulty * volume
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple

from ..parsing.kinds import NodeKind, kind_of, node_text

# Single-keyword statements and the operator category they belong to
_KEYWORD_OPERATORS: dict[NodeKind, str] = {
    NodeKind.RETURN: "return",
    NodeKind.IF: "if",
    NodeKind.SWITCH: "switch",
    NodeKind.EXPRESSION_CASE: "case",
    NodeKind.TYPE_CASE: "case",
    NodeKind.SEND: "<-",
    NodeKind.GO: "go",
    NodeKind.DEFER: "defer",
    NodeKind.INC: "++",
    NodeKind.DEC: "--",
    NodeKind.SHORT_VAR_DECL: ":=",
    NodeKind.CALL: "call",
    NodeKind.SELECTOR: ".",
    NodeKind.TYPE_ASSERTION: ".",
    NodeKind.VARIADIC_PARAMETER: "...",
    NodeKind.VARIADIC_ARGUMENT: "...",
}

_SWITCH_TYPES = frozenset({"expression_switch_statement", "type_switch_statement"})
_ASSIGNMENT_TOKENS = frozenset({"=", ":="})


class Role(Enum):
    OPERATOR = "operator"
    OPERAND = "operand"


class Label(NamedTuple):
    """A classifier verdict for one node."""

    role: Role
    key: str


@dataclass
class TallyTable:
    """Occurrence counts per operator category and per operand identity."""

    operators: Counter = field(default_factory=Counter)
    operands: Counter = field(default_factory=Counter)

    def add(self, label: Label) -> None:
        if label.role is Role.OPERATOR:
            self.operators[label.key] += 1
        else:
            self.operands[label.key] += 1

    @property
    def distinct_operators(self) -> int:
        return len(self.operators)

    @property
    def distinct_operands(self) -> int:
        return len(self.operands)

    @property
    def total_operators(self) -> int:
        return sum(self.operators.values())

    @property
    def total_operands(self) -> int:
        return sum(self.operands.values())


@dataclass(frozen=True)
class HalsteadMetrics:
    """Derived Halstead measures.

    Attributes:
        distinct_operators: eta1
        distinct_operands: eta2
        total_operators: N1
        total_operands: N2
        length: N1 + N2
        vocabulary: eta1 + eta2
        volume: length * log2(vocabulary), 0 for an empty vocabulary
        difficulty: (eta1 / 2) * (N2 / eta2), 0 when there are no operands
        effort: difficulty * volume
    """

    distinct_operators: int = 0
    distinct_operands: int = 0
    total_operators: int = 0
    total_operands: int = 0
    length: int = 0
    vocabulary: int = 0
    volume: float = 0.0
    difficulty: float = 0.0
    effort: float = 0.0

    @classmethod
    def from_tally(cls, tally: TallyTable) -> HalsteadMetrics:
        eta1 = tally.distinct_operators
        eta2 = tally.distinct_operands
        n1 = tally.total_operators
        n2 = tally.total_operands

        length = n1 + n2
        vocabulary = eta1 + eta2

        volume = length * math.log2(vocabulary) if vocabulary > 0 else 0.0
        difficulty = (eta1 / 2.0) * (n2 / eta2) if eta2 > 0 else 0.0

        return cls(
            distinct_operators=eta1,
            distinct_operands=eta2,
            total_operators=n1,
            total_operands=n2,
            length=length,
            vocabulary=vocabulary,
            volume=volume,
            difficulty=difficulty,
            effort=difficulty * volume,
        )


def classify(node: Any) -> list[Label]:
    """Label a node as zero or more operators/operands.

    Most nodes yield nothing; a few yield two labels (a type switch is both
    ``switch`` and a type assertion, a declaration records its own name).
    """
    kind = kind_of(node)

    if kind is NodeKind.IDENTIFIER or kind is NodeKind.LITERAL:
        return [Label(Role.OPERAND, node_text(node))]

    keyword = _KEYWORD_OPERATORS.get(kind)
    if keyword is not None:
        return [Label(Role.OPERATOR, keyword)]

    if kind is NodeKind.BINARY or kind is NodeKind.UNARY or kind is NodeKind.ASSIGNMENT:
        operator = node.child_by_field_name("operator")
        if operator is None:
            return []
        return [Label(Role.OPERATOR, node_text(operator))]

    if kind is NodeKind.RECEIVE:
        for child in node.children:
            if not child.is_named and child.type in _ASSIGNMENT_TOKENS:
                return [Label(Role.OPERATOR, child.type)]
        return []

    if kind is NodeKind.FOR:
        is_range = any(child.type == "range_clause" for child in node.named_children)
        return [Label(Role.OPERATOR, "range" if is_range else "for")]

    if kind is NodeKind.TYPE_SWITCH:
        labels = [Label(Role.OPERATOR, "switch"), Label(Role.OPERATOR, ".")]
        # the guard binding is an assignment, not a short_var_declaration node
        if node.child_by_field_name("alias") is not None:
            labels.append(Label(Role.OPERATOR, ":="))
        return labels

    if kind is NodeKind.DEFAULT_CASE:
        parent = node.parent
        if parent is not None and parent.type in _SWITCH_TYPES:
            return [Label(Role.OPERATOR, "case")]
        return []

    if kind is NodeKind.BRANCH:
        # break / continue / goto / fallthrough: the keyword is the first token
        return [Label(Role.OPERATOR, node.children[0].type)] if node.children else []

    if kind is NodeKind.COMPOSITE_LITERAL:
        literal_type = node.child_by_field_name("type")
        if literal_type is not None and literal_type.type == "type_identifier":
            return [Label(Role.OPERAND, node_text(literal_type))]
        return []

    if kind is NodeKind.FUNCTION_DECL:
        name = node.child_by_field_name("name")
        return [Label(Role.OPERAND, node_text(name))] if name is not None else []

    if kind is NodeKind.CHANNEL_TYPE:
        return [Label(Role.OPERAND, "chan")]

    return []


def tally(node: Any) -> TallyTable:
    """Build a fresh TallyTable for everything under ``node``."""
    table = TallyTable()
    stack = [node]
    while stack:
        current = stack.pop()
        for label in classify(current):
            table.add(label)
        kind = kind_of(current)
        # Literal internals (escape sequences, string content) are not tokens
        if kind is NodeKind.LITERAL or kind is NodeKind.COMMENT:
            continue
        stack.extend(current.named_children)
    return table


def halstead_metrics(node: Any) -> HalsteadMetrics:
    """Compute Halstead metrics for a declaration node."""
    if node is None:
        return HalsteadMetrics()
    return HalsteadMetrics.from_tally(tally(node))
