"""Node-kind classification for the tree-sitter Go grammar.

Every walker dispatches on a ``NodeKind`` rather than on raw tree-sitter
type strings, so grammar naming lives in one table.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class NodeKind(Enum):
    """Syntactic categories the metric walkers distinguish."""

    FUNCTION_DECL = "function_decl"
    FUNC_LITERAL = "func_literal"

    # Control flow
    IF = "if"
    FOR = "for"
    SWITCH = "switch"
    TYPE_SWITCH = "type_switch"
    SELECT = "select"
    EXPRESSION_CASE = "expression_case"
    TYPE_CASE = "type_case"
    DEFAULT_CASE = "default_case"
    COMM_CASE = "communication_case"

    # Statements
    RETURN = "return"
    ASSIGNMENT = "assignment"
    SHORT_VAR_DECL = "short_var_decl"
    RECEIVE = "receive"
    INC = "inc"
    DEC = "dec"
    SEND = "send"
    GO = "go"
    DEFER = "defer"
    BRANCH = "branch"

    # Expressions
    BINARY = "binary"
    UNARY = "unary"
    CALL = "call"
    VARIADIC_ARGUMENT = "variadic_argument"
    SELECTOR = "selector"
    TYPE_ASSERTION = "type_assertion"
    COMPOSITE_LITERAL = "composite_literal"

    # Signatures and types
    PARAMETER = "parameter"
    VARIADIC_PARAMETER = "variadic_parameter"
    CHANNEL_TYPE = "channel_type"

    # Leaves
    IDENTIFIER = "identifier"
    LITERAL = "literal"
    COMMENT = "comment"

    OTHER = "other"


_KIND_BY_TYPE: dict[str, NodeKind] = {
    "function_declaration": NodeKind.FUNCTION_DECL,
    "method_declaration": NodeKind.FUNCTION_DECL,
    "func_literal": NodeKind.FUNC_LITERAL,
    "if_statement": NodeKind.IF,
    "for_statement": NodeKind.FOR,
    "expression_switch_statement": NodeKind.SWITCH,
    "type_switch_statement": NodeKind.TYPE_SWITCH,
    "select_statement": NodeKind.SELECT,
    "expression_case": NodeKind.EXPRESSION_CASE,
    "type_case": NodeKind.TYPE_CASE,
    "default_case": NodeKind.DEFAULT_CASE,
    "communication_case": NodeKind.COMM_CASE,
    "return_statement": NodeKind.RETURN,
    "assignment_statement": NodeKind.ASSIGNMENT,
    "short_var_declaration": NodeKind.SHORT_VAR_DECL,
    "receive_statement": NodeKind.RECEIVE,
    "inc_statement": NodeKind.INC,
    "dec_statement": NodeKind.DEC,
    "send_statement": NodeKind.SEND,
    "go_statement": NodeKind.GO,
    "defer_statement": NodeKind.DEFER,
    "break_statement": NodeKind.BRANCH,
    "continue_statement": NodeKind.BRANCH,
    "goto_statement": NodeKind.BRANCH,
    "fallthrough_statement": NodeKind.BRANCH,
    "binary_expression": NodeKind.BINARY,
    "unary_expression": NodeKind.UNARY,
    "call_expression": NodeKind.CALL,
    "variadic_argument": NodeKind.VARIADIC_ARGUMENT,
    "selector_expression": NodeKind.SELECTOR,
    "qualified_type": NodeKind.SELECTOR,
    "type_assertion_expression": NodeKind.TYPE_ASSERTION,
    "composite_literal": NodeKind.COMPOSITE_LITERAL,
    "parameter_declaration": NodeKind.PARAMETER,
    "variadic_parameter_declaration": NodeKind.VARIADIC_PARAMETER,
    "channel_type": NodeKind.CHANNEL_TYPE,
    "identifier": NodeKind.IDENTIFIER,
    "field_identifier": NodeKind.IDENTIFIER,
    "type_identifier": NodeKind.IDENTIFIER,
    "package_identifier": NodeKind.IDENTIFIER,
    "label_name": NodeKind.IDENTIFIER,
    "blank_identifier": NodeKind.IDENTIFIER,
    # Predeclared identifiers get their own node types in tree-sitter-go
    "nil": NodeKind.IDENTIFIER,
    "true": NodeKind.IDENTIFIER,
    "false": NodeKind.IDENTIFIER,
    "iota": NodeKind.IDENTIFIER,
    "int_literal": NodeKind.LITERAL,
    "float_literal": NodeKind.LITERAL,
    "imaginary_literal": NodeKind.LITERAL,
    "rune_literal": NodeKind.LITERAL,
    "interpreted_string_literal": NodeKind.LITERAL,
    "raw_string_literal": NodeKind.LITERAL,
    "comment": NodeKind.COMMENT,
}

# Constructs that open a nesting level
NESTING_KINDS = frozenset(
    {NodeKind.IF, NodeKind.FOR, NodeKind.SWITCH, NodeKind.TYPE_SWITCH, NodeKind.SELECT}
)

CASE_KINDS = frozenset(
    {NodeKind.EXPRESSION_CASE, NodeKind.TYPE_CASE, NodeKind.DEFAULT_CASE, NodeKind.COMM_CASE}
)


def kind_of(node: Any) -> NodeKind:
    """Classify a tree-sitter node.

    Anonymous nodes (keywords, punctuation) share type strings with named
    ones (``nil``, ``true``...), so only named nodes are classified.
    """
    if not node.is_named:
        return NodeKind.OTHER
    return _KIND_BY_TYPE.get(node.type, NodeKind.OTHER)


def node_text(node: Any) -> str:
    """Decode a node's source text."""
    if node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")
