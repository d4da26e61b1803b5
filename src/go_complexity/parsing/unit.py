"""Compilation-unit model: one parsed Go file and views onto its functions.

A ``CompilationUnit`` owns the tree, the source bytes, a byte-offset to line
index and the file's comment groups. ``FunctionUnit`` objects are views into
that tree; they never copy it.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Any, Iterator

from .kinds import NodeKind, kind_of, node_text

_WHITESPACE = b" \t\r\n\f\v"


class LineIndex:
    """Maps byte offsets in a source buffer to 1-based line numbers.

    Built once per compilation unit, then queried for every node and comment.
    """

    def __init__(self, source: bytes) -> None:
        starts = [0]
        offset = source.find(b"\n")
        while offset != -1:
            starts.append(offset + 1)
            offset = source.find(b"\n", offset + 1)
        self._line_starts: tuple[int, ...] = tuple(starts)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_of(self, offset: int) -> int:
        """Line containing the byte at ``offset``."""
        return bisect_right(self._line_starts, offset)

    def start_line(self, node: Any) -> int:
        return self.line_of(node.start_byte)

    def end_line(self, node: Any) -> int:
        # end_byte is exclusive; the last byte belongs to the node
        return self.line_of(max(node.start_byte, node.end_byte - 1))


@dataclass(frozen=True)
class CommentGroup:
    """A run of comments with no code and no blank line between them.

    Attributes:
        start_line: First line of the first comment (1-indexed)
        end_line: Last line of the last comment (1-indexed)
        count: Number of individual comments in the group
        trailing: True if the group starts after code on the same line
    """

    start_line: int
    end_line: int
    count: int
    trailing: bool = False

    @property
    def line_span(self) -> int:
        return self.end_line - self.start_line + 1


@dataclass(frozen=True)
class FunctionUnit:
    """A function or method declaration within a compilation unit.

    Attributes:
        node: The ``function_declaration`` / ``method_declaration`` node
        name: Declared name
        parameter_groups: Names per parameter group, in order
        body: The body block (None for body-less declarations)
        doc: Doc comment group immediately preceding the declaration
        start_line: Line of the ``func`` keyword
        end_line: Line of the closing brace
    """

    node: Any
    name: str
    parameter_groups: tuple[tuple[str, ...], ...]
    body: Any | None
    doc: CommentGroup | None
    start_line: int
    end_line: int

    @property
    def parameter_count(self) -> int:
        return sum(len(group) for group in self.parameter_groups)


@dataclass
class CompilationUnit:
    """One parsed source file.

    Attributes:
        name: File name the source was supplied under
        source: Raw source bytes
        tree: tree-sitter Tree
        line_index: Offset to line lookup for ``source``
        comment_groups: Comment groups in source order
    """

    name: str
    source: bytes
    tree: Any
    line_index: LineIndex
    comment_groups: list[CommentGroup] = field(default_factory=list)

    @classmethod
    def build(cls, name: str, source: bytes, tree: Any) -> CompilationUnit:
        """Assemble a unit from a successfully parsed tree."""
        line_index = LineIndex(source)
        comments = list(_iter_comments(tree.root_node))
        groups = _group_comments(comments, source, line_index)
        return cls(
            name=name,
            source=source,
            tree=tree,
            line_index=line_index,
            comment_groups=groups,
        )

    @property
    def root(self) -> Any:
        return self.tree.root_node

    @property
    def comment_count(self) -> int:
        """Number of individual comments in the whole file."""
        return sum(group.count for group in self.comment_groups)

    def functions(self) -> list[FunctionUnit]:
        """Function and method declarations in source order."""
        return [self._function_unit(node) for node in _iter_function_nodes(self.root)]

    def doc_comment_for(self, node: Any) -> CommentGroup | None:
        """Return the comment group ending on the line right above ``node``."""
        start_line = self.line_index.start_line(node)
        for group in self.comment_groups:
            if group.end_line == start_line - 1 and not group.trailing:
                return group
            if group.start_line >= start_line:
                break
        return None

    def _function_unit(self, node: Any) -> FunctionUnit:
        name_node = node.child_by_field_name("name")
        return FunctionUnit(
            node=node,
            name=node_text(name_node) if name_node is not None else "",
            parameter_groups=_parameter_groups(node.child_by_field_name("parameters")),
            body=node.child_by_field_name("body"),
            doc=self.doc_comment_for(node),
            start_line=self.line_index.start_line(node),
            end_line=self.line_index.end_line(node),
        )


def _iter_function_nodes(node: Any) -> Iterator[Any]:
    """Pre-order search for declarations, not descending into them."""
    stack = [node]
    while stack:
        current = stack.pop()
        if kind_of(current) is NodeKind.FUNCTION_DECL:
            yield current
            continue
        stack.extend(reversed(current.children))


def _iter_comments(node: Any) -> Iterator[Any]:
    # Comments are tree-sitter "extras" and may sit at any depth
    stack = [node]
    while stack:
        current = stack.pop()
        if kind_of(current) is NodeKind.COMMENT:
            yield current
            continue
        stack.extend(reversed(current.children))


def _parameter_groups(parameter_list: Any | None) -> tuple[tuple[str, ...], ...]:
    if parameter_list is None:
        return ()
    groups = []
    for child in parameter_list.named_children:
        if kind_of(child) in (NodeKind.PARAMETER, NodeKind.VARIADIC_PARAMETER):
            names = tuple(
                node_text(n) for n in child.children_by_field_name("name") if n.is_named
            )
            groups.append(names)
    return tuple(groups)


def _starts_after_code(source: bytes, offset: int) -> bool:
    """True if something other than whitespace precedes ``offset`` on its line."""
    pos = offset - 1
    while pos >= 0:
        byte = source[pos : pos + 1]
        if byte == b"\n":
            return False
        if byte not in (b" ", b"\t", b"\r"):
            return True
        pos -= 1
    return False


def _group_comments(comments: list[Any], source: bytes, index: LineIndex) -> list[CommentGroup]:
    """Group adjacent comments the way Go's parser does.

    Comments join a group when only whitespace separates them and at most
    one newline lies between. A group that starts after code on the same
    line only takes further comments from that line.
    """
    groups: list[CommentGroup] = []
    current: dict[str, Any] | None = None

    for comment in comments:
        start_line = index.start_line(comment)
        end_line = index.end_line(comment)

        if current is not None:
            gap = source[current["end_byte"] : comment.start_byte]
            joinable = not gap.strip(_WHITESPACE) and gap.count(b"\n") <= 1
            if current["trailing"] and start_line != current["end_line"]:
                joinable = False
            if joinable:
                current["end_line"] = end_line
                current["end_byte"] = comment.end_byte
                current["count"] += 1
                continue
            groups.append(_freeze_group(current))

        current = {
            "start_line": start_line,
            "end_line": end_line,
            "end_byte": comment.end_byte,
            "count": 1,
            "trailing": _starts_after_code(source, comment.start_byte),
        }

    if current is not None:
        groups.append(_freeze_group(current))
    return groups


def _freeze_group(state: dict[str, Any]) -> CommentGroup:
    return CommentGroup(
        start_line=state["start_line"],
        end_line=state["end_line"],
        count=state["count"],
        trailing=state["trailing"],
    )
