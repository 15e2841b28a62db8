"""Protocols for the syntax tree and for source-file parsers."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ..models import Diagnostic, ParseResult


class SyntaxNode(Protocol):
    """The subset of a tree-sitter ``Node`` the extractor reads.

    ``tree_sitter.Node`` satisfies this structurally; tests use small fakes.
    """

    @property
    def type(self) -> str: ...

    @property
    def is_named(self) -> bool: ...

    @property
    def named_child_count(self) -> int: ...

    @property
    def named_children(self) -> Sequence[SyntaxNode]: ...

    @property
    def children(self) -> Sequence[SyntaxNode]: ...

    @property
    def start_byte(self) -> int: ...

    @property
    def end_byte(self) -> int: ...

    @property
    def start_point(self) -> tuple[int, int]: ...

    @property
    def has_error(self) -> bool: ...

    @property
    def is_missing(self) -> bool: ...

    def named_child(self, index: int) -> SyntaxNode | None: ...

    def child_by_field_name(self, name: str) -> SyntaxNode | None: ...


@runtime_checkable
class Parser(Protocol):
    """Interface every source-file parser satisfies.

    Implementations:
      - ScalaParser (tree-sitter-scala)
    """

    def parse(self, file_path: str, source: str) -> tuple[ParseResult, list[Diagnostic]]:
        """Extract package, imports and exported symbols from *source*."""
        ...


def node_text(node: SyntaxNode, source: bytes) -> str:
    """Return the source slice covered by *node*."""
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def lone_child(node: SyntaxNode, node_type: str) -> SyntaxNode | None:
    """Return the first named child of *node* tagged *node_type*, if any."""
    for child in node.named_children:
        if child.type == node_type:
            return child
    return None


def position(node: SyntaxNode) -> tuple[int, int]:
    """1-based (line, column) of the start of *node*."""
    row, column = node.start_point
    return row + 1, column + 1
