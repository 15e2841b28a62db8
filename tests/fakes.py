"""Hand-built syntax trees implementing the ``SyntaxNode`` protocol.

Used where the installed grammar cannot produce a shape (older nested
import trees, deliberately malformed clauses).
"""

from __future__ import annotations


class FakeNode:
    def __init__(self, type: str, children=(), text: str = "", named: bool = True) -> None:
        self.type = type
        self.is_named = named
        self.is_missing = False
        self.has_error = False
        self.children: list[FakeNode] = []
        self._fields: dict[str, FakeNode] = {}
        for child in children:
            if isinstance(child, tuple):
                field, child = child
                self._fields.setdefault(field, child)
            self.children.append(child)
        self._text = text
        self.start_byte = 0
        self.end_byte = 0

    @property
    def named_children(self) -> list[FakeNode]:
        return [c for c in self.children if c.is_named]

    @property
    def named_child_count(self) -> int:
        return len(self.named_children)

    @property
    def start_point(self) -> tuple[int, int]:
        return (0, self.start_byte)

    def named_child(self, index: int) -> FakeNode | None:
        named = self.named_children
        return named[index] if 0 <= index < len(named) else None

    def child_by_field_name(self, name: str) -> FakeNode | None:
        return self._fields.get(name)

    def __repr__(self) -> str:
        return f"FakeNode({self.type!r})"


def node(type: str, *children) -> FakeNode:
    return FakeNode(type, children)


def leaf(type: str, text: str) -> FakeNode:
    return FakeNode(type, text=text)


def ident(text: str) -> FakeNode:
    return leaf("identifier", text)


def tok(text: str) -> FakeNode:
    return FakeNode(text, text=text, named=False)


def _layout(current: FakeNode, offset: int, out: list[str]) -> int:
    current.start_byte = offset
    if current.children:
        for child in current.children:
            offset = _layout(child, offset, out)
    else:
        out.append(current._text)
        offset += len(current._text.encode("utf-8"))
    current.end_byte = offset
    return offset


def render(root: FakeNode) -> bytes:
    """Assign byte ranges to every node and return the matching source."""
    out: list[str] = []
    _layout(root, 0, out)
    return "".join(out).encode("utf-8")


def stable(*parts) -> FakeNode:
    """Right-nested ``stable_identifier`` chain, innermost pair first.

    ``stable("a", "b", "c")`` builds ``((a . b) . c)``.
    """
    chain = node("stable_identifier", ident(parts[0]), tok("."), ident(parts[1]))
    for part in parts[2:]:
        chain = node("stable_identifier", chain, tok("."), ident(part))
    return chain


class FakeTree:
    def __init__(self, root: FakeNode) -> None:
        self.root_node = root


class FakeTreeParser:
    """Stands in for ``tree_sitter.Parser``; always returns the same tree."""

    def __init__(self, root: FakeNode) -> None:
        self._root = root

    def parse(self, source: bytes) -> FakeTree:
        return FakeTree(self._root)
