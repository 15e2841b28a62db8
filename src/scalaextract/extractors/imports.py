"""Import resolution: turn one import declaration into flat import strings.

Two tree shapes are understood:

* nested -- the ``path`` field is a right-nested ``stable_identifier`` chain
  whose innermost layer holds the first two segments, e.g. for
  ``com.twitter.finagle.http``::

      (((com, twitter), finagle), http)

  with ``import_selectors`` / ``import_wildcard`` / ``renamed_identifier``
  for the selector part;

* flat -- the path segments are sibling ``identifier`` children of the
  declaration, selectors are ``namespace_selectors`` / ``namespace_wildcard``
  and renames are ``arrow_renamed_identifier`` / ``as_renamed_identifier``.
  One declaration may carry several comma-separated expressions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .base import SyntaxNode, lone_child, node_text
from .names import IDENTIFIER_TYPES, read_stable_identifier
from ..exceptions import StructuralError

WILDCARD = "_"

SELECTOR_LIST_TYPES: frozenset[str] = frozenset({"import_selectors", "namespace_selectors"})
WILDCARD_TYPES: frozenset[str] = frozenset({"import_wildcard", "namespace_wildcard"})
RENAME_TYPES: frozenset[str] = frozenset({
    "renamed_identifier",
    "arrow_renamed_identifier",
    "as_renamed_identifier",
})
COMMENT_TYPES: frozenset[str] = frozenset({"comment", "block_comment"})


class Selection(Enum):
    NONE = "none"
    WILDCARD = "wildcard"
    EXPLICIT = "explicit"


@dataclass(frozen=True)
class ImportSpec:
    """One import expression split into its base path and selector set."""

    base: str
    selection: Selection = Selection.NONE
    names: tuple[str, ...] = ()

    def expand(self) -> list[str]:
        if self.selection is Selection.WILDCARD:
            return [f"{self.base}.{WILDCARD}"]
        if self.selection is Selection.EXPLICIT:
            return [f"{self.base}.{name}" for name in self.names]
        return [self.base]


def read_nested_path(path: SyntaxNode | None, source: bytes) -> str:
    """Rebuild a right-nested ``stable_identifier`` chain, outer layer first.

    Each layer contributes its own trailing segment(s), which belong *before*
    everything read so far from the enclosing layers.
    """
    qualified = ""
    while path is not None:
        layer = read_stable_identifier(path, source)
        if qualified and layer:
            qualified = f"{layer}.{qualified}"
        elif layer:
            qualified = layer
        path = lone_child(path, "stable_identifier")
    return qualified


def _renamed_original(node: SyntaxNode, source: bytes) -> str:
    # The alias is dropped: the file depends on the original name.
    name = node.child_by_field_name("name")
    if name is None:
        raise StructuralError(
            f"Rename without a name within: {node_text(node, source)}",
            node_type=node.type,
            text=node_text(node, source),
        )
    return node_text(name, source)


def read_import_selectors(node: SyntaxNode, source: bytes) -> list[str]:
    """Names listed in a ``{...}`` selector list, renames resolved to originals."""
    if node.type not in SELECTOR_LIST_TYPES:
        raise StructuralError(
            f"Must be an import selector list: {node.type} - {node_text(node, source)}",
            node_type=node.type,
            text=node_text(node, source),
        )

    names: list[str] = []
    given_by_type = False
    for child in node.children:
        if not child.is_named:
            given_by_type = child.type == "given"
            continue

        if given_by_type:
            # ``{given Foo}`` pulls in every given of that type.
            given_by_type = False
            if WILDCARD not in names:
                names.append(WILDCARD)
        elif child.type in IDENTIFIER_TYPES:
            names.append(node_text(child, source))
        elif child.type in RENAME_TYPES:
            names.append(_renamed_original(child, source))
        elif child.type in WILDCARD_TYPES:
            # ``{given, _}`` names the wildcard twice but imports it once.
            if WILDCARD not in names:
                names.append(WILDCARD)
        elif child.type in COMMENT_TYPES:
            continue
        else:
            raise StructuralError(
                f"Unexpected node type {child.type!r} within: {node_text(node, source)}",
                node_type=child.type,
                text=node_text(node, source),
            )
    return names


class _Expression:
    """Accumulates one comma-separated import expression while walking."""

    def __init__(self) -> None:
        self.segments: list[str] = []
        self.selection = Selection.NONE
        self.names: tuple[str, ...] = ()

    @property
    def empty(self) -> bool:
        return not self.segments and self.selection is Selection.NONE

    def to_spec(self, declaration: SyntaxNode, source: bytes) -> ImportSpec:
        if not self.segments:
            raise StructuralError(
                f"Import selector without a path: {node_text(declaration, source)}",
                node_type=declaration.type,
                text=node_text(declaration, source),
            )
        return ImportSpec(base=".".join(self.segments), selection=self.selection, names=self.names)


def decompose_import(node: SyntaxNode, source: bytes) -> list[ImportSpec]:
    """Split an ``import_declaration`` into one :class:`ImportSpec` per expression."""
    if node.type != "import_declaration":
        raise StructuralError(
            f"Must be type 'import_declaration': {node.type} - {node_text(node, source)}",
            node_type=node.type,
            text=node_text(node, source),
        )

    specs: list[ImportSpec] = []
    current = _Expression()

    for child in node.children:
        if not child.is_named:
            if child.type == "," and not current.empty:
                specs.append(current.to_spec(node, source))
                current = _Expression()
            continue

        if child.type in IDENTIFIER_TYPES:
            current.segments.append(node_text(child, source))
        elif child.type == "stable_identifier":
            current.segments.append(read_nested_path(child, source))
        elif child.type in WILDCARD_TYPES:
            current.selection = Selection.WILDCARD
        elif child.type in SELECTOR_LIST_TYPES:
            current.selection = Selection.EXPLICIT
            current.names = tuple(read_import_selectors(child, source))
        elif child.type == "as_renamed_identifier":
            # Scala 3 ``import a.b as c``: the renamed node is the last segment.
            current.segments.append(_renamed_original(child, source))
        elif child.type in COMMENT_TYPES:
            continue
        else:
            raise StructuralError(
                f"Unexpected node type {child.type!r} within: {node_text(node, source)}",
                node_type=child.type,
                text=node_text(node, source),
            )

    if not current.empty:
        specs.append(current.to_spec(node, source))
    return specs


def resolve_imports(node: SyntaxNode, source: bytes) -> list[str]:
    """Fully-qualified import strings declared by *node*, in source order."""
    imports: list[str] = []
    for spec in decompose_import(node, source):
        imports.extend(spec.expand())
    return imports
