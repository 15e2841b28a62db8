"""Closed classification of the node shapes the extractor understands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .base import SyntaxNode


class DeclarationKind(Enum):
    PACKAGE = "package"
    IMPORT = "import"
    FUNCTION = "function"
    TYPE = "type"
    CLASS = "class"
    TRAIT = "trait"
    MODULE = "module"
    BINDING = "binding"
    COMMENT = "comment"
    UNRECOGNIZED = "unrecognized"


# Grammar tag -> kind. Tags not listed here classify as UNRECOGNIZED.
_TAG_KINDS: dict[str, DeclarationKind] = {
    "package_clause": DeclarationKind.PACKAGE,
    "import_declaration": DeclarationKind.IMPORT,
    "function_definition": DeclarationKind.FUNCTION,
    "function_declaration": DeclarationKind.FUNCTION,
    "type_definition": DeclarationKind.TYPE,
    "class_definition": DeclarationKind.CLASS,
    "enum_definition": DeclarationKind.CLASS,
    "trait_definition": DeclarationKind.TRAIT,
    "object_definition": DeclarationKind.MODULE,
    "package_object": DeclarationKind.MODULE,
    "val_definition": DeclarationKind.BINDING,
    "var_definition": DeclarationKind.BINDING,
    "comment": DeclarationKind.COMMENT,
    "block_comment": DeclarationKind.COMMENT,
}

# Kinds that contribute exactly one symbol: their declared name.
NAMED_KINDS: frozenset[DeclarationKind] = frozenset({
    DeclarationKind.FUNCTION,
    DeclarationKind.TYPE,
    DeclarationKind.CLASS,
    DeclarationKind.TRAIT,
    DeclarationKind.MODULE,
})


@dataclass(frozen=True)
class Declaration:
    """A syntax node tagged with its declaration kind.

    ``tag`` keeps the raw grammar type so UNRECOGNIZED nodes can be reported.
    """

    kind: DeclarationKind
    tag: str
    node: SyntaxNode


def classify_declaration(node: SyntaxNode) -> Declaration:
    kind = _TAG_KINDS.get(node.type, DeclarationKind.UNRECOGNIZED)
    return Declaration(kind=kind, tag=node.type, node=node)
