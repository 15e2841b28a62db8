"""Visibility filtering and namespace-qualified symbol collection."""

from __future__ import annotations

import logging

from .base import SyntaxNode, lone_child, node_text, position
from .kinds import NAMED_KINDS, DeclarationKind, classify_declaration
from ..exceptions import StructuralError
from ..models import Diagnostic, DiagnosticKind

logger = logging.getLogger(__name__)

# Binding patterns that bind several names at once, e.g.
# ``val Array(one, two) = Array(1, 2)`` or ``val all @ Some(_) = ...``.
# They contribute no symbol.
DESTRUCTURING_PATTERNS: frozenset[str] = frozenset({
    "case_class_pattern",
    "tuple_pattern",
    "infix_pattern",
    "capture_pattern",
})


def has_access_modifier(node: SyntaxNode) -> bool:
    """True if *node* carries any access modifier (``private``, ``protected[x]``...).

    Any access modifier counts as "not exported". This is wrong for private
    constructors, which do not hide the class itself; callers accept that.
    """
    modifiers = lone_child(node, "modifiers")
    if modifiers is None:
        return False
    return lone_child(modifiers, "access_modifier") is not None


def _declared_name(node: SyntaxNode, source: bytes) -> str:
    name = node.child_by_field_name("name")
    if name is None:
        raise StructuralError(
            f"Declaration {node.type!r} has no name: {node_text(node, source)}",
            node_type=node.type,
            text=node_text(node, source),
        )
    return node_text(name, source)


def collect_symbols(
    node: SyntaxNode,
    source: bytes,
    namespace: str = "",
    diagnostics: list[Diagnostic] | None = None,
) -> list[str]:
    """Exported symbols rooted at *node*, qualified with *namespace*.

    Output is pre-order: a container precedes its members, siblings keep
    source order. Unrecognized node types are reported through
    *diagnostics* (when given) and otherwise ignored.
    """
    if has_access_modifier(node):
        return []

    declaration = classify_declaration(node)
    kind = declaration.kind

    if kind in NAMED_KINDS:
        symbol = namespace + _declared_name(node, source)
        symbols = [symbol]
        if kind is DeclarationKind.MODULE:
            body = node.child_by_field_name("body")
            if body is not None:
                for child in body.named_children:
                    symbols.extend(collect_symbols(child, source, symbol + ".", diagnostics))
        return symbols

    if kind is DeclarationKind.BINDING:
        pattern = node.child_by_field_name("pattern")
        if pattern is None:
            raise StructuralError(
                f"Binding {node.type!r} has no pattern: {node_text(node, source)}",
                node_type=node.type,
                text=node_text(node, source),
            )
        if pattern.type in DESTRUCTURING_PATTERNS:
            return []
        return [namespace + node_text(pattern, source)]

    if kind is DeclarationKind.COMMENT:
        return []

    logger.warning("Unknown symbol type: %s", declaration.tag)
    if diagnostics is not None:
        line, column = position(node)
        diagnostics.append(Diagnostic(
            kind=DiagnosticKind.UNKNOWN_SYMBOL_KIND,
            message=f"Unknown symbol type: {declaration.tag}",
            line=line,
            column=column,
        ))
    return []
