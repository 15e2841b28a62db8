"""Qualified-name reading: flatten identifier chains into dotted strings."""

from __future__ import annotations

from .base import SyntaxNode, node_text
from ..exceptions import StructuralError

IDENTIFIER_TYPES: frozenset[str] = frozenset({"identifier", "operator_identifier"})


def _read_chain(
    node: SyntaxNode,
    source: bytes,
    expected: str,
    ignore_last: bool,
    nested_ok: bool,
) -> str:
    if node.type != expected:
        raise StructuralError(
            f"Must be type {expected!r}: {node.type} - {node_text(node, source)}",
            node_type=node.type,
            text=node_text(node, source),
        )

    total = node.named_child_count
    if ignore_last:
        total -= 1

    segments: list[str] = []
    for index in range(total):
        child = node.named_child(index)
        if child.type in IDENTIFIER_TYPES:
            segments.append(node_text(child, source))
        elif nested_ok and child.type == expected:
            # Right-recursive chains: the nested layer is read separately.
            continue
        else:
            raise StructuralError(
                f"Unexpected node type {child.type!r} within: {node_text(node, source)}",
                node_type=child.type,
                text=node_text(node, source),
            )
    return ".".join(segments)


def read_package_identifier(node: SyntaxNode, source: bytes, ignore_last: bool = False) -> str:
    """Dot-join the identifiers of a ``package_identifier`` node.

    Raises:
        StructuralError: *node* is not a ``package_identifier`` or holds
            anything other than identifiers.
    """
    return _read_chain(node, source, "package_identifier", ignore_last, nested_ok=False)


def read_stable_identifier(node: SyntaxNode, source: bytes, ignore_last: bool = False) -> str:
    """Dot-join the identifiers directly under a ``stable_identifier`` node.

    Nested ``stable_identifier`` children are skipped; callers walk them
    themselves (see :func:`scalaextract.extractors.imports.read_nested_path`).

    Raises:
        StructuralError: *node* is not a ``stable_identifier`` or holds an
            unexpected child.
    """
    return _read_chain(node, source, "stable_identifier", ignore_last, nested_ok=True)
