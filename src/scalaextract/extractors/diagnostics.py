"""Syntax-error reporting over a parsed tree."""

from __future__ import annotations

from tree_sitter import Language, Node, Query, QueryCursor

from .base import node_text, position
from ..models import Diagnostic, DiagnosticKind

ERRORS_QUERY = "(ERROR) @error"

# Compiled queries, keyed by language.
_query_cache: dict[int, Query] = {}


def _errors_query(language: Language) -> Query:
    key = id(language)
    if key not in _query_cache:
        _query_cache[key] = Query(language, ERRORS_QUERY)
    return _query_cache[key]


def _snippet(node: Node, source: bytes, limit: int) -> str:
    text = node_text(node, source).strip()
    if len(text) > limit:
        text = text[:limit] + "..."
    return text


def _missing_nodes(root: Node) -> list[Node]:
    missing: list[Node] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_missing:
            missing.append(node)
        elif node.has_error:
            stack.extend(node.children)
    return missing


def query_errors(
    root: Node,
    source: bytes,
    language: Language,
    max_snippet: int = 80,
) -> list[Diagnostic]:
    """One diagnostic per ERROR or MISSING node under *root*, by position."""
    if not root.has_error:
        return []

    found: list[tuple[int, Diagnostic]] = []

    cursor = QueryCursor(_errors_query(language))
    for node in cursor.captures(root).get("error", []):
        line, column = position(node)
        snippet = _snippet(node, source, max_snippet)
        found.append((node.start_byte, Diagnostic(
            kind=DiagnosticKind.SYNTAX_ERROR,
            message=f"Source contains error at {line}:{column}: {snippet!r}",
            line=line,
            column=column,
            text=snippet,
        )))

    for node in _missing_nodes(root):
        line, column = position(node)
        found.append((node.start_byte, Diagnostic(
            kind=DiagnosticKind.MISSING_NODE,
            message=f"Source is missing {node.type!r} at {line}:{column}",
            line=line,
            column=column,
        )))

    found.sort(key=lambda item: item[0])
    return [diagnostic for _offset, diagnostic in found]
