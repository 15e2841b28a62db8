"""Tree-sitter extractor for Scala: package, imports and exported symbols.

One :class:`ScalaParser` owns one tree-sitter ``Parser``; give each thread
its own instance.
"""

from __future__ import annotations

import logging
from pathlib import Path

from tree_sitter import Parser

from .base import lone_child
from .diagnostics import query_errors
from .grammar import get_language
from .imports import resolve_imports
from .kinds import DeclarationKind, classify_declaration
from .names import read_package_identifier
from .symbols import collect_symbols
from ..exceptions import DuplicatePackageError, StructuralError
from ..models import Diagnostic, DiagnosticKind, ExtractorConfig, ParseResult

logger = logging.getLogger(__name__)


class ScalaParser:
    """Extract build facts from Scala sources using tree-sitter-scala."""

    def __init__(self, config: ExtractorConfig | None = None) -> None:
        self.config = config or ExtractorConfig()
        self.language = get_language()
        self._parser = Parser(self.language)

    def parse(self, file_path: str, source: str) -> tuple[ParseResult, list[Diagnostic]]:
        """Parse *source* and return the extracted facts plus diagnostics.

        Args:
            file_path: Opaque identifier copied into the result.
            source: Scala source text.

        Returns:
            ``(result, diagnostics)``. Diagnostics never suppress the result.

        Raises:
            StructuralError: The tree does not have a shape the extractor
                relies on (e.g. two package clauses). No result is returned.
        """
        result = ParseResult(file=file_path)
        diagnostics: list[Diagnostic] = []
        source_bytes = source.encode("utf-8")

        try:
            tree = self._parser.parse(source_bytes)
        except (ValueError, RuntimeError) as exc:
            logger.warning("Tree-sitter failed to parse %s: %s", file_path, exc)
            diagnostics.append(Diagnostic(kind=DiagnosticKind.PARSE_FAILURE, message=str(exc)))
            return result, diagnostics

        if tree is None:
            diagnostics.append(Diagnostic(
                kind=DiagnosticKind.PARSE_FAILURE,
                message="Tree-sitter returned no tree",
            ))
            return result, diagnostics

        root = tree.root_node
        unknown_sink = diagnostics if self.config.report_unknown_symbols else None
        package_seen = False

        for node in root.named_children:
            kind = classify_declaration(node).kind

            if kind is DeclarationKind.PACKAGE:
                if package_seen:
                    raise DuplicatePackageError(
                        f"Multiple package declarations found in {file_path}",
                        node_type=node.type,
                    )
                identifier = lone_child(node, "package_identifier")
                if identifier is None:
                    raise StructuralError(
                        f"Package clause without a package identifier in {file_path}",
                        node_type=node.type,
                    )
                result.package = read_package_identifier(identifier, source_bytes)
                package_seen = True

            elif kind is DeclarationKind.IMPORT:
                result.imports.extend(resolve_imports(node, source_bytes))

            else:
                result.symbols.extend(collect_symbols(node, source_bytes, "", unknown_sink))

        if self.config.query_syntax_errors:
            diagnostics.extend(query_errors(
                root, source_bytes, self.language, self.config.max_snippet_length,
            ))

        logger.debug(
            "Extracted %s: package=%r, %d imports, %d symbols, %d diagnostics",
            file_path, result.package, len(result.imports), len(result.symbols), len(diagnostics),
        )
        return result, diagnostics


def new_parser(config: ExtractorConfig | None = None) -> ScalaParser:
    """Create a parser bound to the Scala grammar."""
    return ScalaParser(config)


def parse(
    file_path: str,
    source: str,
    config: ExtractorConfig | None = None,
) -> tuple[ParseResult, list[Diagnostic]]:
    """Parse one Scala source with a fresh :class:`ScalaParser`."""
    return ScalaParser(config).parse(file_path, source)


def parse_file(
    path: str | Path,
    config: ExtractorConfig | None = None,
) -> tuple[ParseResult, list[Diagnostic]]:
    """Read *path* as UTF-8 and parse it; the path string is the file identifier."""
    source = Path(path).read_text(encoding="utf-8", errors="replace")
    return parse(str(path), source, config)
