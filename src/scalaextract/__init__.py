"""scalaextract - package, import and symbol extraction for Scala build files."""

from .exceptions import (  # noqa: F401 -- public re-exports
    ConfigError,
    DuplicatePackageError,
    GrammarNotAvailableError,
    ScalaExtractError,
    StructuralError,
)
from .extractors import Parser, ScalaParser, new_parser, parse, parse_file
from .models import Diagnostic, DiagnosticKind, ExtractorConfig, ParseResult

__version__ = "0.1.0"

__all__ = [
    "parse",
    "parse_file",
    "new_parser",
    "Parser",
    "ScalaParser",
    "ParseResult",
    "Diagnostic",
    "DiagnosticKind",
    "ExtractorConfig",
    "ScalaExtractError",
    "StructuralError",
    "DuplicatePackageError",
    "GrammarNotAvailableError",
    "ConfigError",
]
