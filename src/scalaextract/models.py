"""Pydantic models for scalaextract's extraction results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Per-file output
# ---------------------------------------------------------------------------

class ParseResult(BaseModel):
    """Build-relevant facts extracted from a single Scala source file."""

    model_config = ConfigDict(populate_by_name=True)

    file: str
    """Opaque file identifier, copied verbatim from the caller."""

    package: str = ""
    """Dot-qualified package name, empty when the file has no package clause."""

    imports: list[str] = Field(default_factory=list)
    """Fully-qualified imports in declaration order (duplicates kept)."""

    symbols: list[str] = Field(default_factory=list)
    """Namespace-qualified exported symbols in pre-order source order."""

    has_main: bool = Field(default=False, alias="hasMain")
    """Reserved. Nothing populates this yet."""


# ---------------------------------------------------------------------------
# Non-fatal conditions
# ---------------------------------------------------------------------------

class DiagnosticKind(str, Enum):
    SYNTAX_ERROR = "syntax_error"
    MISSING_NODE = "missing_node"
    UNKNOWN_SYMBOL_KIND = "unknown_symbol_kind"
    PARSE_FAILURE = "parse_failure"


class Diagnostic(BaseModel):
    """A reportable condition that did not stop extraction."""

    kind: DiagnosticKind
    message: str
    line: int | None = None    # 1-based
    column: int | None = None  # 1-based
    text: str | None = None

    def __str__(self) -> str:
        if self.line is None:
            return f"{self.kind.value}: {self.message}"
        return f"{self.line}:{self.column}: {self.kind.value}: {self.message}"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ExtractorConfig(BaseModel):
    """User configuration read from ``.scalaextract.toml`` or ``pyproject.toml``.

    CLI flags override these values for a single invocation.
    Precedence: CLI flag > config file > default.
    """

    model_config = ConfigDict(extra="forbid")

    report_unknown_symbols: bool = True
    """Emit a diagnostic for declarations the symbol collector does not know."""

    query_syntax_errors: bool = True
    """Run the syntax-error query after the extraction walk."""

    log_level: str = "WARNING"
    """Logging level used by the CLI."""

    max_snippet_length: int = Field(default=80, ge=1)
    """Longest source excerpt attached to a diagnostic."""

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level
