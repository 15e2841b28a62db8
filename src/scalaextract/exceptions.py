"""Exceptions for scalaextract."""


class ScalaExtractError(Exception):
    """Base exception for scalaextract errors."""


class StructuralError(ScalaExtractError):
    """The syntax tree does not have the shape the extractor relies on.

    Extraction of the current file stops; no partial result is returned.
    """

    def __init__(self, message: str, *, node_type: str | None = None, text: str | None = None) -> None:
        super().__init__(message)
        self.node_type = node_type
        self.text = text


class DuplicatePackageError(StructuralError):
    """A file declares more than one package clause."""


class GrammarNotAvailableError(ScalaExtractError):
    """The tree-sitter Scala grammar could not be loaded."""


class ConfigError(ScalaExtractError):
    """A configuration file could not be read or validated."""
