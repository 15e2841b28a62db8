"""Extraction engine -- turns Scala syntax trees into build facts."""

from __future__ import annotations

from .base import Parser, SyntaxNode
from .scala_extractor import ScalaParser, new_parser, parse, parse_file

__all__ = [
    "Parser",
    "ScalaParser",
    "SyntaxNode",
    "new_parser",
    "parse",
    "parse_file",
]
