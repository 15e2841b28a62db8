"""Loading of the tree-sitter Scala grammar."""

from __future__ import annotations

import logging

from tree_sitter import Language

from ..exceptions import GrammarNotAvailableError

logger = logging.getLogger(__name__)

LANGUAGE_NAME = "scala"

# Cache loaded grammars.
_grammar_cache: dict[str, Language] = {}


def _load_grammar() -> Language:
    try:
        import tree_sitter_scala
    except ImportError as exc:
        raise GrammarNotAvailableError(
            "tree-sitter-scala is not installed. Install with: pip install tree-sitter-scala"
        ) from exc
    logger.debug("Loaded tree-sitter grammar for %s", LANGUAGE_NAME)
    return Language(tree_sitter_scala.language())


def get_language() -> Language:
    """Return the (cached) Scala ``Language``."""
    if LANGUAGE_NAME not in _grammar_cache:
        _grammar_cache[LANGUAGE_NAME] = _load_grammar()
    return _grammar_cache[LANGUAGE_NAME]
