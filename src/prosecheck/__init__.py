"""
prosecheck package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import (
    LinterSettings,
    ProseCheckConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)
from .document import Document
from .lexicon import Lexicon, default_lexicon, load_lexicon
from .linting import AdjectiveOfA, Lint, LintKind, Linter, Suggestion, create_linter
from .models import Span, Token, TokenKind
from .pipeline import lint_corpus, lint_document

__all__ = [
    "AdjectiveOfA",
    "Document",
    "Lexicon",
    "Lint",
    "LintKind",
    "Linter",
    "LinterSettings",
    "ProseCheckConfig",
    "Span",
    "Suggestion",
    "Token",
    "TokenKind",
    "config_from_dict",
    "config_from_yaml",
    "create_linter",
    "default_lexicon",
    "lint_corpus",
    "lint_document",
    "load_config",
    "load_lexicon",
]

__version__ = "0.1.0"
