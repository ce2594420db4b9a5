from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..document import Document
from ..models import Token
from ..patterns import Pattern
from .lint import Lint


class Linter(ABC):
    """A rule that scans a document and reports lints in document order."""

    @abstractmethod
    def lint(self, document: Document) -> List[Lint]:
        """Return the lints found in ``document``; must not modify it."""
        raise NotImplementedError

    @abstractmethod
    def description(self) -> str:
        """Return a short human-readable summary of the rule."""
        raise NotImplementedError


class PatternLinter(Linter):
    """A linter driven by a single pattern, converting each match into a lint."""

    @abstractmethod
    def pattern(self) -> Pattern:
        raise NotImplementedError

    @abstractmethod
    def match_to_lint(self, matched_tokens: Sequence[Token], source: str) -> Lint | None:
        """Turn one match into a lint, or return None to drop it."""
        raise NotImplementedError

    def lint(self, document: Document) -> List[Lint]:
        tokens = document.get_tokens()
        source = document.get_source()
        lints: List[Lint] = []
        for start, end in self.pattern().find_all_matches(tokens, source):
            lint = self.match_to_lint(tokens[start:end], source)
            if lint is not None:
                lints.append(lint)
        return lints
