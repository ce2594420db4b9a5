from __future__ import annotations

from typing import FrozenSet, Iterable, Sequence

from ..models import Token
from .base import Pattern


class WordSet(Pattern):
    """Matches a single word token whose lower-cased text is in the set."""

    def __init__(self, words: Iterable[str]) -> None:
        self._words: FrozenSet[str] = frozenset(word.lower() for word in words)

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    def matches(self, tokens: Sequence[Token], source: str) -> int | None:
        if not tokens:
            return None
        token = tokens[0]
        if not token.kind.is_word():
            return None
        if token.span.get_content(source).lower() in self._words:
            return 1
        return None


class IndefiniteArticle(WordSet):
    """Matches "a" or "an"."""

    def __init__(self) -> None:
        super().__init__(("a", "an"))
