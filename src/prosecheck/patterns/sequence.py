from __future__ import annotations

from typing import Sequence, Tuple

from ..models import Token
from .base import Pattern, TokenWindow


class AnyPattern(Pattern):
    """Matches any single token."""

    def matches(self, tokens: Sequence[Token], source: str) -> int | None:
        return 1 if tokens else None


class SequencePattern(Pattern):
    """Matches each of ``patterns`` in order, each starting where the last ended."""

    def __init__(self, *patterns: Pattern) -> None:
        self._patterns: Tuple[Pattern, ...] = patterns

    def then(self, pattern: Pattern) -> SequencePattern:
        """Return a new sequence with ``pattern`` appended."""
        return SequencePattern(*self._patterns, pattern)

    def matches(self, tokens: Sequence[Token], source: str) -> int | None:
        window = TokenWindow.of(tokens)
        cursor = 0
        for pattern in self._patterns:
            match_len = pattern.matches(window[cursor:], source)
            if match_len is None or cursor + match_len > len(window):
                return None
            cursor += match_len
        return cursor
