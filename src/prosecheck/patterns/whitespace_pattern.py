from __future__ import annotations

from typing import Sequence

from ..models import Token
from .base import Pattern


class WhitespacePattern(Pattern):
    """Matches the run of whitespace tokens at the start of the slice."""

    def matches(self, tokens: Sequence[Token], source: str) -> int | None:
        count = 0
        for token in tokens:
            if not token.kind.is_whitespace():
                break
            count += 1
        return count or None
