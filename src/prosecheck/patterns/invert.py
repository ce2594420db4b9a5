from __future__ import annotations

from typing import Sequence

from ..models import Token
from .base import Pattern


class Invert(Pattern):
    """
    Matches a single token wherever ``inner`` does not match.

    Only the presence of a match is negated, never its length. An empty slice
    has no token to match, so it never matches.
    """

    def __init__(self, inner: Pattern) -> None:
        self._inner = inner

    def matches(self, tokens: Sequence[Token], source: str) -> int | None:
        if not tokens or self._inner.matches(tokens, source) is not None:
            return None
        return 1
