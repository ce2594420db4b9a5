from __future__ import annotations

from typing import Sequence

from ..models import Token
from .base import Pattern, TokenWindow


class RepeatingPattern(Pattern):
    """
    Matches ``inner`` repeated back to back at least ``required_repetitions`` times.

    Somewhat like ``*`` (or ``{n,}``) in a regular expression.
    """

    def __init__(self, inner: Pattern, required_repetitions: int = 0) -> None:
        if required_repetitions < 0:
            raise ValueError("required_repetitions must be non-negative.")
        self._inner = inner
        self._required_repetitions = required_repetitions

    def matches(self, tokens: Sequence[Token], source: str) -> int | None:
        window = TokenWindow.of(tokens)
        cursor = 0
        repetitions = 0

        while True:
            if cursor >= len(window):
                match_len = None
            else:
                match_len = self._inner.matches(window[cursor:], source)
            if match_len is None:
                if repetitions >= self._required_repetitions:
                    return cursor
                return None
            if match_len == 0:
                # A zero-length match never advances, so it could repeat
                # forever and therefore satisfies any repetition count.
                return cursor
            cursor += match_len
            repetitions += 1
