from __future__ import annotations

import re
from typing import List

from .lexicon import Lexicon
from .models import Span, Token, TokenKind

# Alternatives are tried in order; the final catch-all guarantees that every
# character of the input ends up in exactly one token.
TOKEN_PATTERN = re.compile(
    r"(?P<word>[^\W\d_]+(?:['’\-][^\W\d_]+)*)"
    r"|(?P<number>\d+(?:[.,]\d+)*)"
    r"|(?P<newline>\n+)"
    r"|(?P<space>[^\S\n]+)"
    r"|(?P<punct>.)",
    re.UNICODE | re.DOTALL,
)


def tokenize(text: str, lexicon: Lexicon) -> List[Token]:
    """Split text into classified tokens covering every character."""
    tokens: List[Token] = []
    for match in TOKEN_PATTERN.finditer(text):
        group = match.lastgroup
        if group == "word":
            kind = TokenKind.WORD | lexicon.lookup(match.group())
        elif group == "number":
            kind = TokenKind.NUMBER
        elif group == "newline":
            kind = TokenKind.WHITESPACE | TokenKind.NEWLINE
        elif group == "space":
            kind = TokenKind.WHITESPACE
        else:
            kind = TokenKind.PUNCTUATION
        tokens.append(Token(span=Span(match.start(), match.end()), kind=kind))
    return tokens
