from __future__ import annotations

from typing import Callable, Iterator, Sequence, Tuple

from .lexicon import Lexicon, default_lexicon
from .models import Span, Token
from .tokenization import tokenize


class Document:
    """
    An immutable, tokenized view of a text buffer.

    Documents are built once from their source text and are only read from
    afterwards, so a single instance can be shared by any number of linters.
    """

    __slots__ = ("_source", "_tokens")

    def __init__(self, source: str, tokens: Sequence[Token]) -> None:
        self._source = source
        self._tokens: Tuple[Token, ...] = tuple(tokens)

    @classmethod
    def from_text(cls, text: str, lexicon: Lexicon | None = None) -> Document:
        """Tokenize and classify ``text`` using ``lexicon`` (or the bundled one)."""
        return cls(text, tokenize(text, lexicon or default_lexicon()))

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"Document(tokens={len(self._tokens)}, chars={len(self._source)})"

    def get_source(self) -> str:
        return self._source

    def get_tokens(self) -> Tuple[Token, ...]:
        return self._tokens

    def get_token(self, index: int) -> Token | None:
        """Return the token at ``index``, or None when it is out of range."""
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        return None

    def get_span_content(self, span: Span) -> str:
        return span.get_content(self._source)

    def get_span_content_str(self, span: Span) -> str:
        return self.get_span_content(span)

    def get_token_text(self, token: Token) -> str:
        return self.get_span_content_str(token.span)

    def iter_indices_where(self, predicate: Callable[[Token], bool]) -> Iterator[int]:
        """Yield, in ascending order, the indices of tokens matching ``predicate``."""
        for index, token in enumerate(self._tokens):
            if predicate(token):
                yield index

    def iter_adjective_indices(self) -> Iterator[int]:
        return self.iter_indices_where(lambda token: token.kind.is_adjective())

    def iter_word_indices(self) -> Iterator[int]:
        return self.iter_indices_where(lambda token: token.kind.is_word())
