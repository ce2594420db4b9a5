from __future__ import annotations

from dataclasses import dataclass
from enum import Flag, auto


@dataclass(frozen=True, slots=True)
class Span:
    """A half-open ``[start, end)`` range of character offsets."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.start > self.end:
            raise ValueError(f"Invalid span [{self.start}, {self.end}).")

    def __len__(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start == self.end

    def contains(self, index: int) -> bool:
        return self.start <= index < self.end

    def overlaps_with(self, other: Span) -> bool:
        """Return True when both spans share at least one character."""
        if self.is_empty() or other.is_empty():
            return False
        return self.start < other.end and other.start < self.end

    def with_offset(self, offset: int) -> Span:
        return Span(self.start + offset, self.end + offset)

    def get_content(self, source: str) -> str:
        """Return the characters of ``source`` this span denotes."""
        return source[self.start : self.end]


class TokenKind(Flag):
    """Capabilities a token may carry; a token usually carries several."""

    NONE = 0
    WORD = auto()
    WHITESPACE = auto()
    NEWLINE = auto()
    PUNCTUATION = auto()
    NUMBER = auto()
    NOUN = auto()
    VERB = auto()
    ADJECTIVE = auto()
    ADVERB = auto()
    PRONOUN = auto()
    DETERMINER = auto()
    PREPOSITION = auto()
    CONJUNCTION = auto()

    def is_word(self) -> bool:
        return bool(self & TokenKind.WORD)

    def is_whitespace(self) -> bool:
        return bool(self & TokenKind.WHITESPACE)

    def is_newline(self) -> bool:
        return bool(self & TokenKind.NEWLINE)

    def is_punctuation(self) -> bool:
        return bool(self & TokenKind.PUNCTUATION)

    def is_number(self) -> bool:
        return bool(self & TokenKind.NUMBER)

    def is_noun(self) -> bool:
        return bool(self & TokenKind.NOUN)

    def is_verb(self) -> bool:
        return bool(self & TokenKind.VERB)

    def is_adjective(self) -> bool:
        return bool(self & TokenKind.ADJECTIVE)

    def is_adverb(self) -> bool:
        return bool(self & TokenKind.ADVERB)


# Part-of-speech capabilities a lexicon entry may assign to a word.
PART_OF_SPEECH_KINDS = {
    "noun": TokenKind.NOUN,
    "verb": TokenKind.VERB,
    "adjective": TokenKind.ADJECTIVE,
    "adverb": TokenKind.ADVERB,
    "pronoun": TokenKind.PRONOUN,
    "determiner": TokenKind.DETERMINER,
    "preposition": TokenKind.PREPOSITION,
    "conjunction": TokenKind.CONJUNCTION,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A classified span of the source text."""

    span: Span
    kind: TokenKind
