from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Tuple

from ..models import Span

DEFAULT_PRIORITY = 127


class SuggestionKind(str, Enum):
    REPLACE = "Replace"
    REMOVE = "Remove"
    INSERT_AFTER = "InsertAfter"


@dataclass(frozen=True, slots=True)
class Suggestion:
    """A proposed edit to the text covered by a lint."""

    kind: SuggestionKind
    replacement_text: str = ""

    @classmethod
    def replace_with(cls, text: str) -> Suggestion:
        return cls(SuggestionKind.REPLACE, text)

    @classmethod
    def remove(cls) -> Suggestion:
        return cls(SuggestionKind.REMOVE)

    @classmethod
    def insert_after(cls, text: str) -> Suggestion:
        return cls(SuggestionKind.INSERT_AFTER, text)

    def apply(self, span: Span, source: str) -> str:
        """Return ``source`` with this suggestion applied at ``span``."""
        if self.kind is SuggestionKind.REMOVE:
            return source[: span.start] + source[span.end :]
        if self.kind is SuggestionKind.INSERT_AFTER:
            return source[: span.end] + self.replacement_text + source[span.end :]
        return source[: span.start] + self.replacement_text + source[span.end :]


class LintKind(str, Enum):
    SPELLING = "Spelling"
    CAPITALIZATION = "Capitalization"
    STYLE = "Style"
    FORMATTING = "Formatting"
    REPETITION = "Repetition"
    ENHANCEMENT = "Enhancement"
    READABILITY = "Readability"
    WORD_CHOICE = "WordChoice"
    PUNCTUATION = "Punctuation"
    MISCELLANEOUS = "Miscellaneous"

    @property
    def pretty(self) -> str:
        """Human-readable label, e.g. "Word Choice"."""
        return self.name.replace("_", " ").title()


@dataclass(frozen=True, slots=True)
class Lint:
    """A diagnostic produced by a linter for one span of a document."""

    span: Span
    lint_kind: LintKind = LintKind.MISCELLANEOUS
    suggestions: Tuple[Suggestion, ...] = field(default_factory=tuple)
    message: str = ""
    priority: int = DEFAULT_PRIORITY

    def __post_init__(self) -> None:
        # Suggestions are kept unique, in the order they were first proposed.
        object.__setattr__(
            self, "suggestions", _dedupe_suggestions(self.suggestions)
        )

    def get_problem_text(self, source: str) -> str:
        return self.span.get_content(source)


def _dedupe_suggestions(suggestions: Iterable[Suggestion]) -> Tuple[Suggestion, ...]:
    return tuple(dict.fromkeys(suggestions))
