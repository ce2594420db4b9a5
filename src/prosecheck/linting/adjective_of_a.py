from __future__ import annotations

from typing import List

from ..document import Document
from ..models import Span
from ..patterns import IndefiniteArticle, Pattern, WordSet
from .base import Linter
from .lint import Lint, LintKind, Suggestion

# Adjectives known to use the "adjective of a" construction on their own.
ADJECTIVE_WHITELIST = frozenset({"bad", "big", "good", "large", "long", "vague"})

# Words that, right before the adjective, signal the construction
# ("as large of a", "too vague of an", "how important of a").
CONTEXT_WORDS = frozenset({"as", "how", "that", "this", "too"})

# Still false positives even with context: "how much of a", "part of a".
ADJECTIVE_BLACKLIST = frozenset({"much", "part"})

_OF = WordSet(("of",))
_ARTICLE = IndefiniteArticle()
_CONTEXT = WordSet(CONTEXT_WORDS)

MESSAGE = "The word `of` is not needed here."
PRIORITY = 63


class AdjectiveOfA(Linter):
    """Detect sequences of words of the form "adjective of a"."""

    def lint(self, document: Document) -> List[Lint]:
        lints: List[Lint] = []

        for i in document.iter_adjective_indices():
            adjective = document.get_token(i)
            if adjective is None:
                continue
            adj_str = document.get_span_content_str(adjective.span).lower()

            # Only flag adjectives known to use this construction,
            # unless there is a clearer context.
            if adj_str not in ADJECTIVE_WHITELIST and not _has_context_word(document, i):
                continue
            if adj_str in ADJECTIVE_BLACKLIST:
                continue

            # Comparatives and superlatives: "for the better of a day",
            # "the best of a bad situation".
            if adj_str.endswith("er") or adj_str.endswith("st"):
                continue
            # Present participles double as gerunds: "the beginning of a conversation".
            if adj_str.endswith("ing") and (
                adjective.kind.is_noun() or adjective.kind.is_verb()
            ):
                continue

            space_1 = document.get_token(i + 1)
            word_of = document.get_token(i + 2)
            space_2 = document.get_token(i + 3)
            a_or_an = document.get_token(i + 4)
            if space_1 is None or word_of is None or space_2 is None or a_or_an is None:
                continue
            if not space_1.kind.is_whitespace() or not space_2.kind.is_whitespace():
                continue
            if not _matches_at(document, _OF, i + 2):
                continue
            if not _matches_at(document, _ARTICLE, i + 4):
                continue

            # The whitespace before "of" and before the article may differ.
            adjective_text = document.get_span_content(adjective.span)
            article_text = document.get_span_content(a_or_an.span)
            replacement_1 = (
                adjective_text + document.get_span_content(space_1.span) + article_text
            )
            replacement_2 = (
                adjective_text + document.get_span_content(space_2.span) + article_text
            )
            suggestions = [Suggestion.replace_with(replacement_1)]
            if replacement_1 != replacement_2:
                suggestions.append(Suggestion.replace_with(replacement_2))

            lints.append(
                Lint(
                    span=Span(adjective.span.start, a_or_an.span.end),
                    lint_kind=LintKind.STYLE,
                    suggestions=tuple(suggestions),
                    message=MESSAGE,
                    priority=PRIORITY,
                )
            )

        return lints

    def description(self) -> str:
        return "This rule looks for sequences of words of the form `adjective of a`."


def _has_context_word(document: Document, adj_idx: int) -> bool:
    """Check for a context word followed by a single whitespace token before the adjective."""
    if adj_idx < 2:
        return False
    space = document.get_token(adj_idx - 1)
    if space is None or not space.kind.is_whitespace():
        return False
    return _matches_at(document, _CONTEXT, adj_idx - 2)


def _matches_at(document: Document, pattern: Pattern, index: int) -> bool:
    """Whether a single-token pattern matches the token at `index`."""
    tokens = document.get_tokens()[index : index + 1]
    return pattern.matches(tokens, document.get_source()) is not None
