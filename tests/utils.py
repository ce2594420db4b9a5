from __future__ import annotations

from pathlib import Path
from typing import Sequence

from prosecheck.document import Document
from prosecheck.linting import Linter
from prosecheck.models import Token
from prosecheck.patterns import Pattern


def assert_lint_count(text: str, linter: Linter, count: int) -> None:
    """Assert that ``linter`` reports exactly ``count`` lints for ``text``."""
    lints = linter.lint(Document.from_text(text))
    assert len(lints) == count, [lint.get_problem_text(text) for lint in lints]


def assert_suggestion_result(text: str, linter: Linter, expected: str) -> None:
    """Apply the first suggestion of each lint and compare the resulting text."""
    lints = linter.lint(Document.from_text(text))
    assert lints, f"expected at least one lint for {text!r}"
    fixed = text
    for lint in sorted(lints, key=lambda item: item.span.start, reverse=True):
        fixed = lint.suggestions[0].apply(lint.span, fixed)
    assert fixed == expected


class ZeroLengthPattern(Pattern):
    """Always matches without consuming anything."""

    def matches(self, tokens: Sequence[Token], source: str) -> int | None:
        return 0


class NeverPattern(Pattern):
    """Never matches."""

    def matches(self, tokens: Sequence[Token], source: str) -> int | None:
        return None


class CountingPattern(Pattern):
    """Matches one token at a time, ``limit`` times in total per call chain."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.calls = 0

    def matches(self, tokens: Sequence[Token], source: str) -> int | None:
        self.calls += 1
        if self.calls > self.limit or not tokens:
            return None
        return 1


def write_sample_corpus(tmp_path: Path) -> Path:
    """Create a small corpus with one flagged and one clean document."""
    corpus_dir = tmp_path / "corpus"
    (corpus_dir / "notes").mkdir(parents=True)
    (corpus_dir / "issue.txt").write_text(
        "StepButton has too big of a space to click.", encoding="utf-8"
    )
    (corpus_dir / "notes" / "clean.md").write_text(
        "The light of a star.", encoding="utf-8"
    )
    (corpus_dir / "ignored.csv").write_text("too big of a,table", encoding="utf-8")
    return corpus_dir
