from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from .config import ProseCheckConfig
from .document import Document
from .lexicon import Lexicon, default_lexicon, load_lexicon
from .linting import Lint, Linter, create_linter

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class TextSource:
    """Raw input text plus an identifier (usually a relative path)."""

    doc_id: str
    text: str


@dataclass(slots=True)
class LintResult:
    """Lints found in a single document."""

    doc_id: str
    document: Document
    lints: List[Lint]


def build_linters(config: ProseCheckConfig) -> List[Linter]:
    """Instantiate every rule enabled in the configuration."""
    return [create_linter(name) for name in config.linters.enabled()]


def build_lexicon(config: ProseCheckConfig) -> Lexicon:
    if config.lexicon_path:
        return load_lexicon(config.lexicon_path)
    return default_lexicon()


def lint_document(
    document: Document,
    linters: Sequence[Linter],
    config: ProseCheckConfig | None = None,
) -> List[Lint]:
    """Run each linter over the document and merge the results by position."""
    config = config or ProseCheckConfig()
    lints: List[Lint] = []
    for linter in linters:
        found = linter.lint(document)
        LOGGER.debug("%s reported %d lint(s)", type(linter).__name__, len(found))
        lints.extend(found)

    lints = [lint for lint in lints if lint.priority >= config.min_priority]
    lints = sort_lints(lints)
    if config.resolve_overlaps:
        lints = remove_overlaps(lints)
    return lints


def lint_corpus(
    sources: Iterable[TextSource],
    config: ProseCheckConfig,
) -> Dict[str, LintResult]:
    """Lint all sources and return the per-document results."""
    lexicon = build_lexicon(config)
    linters = build_linters(config)
    results: Dict[str, LintResult] = {}
    for source in sources:
        text = source.text
        limit = config.max_document_chars
        if limit is not None and len(text) > limit:
            LOGGER.warning(
                "Truncating %s from %d to %d characters.", source.doc_id, len(text), limit
            )
            text = text[:limit]
        document = Document.from_text(text, lexicon)
        results[source.doc_id] = LintResult(
            doc_id=source.doc_id,
            document=document,
            lints=lint_document(document, linters, config),
        )
    return results


def sort_lints(lints: Iterable[Lint]) -> List[Lint]:
    """Order lints by start offset, higher priority first on ties."""
    return sorted(lints, key=lambda lint: (lint.span.start, -lint.priority, lint.span.end))


def remove_overlaps(lints: Sequence[Lint]) -> List[Lint]:
    """
    Drop lints whose span overlaps a kept lint of higher priority.

    Lints are considered from highest to lowest priority (earlier ones first on
    ties); the survivors keep their original relative order.
    """
    ranked = sorted(
        enumerate(lints), key=lambda item: (-item[1].priority, item[1].span.start, item[0])
    )
    kept: List[tuple[int, Lint]] = []
    for index, lint in ranked:
        if any(lint.span.overlaps_with(other.span) for _, other in kept):
            continue
        kept.append((index, lint))
    return [lint for _, lint in sorted(kept, key=lambda item: item[0])]


def apply_suggestions(source: str, lints: Sequence[Lint]) -> str:
    """
    Apply the first suggestion of each lint to ``source``.

    Lints overlapping an earlier lint are skipped. Edits are made from the end
    of the text backwards so earlier spans stay valid.
    """
    selected: List[Lint] = []
    for lint in sorted(lints, key=lambda item: item.span.start):
        if not lint.suggestions:
            continue
        if any(lint.span.overlaps_with(other.span) for other in selected):
            continue
        selected.append(lint)

    text = source
    for lint in reversed(selected):
        text = lint.suggestions[0].apply(lint.span, text)
    return text
