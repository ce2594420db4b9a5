from __future__ import annotations

import csv
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Mapping

from .models import PART_OF_SPEECH_KINDS, TokenKind

LOGGER = logging.getLogger(__name__)

APOSTROPHES = ("'", "’")


class LexiconError(ValueError):
    """Raised when a lexicon file contains an unusable row."""


class Lexicon:
    """Read-only mapping of lower-cased words to part-of-speech capabilities."""

    def __init__(self, entries: Mapping[str, TokenKind]) -> None:
        self._entries = MappingProxyType(
            {word.lower(): kind for word, kind in entries.items()}
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._entries

    def lookup(self, word: str) -> TokenKind:
        """
        Return the capabilities recorded for ``word``.

        Contractions and possessives ("that's", "Rust's") fall back to the
        part before the apostrophe. Unknown words map to ``TokenKind.NONE``.
        """
        lowered = word.lower()
        kind = self._entries.get(lowered)
        if kind is not None:
            return kind
        for mark in APOSTROPHES:
            if mark in lowered:
                stem = lowered.split(mark, 1)[0]
                return self._entries.get(stem, TokenKind.NONE)
        return TokenKind.NONE

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> Lexicon:
        """Build a lexicon from ``(word, "pos,pos")`` pairs."""
        entries: Dict[str, TokenKind] = {}
        for word, tags in pairs:
            kind = parse_tags(tags)
            key = word.strip().lower()
            entries[key] = entries.get(key, TokenKind.NONE) | kind
        return cls(entries)


def parse_tags(tags: str) -> TokenKind:
    """Convert a comma-separated list of part-of-speech names into a TokenKind."""
    kind = TokenKind.NONE
    for raw in tags.split(","):
        name = raw.strip().lower()
        if not name:
            continue
        try:
            kind |= PART_OF_SPEECH_KINDS[name]
        except KeyError as exc:
            raise LexiconError(f"Unknown part of speech '{name}'.") from exc
    return kind


def load_lexicon(path: Path | str | None = None) -> Lexicon:
    """
    Load a tab-separated lexicon with ``word`` and ``pos`` columns.

    Parameters
    ----------
    path:
        Custom path to the TSV. Defaults to the word list bundled with the package.
    """
    if path is None:
        source = resources.files("prosecheck").joinpath("data/lexicon.tsv")
        with resources.as_file(source) as bundled:
            return _read_lexicon(bundled)
    return _read_lexicon(Path(path))


@lru_cache(maxsize=1)
def default_lexicon() -> Lexicon:
    """Return the bundled lexicon, loaded once per process."""
    return load_lexicon()


def _read_lexicon(path: Path) -> Lexicon:
    if not path.exists():
        raise FileNotFoundError(f"Lexicon not found at {path}.")

    entries: Dict[str, TokenKind] = {}
    with path.open("r", encoding="utf-8", newline="") as handle:
        reader = csv.DictReader(handle, delimiter="\t")
        if reader.fieldnames is None or not {"word", "pos"} <= set(reader.fieldnames):
            raise LexiconError(f"Lexicon {path} must have 'word' and 'pos' columns.")
        for line_no, row in enumerate(reader, start=2):
            word = (row.get("word") or "").strip().lower()
            if not word or word.startswith("#"):
                continue
            try:
                kind = parse_tags(row.get("pos") or "")
            except LexiconError as exc:
                raise LexiconError(f"{path}:{line_no}: {exc}") from exc
            entries[word] = entries.get(word, TokenKind.NONE) | kind

    lexicon = Lexicon(entries)
    LOGGER.debug("Loaded %d lexicon entries from %s", len(lexicon), path)
    return lexicon
