from pathlib import Path

import pytest

from prosecheck.lexicon import Lexicon, LexiconError, default_lexicon, load_lexicon, parse_tags
from prosecheck.models import TokenKind


def test_parse_tags_combines_capabilities():
    assert parse_tags("noun, verb,adjective") == (
        TokenKind.NOUN | TokenKind.VERB | TokenKind.ADJECTIVE
    )
    assert parse_tags("") == TokenKind.NONE


def test_parse_tags_rejects_unknown_part_of_speech():
    with pytest.raises(LexiconError):
        parse_tags("noun,gerundive")


def test_lookup_is_case_insensitive_and_handles_apostrophes():
    lexicon = Lexicon.from_pairs([("That", "determiner,pronoun"), ("rust", "noun")])

    assert lexicon.lookup("THAT") == TokenKind.DETERMINER | TokenKind.PRONOUN
    assert lexicon.lookup("that's") == TokenKind.DETERMINER | TokenKind.PRONOUN
    assert lexicon.lookup("Rust’s") == TokenKind.NOUN
    assert lexicon.lookup("unknown") == TokenKind.NONE
    assert "rust" in lexicon


def test_load_lexicon_from_tsv(tmp_path: Path):
    path = tmp_path / "words.tsv"
    path.write_text(
        "word\tpos\nclever\tadjective\n# comment\t\nrun\tnoun\nrun\tverb\n",
        encoding="utf-8",
    )
    lexicon = load_lexicon(path)

    assert len(lexicon) == 2
    assert lexicon.lookup("run") == TokenKind.NOUN | TokenKind.VERB


def test_load_lexicon_reports_bad_rows(tmp_path: Path):
    path = tmp_path / "words.tsv"
    path.write_text("word\tpos\nclever\tadjectival\n", encoding="utf-8")
    with pytest.raises(LexiconError, match="words.tsv:2"):
        load_lexicon(path)


def test_load_lexicon_requires_columns(tmp_path: Path):
    path = tmp_path / "words.tsv"
    path.write_text("token\ttag\nclever\tadjective\n", encoding="utf-8")
    with pytest.raises(LexiconError):
        load_lexicon(path)


def test_load_lexicon_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_lexicon(tmp_path / "missing.tsv")


def test_default_lexicon_is_shared_and_multi_capability():
    lexicon = default_lexicon()
    assert lexicon is default_lexicon()

    beginning = lexicon.lookup("beginning")
    assert beginning.is_adjective() and beginning.is_noun() and beginning.is_verb()
    assert lexicon.lookup("interesting") == TokenKind.ADJECTIVE
    assert not lexicon.lookup("of").is_adjective()
