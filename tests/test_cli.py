import json
from pathlib import Path

from typer.testing import CliRunner

from prosecheck.cli import _load_sources, app
from tests.utils import write_sample_corpus

runner = CliRunner()


def test_cli_lint_outputs_summary(tmp_path: Path):
    """CLI lint command returns a JSON summary for .txt and .md documents."""
    corpus_dir = write_sample_corpus(tmp_path)
    result = runner.invoke(app, ["lint", "--input-path", str(corpus_dir)])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)

    docs = {doc["doc_id"]: doc for doc in payload["documents"]}
    assert set(docs) == {"issue.txt", "notes/clean.md"}
    assert docs["notes/clean.md"]["lints"] == []

    (lint,) = docs["issue.txt"]["lints"]
    assert lint["problem_text"] == "big of a"
    assert lint["lint_kind"] == "Style"
    assert lint["lint_kind_pretty"] == "Style"
    assert lint["priority"] == 63
    assert lint["suggestions"] == [{"kind": "Replace", "replacement_text": "big a"}]
    assert lint["span"] == {"start": 19, "end": 27}


def test_cli_lint_single_file(tmp_path: Path):
    """CLI lint command accepts a single file path."""
    path = tmp_path / "single.txt"
    path.write_text("How much of a problem is it?", encoding="utf-8")
    result = runner.invoke(app, ["lint", "--input-path", str(path)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["documents"] == [{"doc_id": "single.txt", "lints": []}]


def test_cli_fix_writes_files(tmp_path: Path):
    """fix command writes corrected text and a summary in the output dir."""
    corpus_dir = write_sample_corpus(tmp_path)
    output_dir = tmp_path / "fixed"
    result = runner.invoke(
        app,
        ["fix", "--input-path", str(corpus_dir), "--output-path", str(output_dir)],
    )
    assert result.exit_code == 0, result.output
    fixed = (output_dir / "issue.txt").read_text(encoding="utf-8")
    assert fixed == "StepButton has too big a space to click."
    assert (output_dir / "notes" / "clean.md").read_text(encoding="utf-8") == (
        "The light of a star."
    )
    summary = json.loads((output_dir / "summary.json").read_text(encoding="utf-8"))
    changed = {doc["doc_id"]: doc["changed"] for doc in summary["documents"]}
    assert changed == {"issue.txt": True, "notes/clean.md": False}


def test_cli_respects_disabled_rules(tmp_path: Path):
    """Rules switched off in the config file produce no lints."""
    corpus_dir = write_sample_corpus(tmp_path)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("linters:\n  adjective_of_a: false\n", encoding="utf-8")
    result = runner.invoke(
        app, ["lint", "--input-path", str(corpus_dir), "--config", str(config_path)]
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert all(doc["lints"] == [] for doc in payload["documents"])


def test_cli_rejects_missing_lexicon(tmp_path: Path):
    """A lexicon path that does not exist is reported as a bad parameter."""
    corpus_dir = write_sample_corpus(tmp_path)
    result = runner.invoke(
        app,
        [
            "lint",
            "--input-path",
            str(corpus_dir),
            "--lexicon-path",
            str(tmp_path / "missing.tsv"),
        ],
    )
    assert result.exit_code != 0


def test_cli_list_rules():
    """list-rules prints each enabled rule and its description."""
    result = runner.invoke(app, ["list-rules"])
    assert result.exit_code == 0
    assert "adjective_of_a:" in result.stdout


def test_cli_print_config():
    """print-config command dumps the current configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "resolve_overlaps" in result.stdout
    assert "adjective_of_a" in result.stdout


def test_load_sources_returns_text_sources_by_relative_path(tmp_path: Path):
    """Directory input expands into .txt/.md sources keyed by POSIX path."""
    corpus_dir = write_sample_corpus(tmp_path)
    sources = _load_sources(corpus_dir)

    assert [source.doc_id for source in sources] == ["issue.txt", "notes/clean.md"]
    assert sources[1].text == "The light of a star."
    assert [s.doc_id for s in _load_sources(corpus_dir / "issue.txt")] == ["issue.txt"]
