from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, TypedDict

import typer
import yaml

from .config import ProseCheckConfig, load_config
from .lexicon import LexiconError
from .linting import Lint, Suggestion, create_linter
from .pipeline import LintResult, TextSource, apply_suggestions, lint_corpus

app = typer.Typer(help="Prose style checker CLI.", no_args_is_help=True)

LOGGER = logging.getLogger(__name__)


@app.callback()
def configure(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log progress information to stderr."
    ),
) -> None:
    """Configure logging before any sub-command runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def lint(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    lexicon_path: Path | None = typer.Option(
        None, "--lexicon-path", help="Tab-separated word list with part-of-speech tags."
    ),
    keep_overlaps: bool = typer.Option(
        False,
        "--keep-overlaps",
        help="Report overlapping lints instead of keeping the highest priority one.",
    ),
) -> None:
    """Lint the input files and emit a JSON summary."""
    cfg = load_config(config)
    _apply_overrides(cfg, lexicon_path, keep_overlaps)
    sources = _load_sources(input_path)
    results = _run(sources, cfg)
    typer.echo(json.dumps({"documents": _build_summary(results)}, indent=2))


@app.command()
def fix(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    output_path: Path = typer.Option(..., file_okay=False),
    config: Path | None = typer.Option(None, "--config", "-c"),
    lexicon_path: Path | None = typer.Option(
        None, "--lexicon-path", help="Tab-separated word list with part-of-speech tags."
    ),
) -> None:
    """Apply the first suggestion of every lint and save the corrected files + summary."""
    cfg = load_config(config)
    _apply_overrides(cfg, lexicon_path, keep_overlaps=False)
    sources = _load_sources(input_path)
    results = _run(sources, cfg)

    output_path.mkdir(parents=True, exist_ok=True)
    summary_items: List[FixSummaryEntry] = []
    for doc_id in sorted(results):
        result = results[doc_id]
        source = result.document.get_source()
        fixed = apply_suggestions(source, result.lints)
        dest = output_path / doc_id
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(fixed, encoding="utf-8")
        summary_items.append(
            {
                "doc_id": doc_id,
                "lint_count": len(result.lints),
                "changed": fixed != source,
            }
        )

    summary_path = output_path / "summary.json"
    summary_path.write_text(
        json.dumps({"documents": summary_items}, indent=2), encoding="utf-8"
    )
    typer.echo(f"Wrote corrected documents to {output_path} and summary to {summary_path}")


@app.command("list-rules")
def list_rules(config: Path | None = typer.Option(None, "--config", "-c")) -> None:
    """Print the enabled rules and what they look for."""
    cfg = load_config(config)
    for name in cfg.linters.enabled():
        typer.echo(f"{name}: {create_linter(name).description()}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ProseCheckConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_overrides(
    config: ProseCheckConfig,
    lexicon_path: Path | None,
    keep_overlaps: bool,
) -> None:
    """Apply CLI overrides to config fields when provided."""
    if lexicon_path:
        config.lexicon_path = str(lexicon_path)
    if keep_overlaps:
        config.resolve_overlaps = False


def _run(sources: List[TextSource], config: ProseCheckConfig) -> Dict[str, LintResult]:
    try:
        return lint_corpus(sources, config)
    except (FileNotFoundError, LexiconError) as exc:
        raise typer.BadParameter(str(exc)) from exc


# File types the CLI knows how to expand into text sources.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".md"}


class SpanPayload(TypedDict):
    start: int
    end: int


class SuggestionPayload(TypedDict):
    kind: str
    replacement_text: str


class LintPayload(TypedDict):
    span: SpanPayload
    message: str
    problem_text: str
    lint_kind: str
    lint_kind_pretty: str
    priority: int
    suggestions: List[SuggestionPayload]


class DocumentSummary(TypedDict):
    doc_id: str
    lints: List[LintPayload]


class FixSummaryEntry(TypedDict):
    doc_id: str
    lint_count: int
    changed: bool


def _load_sources(input_path: Path) -> List[TextSource]:
    """Expand the input path into text sources keyed by their relative path."""
    if input_path.is_file():
        return [_source_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    sources: List[TextSource] = []
    for file in files:
        relative_id = file.relative_to(input_path).as_posix()
        sources.append(_source_from_file(file, relative_id))
    if not sources:
        LOGGER.warning(
            "No %s files found under %s",
            "/".join(sorted(SUPPORTED_INPUT_EXTENSIONS)),
            input_path,
        )
    return sources


def _source_from_file(path: Path, doc_id: str) -> TextSource:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text.") from exc
    return TextSource(doc_id=doc_id, text=text)


def _build_summary(results: Dict[str, LintResult]) -> List[DocumentSummary]:
    """Create a JSON-serializable summary for each linted document."""
    summary: List[DocumentSummary] = []
    for doc_id, result in sorted(results.items()):
        source = result.document.get_source()
        summary.append(
            {
                "doc_id": doc_id,
                "lints": [_lint_dict(lint, source) for lint in result.lints],
            }
        )
    return summary


def _lint_dict(lint: Lint, source: str) -> LintPayload:
    """Serialize a Lint so it can be emitted in JSON."""
    return {
        "span": {"start": lint.span.start, "end": lint.span.end},
        "message": lint.message,
        "problem_text": lint.get_problem_text(source),
        "lint_kind": lint.lint_kind.value,
        "lint_kind_pretty": lint.lint_kind.pretty,
        "priority": lint.priority,
        "suggestions": [_suggestion_dict(s) for s in lint.suggestions],
    }


def _suggestion_dict(suggestion: Suggestion) -> SuggestionPayload:
    return {
        "kind": suggestion.kind.value,
        "replacement_text": suggestion.replacement_text,
    }


if __name__ == "__main__":
    main()
