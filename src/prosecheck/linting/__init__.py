from __future__ import annotations

from typing import Callable, Dict

from .adjective_of_a import AdjectiveOfA
from .base import Linter, PatternLinter
from .lint import DEFAULT_PRIORITY, Lint, LintKind, Suggestion, SuggestionKind

__all__ = [
    "AdjectiveOfA",
    "DEFAULT_PRIORITY",
    "Lint",
    "LintKind",
    "Linter",
    "PatternLinter",
    "Suggestion",
    "SuggestionKind",
    "LINTER_REGISTRY",
    "create_linter",
]

LINTER_REGISTRY: Dict[str, Callable[[], Linter]] = {
    "adjective_of_a": AdjectiveOfA,
}


def create_linter(name: str) -> Linter:
    """Factory for building linters by rule name."""
    normalized = name.lower().strip().replace("-", "_")
    factory = LINTER_REGISTRY.get(normalized)
    if factory is None:
        raise ValueError(f"Unknown linter '{name}'.")
    return factory()
