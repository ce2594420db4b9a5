from __future__ import annotations

from typing import Any, Mapping

from .base import Pattern, TokenWindow
from .invert import Invert
from .repeating_pattern import RepeatingPattern
from .sequence import AnyPattern, SequencePattern
from .whitespace_pattern import WhitespacePattern
from .word_set import IndefiniteArticle, WordSet

__all__ = [
    "Pattern",
    "TokenWindow",
    "AnyPattern",
    "IndefiniteArticle",
    "Invert",
    "RepeatingPattern",
    "SequencePattern",
    "WhitespacePattern",
    "WordSet",
    "create_pattern",
    "build_pattern",
]


def create_pattern(name: str, **kwargs: Any) -> Pattern:
    """Factory for building patterns by name."""
    normalized = name.lower().strip()
    if normalized == "whitespace":
        return WhitespacePattern()
    if normalized == "any":
        return AnyPattern()
    if normalized in {"indefinite_article", "article"}:
        return IndefiniteArticle()
    if normalized == "word_set":
        return WordSet(kwargs.get("words", ()))
    if normalized == "invert":
        return Invert(kwargs["inner"])
    if normalized == "repeat":
        return RepeatingPattern(kwargs["inner"], int(kwargs.get("min", 0)))
    if normalized == "sequence":
        return SequencePattern(*kwargs.get("patterns", ()))
    raise ValueError(f"Unknown pattern '{name}'.")


def build_pattern(description: str | Mapping[str, Any]) -> Pattern:
    """
    Build a pattern tree from a plain description, e.g. one loaded from YAML.

    A bare string names a leaf pattern (``"whitespace"``). A mapping has a
    single pattern key whose value holds its argument::

        {"sequence": ["whitespace", {"word_set": ["of"]}, "indefinite_article"]}
        {"repeat": {"invert": "whitespace"}, "min": 2}
    """
    if isinstance(description, str):
        return create_pattern(description)
    if not isinstance(description, Mapping):
        raise ValueError(f"Pattern description must be a string or mapping, got {description!r}.")

    options = {key: value for key, value in description.items() if key != "min"}
    if len(options) != 1:
        raise ValueError(f"Pattern description must name exactly one pattern: {description!r}.")
    name, argument = next(iter(options.items()))
    normalized = str(name).lower().strip()

    if normalized == "word_set":
        words = [argument] if isinstance(argument, str) else list(argument)
        return create_pattern(normalized, words=words)
    if normalized == "invert":
        return create_pattern(normalized, inner=build_pattern(argument))
    if normalized == "repeat":
        return create_pattern(
            normalized, inner=build_pattern(argument), min=description.get("min", 0)
        )
    if normalized == "sequence":
        return create_pattern(
            normalized, patterns=[build_pattern(item) for item in argument]
        )
    return create_pattern(normalized)
