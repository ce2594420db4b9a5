from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class LinterSettings:
    """Per-rule on/off switches."""

    adjective_of_a: bool = True

    def enabled(self) -> List[str]:
        """Return the names of enabled rules in declaration order."""
        return [item.name for item in fields(self) if getattr(self, item.name)]


@dataclass(slots=True)
class ProseCheckConfig:
    """Configuration options for a lint run."""

    lexicon_path: str | None = None
    resolve_overlaps: bool = True
    min_priority: int = 0
    max_document_chars: int | None = None
    linters: LinterSettings = field(default_factory=LinterSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(ProseCheckConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "linters" in data:
        linters_value = data["linters"]
        if isinstance(linters_value, LinterSettings):
            kwargs["linters"] = linters_value
        elif isinstance(linters_value, Mapping):
            kwargs["linters"] = _build_linter_settings(linters_value)
        else:
            raise ValueError("'linters' must be a mapping of rule names to booleans.")
    return kwargs


def _build_linter_settings(data: Mapping[str, Any]) -> LinterSettings:
    linter_allowed = {field.name for field in fields(LinterSettings)}
    filtered = {key: bool(data[key]) for key in data if key in linter_allowed}
    return LinterSettings(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> ProseCheckConfig:
    """Build a ProseCheckConfig from a dictionary-like input."""
    if data is None:
        return ProseCheckConfig()
    return ProseCheckConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> ProseCheckConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ProseCheckConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ProseCheckConfig()
    return config_from_yaml(path)
