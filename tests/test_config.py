from pathlib import Path

import pytest

from prosecheck.config import (
    LinterSettings,
    ProseCheckConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_defaults():
    cfg = load_config()
    assert cfg == ProseCheckConfig()
    assert cfg.linters.enabled() == ["adjective_of_a"]
    assert cfg.to_dict()["linters"] == {"adjective_of_a": True}


def test_config_from_dict_ignores_unknown_keys():
    cfg = config_from_dict(
        {"min_priority": 50, "colour": "blue", "linters": {"adjective_of_a": False, "x": 1}}
    )
    assert cfg.min_priority == 50
    assert cfg.linters == LinterSettings(adjective_of_a=False)
    assert cfg.linters.enabled() == []


def test_config_from_dict_rejects_bad_linters_block():
    with pytest.raises(ValueError):
        config_from_dict({"linters": ["adjective_of_a"]})


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "resolve_overlaps: false\nmax_document_chars: 100\nlinters:\n  adjective_of_a: true\n",
        encoding="utf-8",
    )
    cfg = config_from_yaml(path)
    assert cfg.resolve_overlaps is False
    assert cfg.max_document_chars == 100


def test_config_yaml_must_be_mapping(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- one\n- two\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)
