"""Configuration loading tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from funcinfo.core.errors import ConfigurationError
from funcinfo.core.config import build_registry, load_settings, load_yaml, merge_dicts


def test_load_yaml_missing_file_is_empty(tmp_path: Path) -> None:
    assert load_yaml(tmp_path / "absent.yaml") == {}


def test_load_yaml_requires_mapping(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="mapping"):
        load_yaml(path)


def test_merge_dicts_is_recursive() -> None:
    merged = merge_dicts({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}, "c": 4})
    assert merged == {"a": {"x": 1, "y": 3}, "b": 1, "c": 4}


def test_defaults_without_file() -> None:
    settings = load_settings()
    assert settings.log_level == "WARNING"
    assert settings.providers == {}
    assert "name" in settings.attributes


def test_settings_from_file_and_overrides(tmp_path: Path) -> None:
    path = tmp_path / "funcinfo.yaml"
    path.write_text(
        "log_level: debug\nproviders:\n  source: my_pkg.source\nattributes: [code]\n",
        encoding="utf-8",
    )

    settings = load_settings(path, overrides={"providers": {"pad": "my_pkg.pad"}})

    assert settings.log_level == "DEBUG"
    assert settings.providers == {"source": "my_pkg.source", "pad": "my_pkg.pad"}
    assert settings.attributes == ["code"]


def test_invalid_settings_raise_configuration_error(tmp_path: Path) -> None:
    path = tmp_path / "funcinfo.yaml"
    path.write_text("log_level: chatty\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_settings(path)


def test_build_registry_applies_overrides(tmp_path: Path) -> None:
    settings = load_settings(overrides={"providers": {"source": "my_pkg.source"}})
    registry = build_registry(settings)
    assert registry.module_path("source") == "my_pkg.source"
    assert registry.module_path("naming") == "funcinfo.providers.naming"
