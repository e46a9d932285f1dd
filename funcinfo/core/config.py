"""Configuration loading and runtime bootstrapping."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from funcinfo.core.errors import ConfigurationError
from funcinfo.core.provider_registry import ProviderRegistry
from funcinfo.models.settings import FuncInfoSettings

logger = logging.getLogger("funcinfo.config")


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(
    path: Path | None = None, overrides: dict[str, Any] | None = None
) -> FuncInfoSettings:
    """Build settings from defaults, an optional YAML file and explicit overrides."""
    data = FuncInfoSettings().model_dump()
    if path is not None:
        data = merge_dicts(data, load_yaml(path))
    if overrides:
        data = merge_dicts(data, overrides)
    try:
        return FuncInfoSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid funcinfo configuration: {exc}") from exc


def build_registry(settings: FuncInfoSettings) -> ProviderRegistry:
    """Create a provider registry with the configured module overrides applied."""
    for name, module_path in sorted(settings.providers.items()):
        logger.info("Provider %s overridden with %s", name, module_path)
    return ProviderRegistry(modules=settings.providers)


def configure_logging(settings: FuncInfoSettings) -> None:
    """Apply the configured log level for command-line use."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
