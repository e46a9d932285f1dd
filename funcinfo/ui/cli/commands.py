"""Typer command handlers."""

from __future__ import annotations

import importlib
import json
from pathlib import Path
from typing import Any

import typer

from funcinfo.core.attribute_table import ATTRIBUTES
from funcinfo.core.errors import FuncInfoError
from funcinfo.core.information import Information
from funcinfo.core.config import build_registry, configure_logging, load_settings
from funcinfo.models.settings import FuncInfoSettings


def resolve_target(target: str) -> Any:
    """Import ``package.module:qualname`` and return the named object."""
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise typer.BadParameter(f"Expected 'module:qualname', got '{target}'")
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise typer.BadParameter(f"Cannot import module '{module_name}': {exc}") from exc
    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise typer.BadParameter(f"'{module_name}' has no attribute '{qualname}'") from exc
    return obj


def _runtime(config: Path | None) -> FuncInfoSettings:
    try:
        settings = load_settings(config)
    except FuncInfoError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    configure_logging(settings)
    return settings


def _information(target: str, settings: FuncInfoSettings) -> Information:
    obj = resolve_target(target)
    try:
        return Information(obj, registry=build_registry(settings))
    except FuncInfoError as exc:
        raise typer.BadParameter(str(exc)) from exc


def show(target: str, attributes: list[str] | None, config: Path | None, as_json: bool) -> None:
    """Print selected attributes of a callable."""
    settings = _runtime(config)
    info = _information(target, settings)
    names = attributes or settings.attributes
    unknown = [name for name in names if name not in ATTRIBUTES]
    if unknown:
        raise typer.BadParameter(f"Unknown attribute(s): {', '.join(unknown)}")

    report = info.report(names)
    if as_json:
        typer.echo(json.dumps(report.json_safe(), indent=2))
        return
    for name, value in report.attributes.items():
        if isinstance(value, str) and "\n" in value:
            typer.echo(f"{name}:")
            typer.echo(value.rstrip("\n"))
        else:
            typer.echo(f"{name}: {value}")
    for name in report.skipped:
        typer.echo(f"{name}: <provider unavailable>")


def dump(target: str, config: Path | None) -> None:
    """Print the structural dump of a callable."""
    settings = _runtime(config)
    info = _information(target, settings)
    text = info.dump()
    if text is None:
        typer.echo("dump provider unavailable", err=True)
        raise typer.Exit(code=1)
    typer.echo(text, nl=False)


def attributes_list() -> None:
    """List supported attributes and their providers."""
    for name, descriptor in ATTRIBUTES.items():
        provider = descriptor.provider or "-"
        cached = "cached" if descriptor.cacheable else "no-cache"
        typer.echo(f"{name}: provider={provider} {cached}")


def config_show(config: Path | None) -> None:
    """Show effective settings."""
    settings = _runtime(config)
    typer.echo(json.dumps(settings.model_dump(), indent=2))
