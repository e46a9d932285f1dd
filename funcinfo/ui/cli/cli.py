"""CLI entrypoint for funcinfo."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from funcinfo.ui.cli import commands

app = typer.Typer(help="Inspect Python callables")
config_app = typer.Typer(help="Configuration commands")


@app.command("show")
def show_cmd(
    target: str = typer.Argument(..., help="Callable as 'package.module:qualname'"),
    attr: Optional[list[str]] = typer.Option(None, "--attr", "-a", help="Attribute to show"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML settings file"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON"),
) -> None:
    """Show attributes of a callable."""
    commands.show(target=target, attributes=attr, config=config, as_json=as_json)


@app.command("dump")
def dump_cmd(
    target: str = typer.Argument(..., help="Callable as 'package.module:qualname'"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML settings file"),
) -> None:
    """Dump a callable's internals."""
    commands.dump(target=target, config=config)


@app.command("attributes")
def attributes_cmd() -> None:
    """List supported attributes."""
    commands.attributes_list()


@config_app.command("show")
def config_show_cmd(
    config: Optional[Path] = typer.Option(None, "--config", help="YAML settings file"),
) -> None:
    """Show effective configuration."""
    commands.config_show(config=config)


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
