"""Command-line entry points for inspecting index and source directories."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

import typer

from indexdir.bootstrap import prepare_index
from indexdir.config import ConfigError, dump_example_config, load_properties
from indexdir.directory.source import resolve_source_directory
from indexdir.util.logging import configure_logging

app = typer.Typer(add_completion=False, help="Index directory and lock strategy resolution")


def _parse_overrides(values: Optional[List[str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for item in values or []:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Expected KEY=VALUE, got {item!r}", param_hint="--set")
        overrides[key.strip()] = value
    return overrides


def _fail(exc: ConfigError) -> NoReturn:
    typer.echo(f"Configuration error: {exc}", err=True)
    raise typer.Exit(code=2)


@app.command()
def index(
    name: str = typer.Argument(..., help="Index (directory provider) name"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML/TOML/JSON configuration file"),
    overrides: Optional[List[str]] = typer.Option(None, "--set", help="Property override KEY=VALUE (repeatable)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug messages"),
) -> None:
    """Resolve the index directory and lock strategy for NAME."""

    logger = configure_logging(level=logging.DEBUG if verbose else logging.WARNING, stream=sys.stderr)
    try:
        properties = load_properties(name, config, overrides=_parse_overrides(overrides))
        location = prepare_index(name, properties, logger=logger)
    except ConfigError as exc:
        _fail(exc)
    typer.echo(json.dumps(location.to_dict(), indent=2))


@app.command()
def source(
    name: str = typer.Argument(..., help="Directory provider name, used when no relative path is set"),
    root_key: str = typer.Option("sourceBase", help="Property holding the root directory"),
    relative_key: str = typer.Option("source", help="Property holding the relative directory"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML/TOML/JSON configuration file"),
    overrides: Optional[List[str]] = typer.Option(None, "--set", help="Property override KEY=VALUE (repeatable)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug messages"),
) -> None:
    """Resolve the source directory for NAME."""

    logger = configure_logging(level=logging.DEBUG if verbose else logging.WARNING, stream=sys.stderr)
    try:
        properties = load_properties(name, config, overrides=_parse_overrides(overrides))
        resolved = resolve_source_directory(root_key, relative_key, name, properties, logger=logger)
    except ConfigError as exc:
        _fail(exc)
    typer.echo(resolved)


@app.command("init-config")
def init_config(
    dest: Path = typer.Argument(..., help="Destination file (.yaml, .yml or .json)"),
) -> None:
    """Write an example configuration file."""

    try:
        dump_example_config(dest)
    except ConfigError as exc:
        _fail(exc)
    typer.echo(f"Wrote {dest}")


def main() -> None:
    app()


__all__ = ["main", "app"]
