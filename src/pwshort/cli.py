"""Command-line interface for pwshort."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from pwshort.config import Settings, get_settings
from pwshort.core.engine import Shortener
from pwshort.errors import ConfigurationError, ParseFailure
from pwshort.logging_utils import configure_logging
from pwshort.registry import CommandRegistry, load_registry

app = typer.Typer(
    name="pwshort",
    help="Shorten PowerShell commands and parameters to their aliases.",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)"),
) -> None:
    configure_logging(log_level or _load_settings().log_level)


def _load_settings(**overrides: object) -> Settings:
    try:
        return get_settings(**overrides)
    except ValueError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(2) from exc


def _load_registry(settings: Settings) -> CommandRegistry:
    try:
        return load_registry(settings.registry_path)
    except ConfigurationError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(2) from exc


def _read_source(path: Optional[Path]) -> str:
    if path is None or str(path) == "-":
        return sys.stdin.read()
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        typer.echo(f"error: cannot read {path}: {exc}", err=True)
        raise typer.Exit(2) from exc


@app.command()
def shorten(
    path: Optional[Path] = typer.Argument(None, help="Script to shorten; stdin when omitted or '-'"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the result here instead of stdout"),
    registry_path: Optional[Path] = typer.Option(None, "--registry", "-r", help="Extra YAML command definitions"),
    line_ending: Optional[str] = typer.Option(None, "--line-ending", help="crlf or lf"),
    collapse_whitespace: Optional[bool] = typer.Option(
        None, "--collapse/--no-collapse", help="Collapse runs of spaces outside strings"
    ),
    abbreviate: Optional[bool] = typer.Option(
        None, "--abbreviate/--no-abbreviate", help="Abbreviate alias-less parameters to a unique prefix"
    ),
    stats: bool = typer.Option(False, "--stats", help="Print rewrite counters to stderr"),
) -> None:
    """Rewrite a script with the shortest known command and parameter names."""

    settings = _load_settings(
        registry_path=registry_path,
        line_ending=line_ending,
        collapse_whitespace=collapse_whitespace,
        abbreviate_parameters=abbreviate,
    )
    shortener = Shortener(registry=_load_registry(settings), settings=settings)
    source = _read_source(path)

    try:
        result = shortener.run(source)
    except ParseFailure as exc:
        typer.echo(f"error: cannot parse input: {exc}", err=True)
        raise typer.Exit(1) from exc

    if output is None:
        typer.echo(result.text, nl=False)
    else:
        output.write_text(result.text, encoding="utf-8", newline="")
    if stats:
        typer.echo(result.summary(), err=True)


@app.command()
def resolve(
    name: str = typer.Argument(..., help="Command name or alias"),
    parameters: Optional[list[str]] = typer.Argument(None, help="Parameter names, with or without a leading dash"),
    registry_path: Optional[Path] = typer.Option(None, "--registry", "-r", help="Extra YAML command definitions"),
) -> None:
    """Show the short forms chosen for a command and its parameters."""

    settings = _load_settings(registry_path=registry_path)
    shortener = Shortener(registry=_load_registry(settings), settings=settings)
    resolver = shortener.resolver

    command = resolver.resolve_command_alias(name)
    if not command.known:
        typer.echo(f"{name}: unknown command")
        raise typer.Exit(1)
    typer.echo(f"{command.canonical_name} -> {command.short_form or command.name}")

    for token in parameters or []:
        parameter = resolver.resolve_parameter_alias(command.canonical_name or name, token.lstrip("-"))
        if not parameter.known:
            typer.echo(f"  -{parameter.token}: unknown parameter")
            continue
        typer.echo(f"  -{parameter.canonical_name} -> -{parameter.alias or parameter.token}")


@app.command("commands")
def list_commands(
    registry_path: Optional[Path] = typer.Option(None, "--registry", "-r", help="Extra YAML command definitions"),
) -> None:
    """List known commands and their aliases."""

    settings = _load_settings(registry_path=registry_path)
    for definition in _load_registry(settings).commands():
        aliases = ", ".join(definition.aliases) if definition.aliases else "-"
        typer.echo(f"{definition.name}: {aliases}")
