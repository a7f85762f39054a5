# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application exposing the resolution engine."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from .. import __version__
from ..config.loader import load_configuration
from ..config.models import Configuration
from ..errors import QaplanError
from ..logging import configure_logging
from ..resolution.composer import ResolvedConfiguration, compose
from ..serialization import serialize_resolved
from ..sources.catalog import SourceCatalog, default_source
from ..sources.library import Library
from ..versioning import check_compatibility
from .shared import CLIError, CLILogger, build_cli_logger, resolve_host

app = typer.Typer(help="Resolve code-quality plugin plans for a project.", no_args_is_help=True)

ConfigArgument = Annotated[
    Path,
    typer.Argument(help="Path to qaplan.toml or the directory containing it."),
]
RootOption = Annotated[
    Path | None,
    typer.Option("--root", help="Project root anchoring local sources. Defaults to the config's directory."),
]
NoEmojiOption = Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")]
NoColorOption = Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")]


def _load(config_path: Path, root: Path | None) -> tuple[Configuration, Library]:
    try:
        config = load_configuration(config_path)
    except QaplanError as exc:
        raise CLIError(str(exc)) from exc
    anchor = root if root is not None else (config_path if config_path.is_dir() else config_path.parent)
    return config, Library.for_root(anchor)


def _render_plan(logger: CLILogger, resolved: ResolvedConfiguration) -> None:
    table = Table(title=f"Resolved plugins for {resolved.host}")
    table.add_column("Plugin", style="bold cyan")
    table.add_column("Version")
    table.add_column("Source")
    table.add_column("Download")
    table.add_column("Drivers")
    for plugin in resolved.plugins:
        drivers = ", ".join(
            f"{name} ({plugin.strategies[name].batch_by.value})" for name in plugin.drivers
        )
        table.add_row(plugin.name, plugin.version or "-", plugin.source, plugin.download_url or "-", drivers or "-")
    logger.console.print(table)


@app.command("resolve")
def resolve_command(
    config_path: ConfigArgument,
    root: RootOption = None,
    os_name: Annotated[str | None, typer.Option("--os", help="Target operating system.")] = None,
    cpu_name: Annotated[str | None, typer.Option("--cpu", help="Target CPU architecture.")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Emit the plan as JSON.")] = False,
    development: Annotated[
        bool,
        typer.Option("--dev/--release", help="Treat an incompatible cli_version as a warning (--dev) or an error."),
    ] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Show resolution debug logging.")] = False,
    no_emoji: NoEmojiOption = False,
    no_color: NoColorOption = False,
) -> None:
    """Resolve every enabled plugin for the target host."""

    configure_logging(debug=debug, use_color=not no_color)
    logger = build_cli_logger(emoji=not no_emoji, no_color=no_color)
    try:
        config, library = _load(config_path, root)
        host = resolve_host(os_name, cpu_name)
        resolved = compose(config, __version__, library, host.os, host.cpu, development=development)
    except QaplanError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    if as_json:
        typer.echo(json.dumps(serialize_resolved(resolved), indent=2))
        return
    _render_plan(logger, resolved)
    logger.ok(f"Resolved {len(resolved.plugins)} plugin(s) for {resolved.host}")


@app.command("sources")
def sources_command(
    config_path: ConfigArgument,
    root: RootOption = None,
    no_emoji: NoEmojiOption = False,
    no_color: NoColorOption = False,
) -> None:
    """List configured sources in precedence order."""

    logger = build_cli_logger(emoji=not no_emoji, no_color=no_color)
    try:
        config, library = _load(config_path, root)
        catalog = SourceCatalog.build(config, library)
        default = default_source(config, library)
    except (QaplanError, CLIError) as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc

    table = Table(title="Sources (highest precedence first)")
    table.add_column("#", justify="right")
    table.add_column("Name", style="bold cyan")
    table.add_column("Kind")
    table.add_column("Location")
    for index, source in enumerate(catalog, start=1):
        marker = " (default)" if source == default else ""
        table.add_row(str(index), f"{source.label}{marker}", source.kind, str(source.root))
    logger.console.print(table)


@app.command("check-version")
def check_version_command(
    config_path: ConfigArgument,
    no_emoji: NoEmojiOption = False,
    no_color: NoColorOption = False,
) -> None:
    """Check the config's cli_version against the running version."""

    logger = build_cli_logger(emoji=not no_emoji, no_color=no_color)
    try:
        config, _ = _load(config_path, None)
        verdict = check_compatibility(config.cli_version, __version__)
    except (QaplanError, CLIError) as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    if verdict.compatible:
        logger.ok(verdict.message)
        return
    logger.fail(verdict.message)
    raise typer.Exit(code=1)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main"]
