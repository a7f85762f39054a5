# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read plugin definitions from a materialised source root."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final, Protocol, runtime_checkable

from pydantic import ValidationError

from ..config.definitions import PluginDeclaration
from ..errors import SourceResolutionError
from .models import Source

LOGGER = logging.getLogger(__name__)

PLUGINS_DIRNAME: Final[str] = "plugins"
PLUGIN_FILENAME: Final[str] = "plugin.toml"


@runtime_checkable
class DefinitionReader(Protocol):
    """Provide the plugin definitions published by a source."""

    def definitions(self, source: Source) -> Mapping[str, PluginDeclaration]:
        """Return plugin declarations keyed by name.

        Args:
            source: Source handle whose definitions are requested.

        Returns:
            Mapping[str, PluginDeclaration]: Declarations published by ``source``.
        """
        ...


class TomlDefinitionReader:
    """Read ``plugins/**/plugin.toml`` documents beneath a source root.

    Each document holds one or more ``[plugins.definitions.<name>]`` tables.
    Results are cached per root for the lifetime of the reader.
    """

    def __init__(self) -> None:
        self._cache: dict[Path, Mapping[str, PluginDeclaration]] = {}

    def definitions(self, source: Source) -> Mapping[str, PluginDeclaration]:
        if source.root not in self._cache:
            self._cache[source.root] = self._load(source)
        return self._cache[source.root]

    def _load(self, source: Source) -> Mapping[str, PluginDeclaration]:
        plugins_dir = source.root / PLUGINS_DIRNAME
        if not plugins_dir.is_dir():
            LOGGER.debug("source %s has no plugin definitions at %s", source.label, plugins_dir)
            return MappingProxyType({})
        found: dict[str, PluginDeclaration] = {}
        for path in sorted(plugins_dir.rglob(PLUGIN_FILENAME)):
            for name, declaration in _read_document(path, source=source).items():
                if name in found:
                    raise SourceResolutionError(source.label, f"plugin '{name}' is defined more than once ({path})")
                found[name] = declaration
        LOGGER.debug("source %s provides %d plugin(s)", source.label, len(found))
        return MappingProxyType(found)


def _read_document(path: Path, *, source: Source) -> dict[str, PluginDeclaration]:
    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise SourceResolutionError(source.label, f"cannot read {path}: {exc}") from exc

    plugins_table = document.get("plugins", {})
    tables = plugins_table.get("definitions", {}) if isinstance(plugins_table, dict) else None
    if not isinstance(tables, dict):
        raise SourceResolutionError(source.label, f"{path}: 'plugins.definitions' must be a table")
    declarations: dict[str, PluginDeclaration] = {}
    for name, table in tables.items():
        declarations[name] = _parse_declaration(name, table, path=path, source=source)
    return declarations


def _parse_declaration(name: str, table: Any, *, path: Path, source: Source) -> PluginDeclaration:
    if not isinstance(table, dict):
        raise SourceResolutionError(source.label, f"{path}: definition '{name}' must be a table")
    declared_name = table.get("name", name)
    if declared_name != name:
        raise SourceResolutionError(
            source.label,
            f"{path}: definition key '{name}' does not match name '{declared_name}'",
        )
    try:
        return PluginDeclaration.model_validate({**table, "name": name})
    except ValidationError as exc:
        raise SourceResolutionError(source.label, f"{path}: invalid definition '{name}':\n{exc}") from exc


__all__ = ["DefinitionReader", "PLUGIN_FILENAME", "PLUGINS_DIRNAME", "TomlDefinitionReader"]
