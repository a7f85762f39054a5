# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Top-level composition of a project configuration into a resolved plan."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..config.models import Configuration
from ..config.types import Cpu, OperatingSystem
from ..errors import PluginCompositionError, PluginResolutionError, SourceCompositionError, SourceError
from ..platform import HostPlatform
from ..sources.catalog import SourceCatalog, default_source
from ..sources.library import Library
from ..sources.reader import DefinitionReader
from ..versioning import VersionInput, check_compatibility, enforce_compatibility
from .plugins import ResolvedPlugin, resolve_plugin

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=True)
class ResolvedConfiguration:
    """Resolved plugins plus the policy data the execution layer consumes."""

    configuration: Configuration
    host: HostPlatform
    default_source: str
    source_names: tuple[str, ...]
    plugins: tuple[ResolvedPlugin, ...]

    # Holds pydantic models with dict fields, so instances are not hashable.
    __hash__ = None  # type: ignore[assignment]

    def plugin(self, name: str) -> ResolvedPlugin | None:
        """Return the resolved plugin called ``name``, if enabled."""

        return next((plugin for plugin in self.plugins if plugin.name == name), None)


def compose(
    config: Configuration,
    running_version: VersionInput,
    library: Library,
    host_os: OperatingSystem,
    host_cpu: Cpu,
    *,
    development: bool = False,
    reader: DefinitionReader | None = None,
) -> ResolvedConfiguration:
    """Resolve ``config`` for one host.

    Composition is all-or-nothing: the first failing step raises and no
    partial result is produced. Every source's definitions are read while the
    catalog is built, so a broken source fails composition even when no
    enabled plugin comes from it.

    Args:
        config: Parsed project configuration.
        running_version: Version of the executing tool.
        library: Storage locations used to place sources.
        host_os: Operating system of the target host.
        host_cpu: CPU architecture of the target host.
        development: ``True`` for development builds, which downgrade an
            incompatible ``cli_version`` to a warning.
        reader: Definition reader used by the catalog.

    Returns:
        ResolvedConfiguration: The resolved plan.

    Raises:
        InvalidVersionError: If either version cannot be parsed.
        IncompatibleVersionError: If the versions are incompatible in a release context.
        SourceCompositionError: If the catalog, the default source or any
            source's definitions cannot be loaded.
        PluginCompositionError: If any enabled plugin fails to resolve.
    """

    verdict = check_compatibility(config.cli_version, running_version)
    enforce_compatibility(verdict, development=development)

    try:
        default = default_source(config, library)
        catalog = SourceCatalog.build(config, library, reader=reader)
        catalog.load_definitions()
    except SourceError as exc:
        raise SourceCompositionError(exc) from exc

    resolved: list[ResolvedPlugin] = []
    for enabled in config.plugin:
        try:
            resolved.append(resolve_plugin(enabled, catalog, host_os, host_cpu))
        except SourceError as exc:
            raise SourceCompositionError(exc) from exc
        except PluginResolutionError as exc:
            raise PluginCompositionError(enabled.name, exc) from exc

    host = HostPlatform(os=host_os, cpu=host_cpu)
    LOGGER.debug("composed %d plugin(s) for %s", len(resolved), host)
    return ResolvedConfiguration(
        configuration=config,
        host=host,
        default_source=default.label,
        source_names=tuple(source.label for source in catalog),
        plugins=tuple(resolved),
    )


__all__ = ["ResolvedConfiguration", "compose"]
