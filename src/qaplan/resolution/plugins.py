# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve enabled plugins against the source catalog for one host."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..config.definitions import DownloadMatrixEntry, DriverDeclaration, EnabledPlugin, ExtraPackage, PluginDeclaration
from ..config.types import Cpu, OperatingSystem
from ..errors import UnknownPluginError, VersionNotAvailableError
from ..platform import select_download
from ..sources.catalog import SourceCatalog
from .strategies import InvocationStrategy, invocation_strategy

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=True)
class ResolvedPlugin:
    """An enabled plugin paired with its source, version, artifact and drivers."""

    name: str
    source: str
    declaration: PluginDeclaration
    version: str | None
    download: DownloadMatrixEntry | None
    download_url: str | None
    extra_packages: tuple[ExtraPackage, ...]
    drivers: Mapping[str, DriverDeclaration]
    strategies: Mapping[str, InvocationStrategy]

    # Holds read-only mapping views, so instances are not hashable.
    __hash__ = None  # type: ignore[assignment]


def render_download_url(template: str, *, version: str | None, host_os: OperatingSystem, host_cpu: Cpu) -> str:
    """Substitute ``${version}``, ``${os}`` and ``${cpu}`` in a download URL template."""

    url = template.replace("${os}", host_os.value).replace("${cpu}", host_cpu.value)
    if version is not None:
        url = url.replace("${version}", version)
    return url


def select_version(enabled: EnabledPlugin, declaration: PluginDeclaration) -> str | None:
    """Return the effective version for ``enabled``.

    Raises:
        VersionNotAvailableError: If the pin names a version the declaration does not offer.
    """

    if enabled.version is None:
        return declaration.default_version()
    available = declaration.available_versions()
    if available and enabled.version not in available:
        raise VersionNotAvailableError(enabled.name, enabled.version, available)
    return enabled.version


def merge_extra_packages(
    declared: tuple[ExtraPackage, ...],
    enabled: tuple[ExtraPackage, ...],
) -> tuple[ExtraPackage, ...]:
    """Return the declaration's packages followed by the enabled plugin's additions."""

    return tuple(dict.fromkeys((*declared, *enabled)))


def resolve_plugin(
    enabled: EnabledPlugin,
    catalog: SourceCatalog,
    host_os: OperatingSystem,
    host_cpu: Cpu,
) -> ResolvedPlugin:
    """Resolve ``enabled`` into an invocable plugin for ``host_os``/``host_cpu``.

    Args:
        enabled: The project's opt-in entry.
        catalog: Sources searched in precedence order.
        host_os: Operating system of the target host.
        host_cpu: CPU architecture of the target host.

    Returns:
        ResolvedPlugin: Fully resolved plugin descriptor.

    Raises:
        UnknownPluginError: If no source defines the plugin.
        VersionNotAvailableError: If the version pin cannot be honoured.
        NoMatchingArtifactError: If the download matrix has no row for the host.
    """

    located = catalog.locate_plugin(enabled.name)
    if located is None:
        raise UnknownPluginError(enabled.name)
    source, declaration = located

    version = select_version(enabled, declaration)
    download: DownloadMatrixEntry | None = None
    download_url: str | None = None
    if declaration.downloads:
        download = select_download(declaration.downloads, host_os, host_cpu, plugin=enabled.name)
        download_url = render_download_url(download.url, version=version, host_os=host_os, host_cpu=host_cpu)

    drivers = dict(declaration.drivers)
    strategies = {name: invocation_strategy(driver, declaration, enabled) for name, driver in drivers.items()}
    LOGGER.debug(
        "resolved plugin %s version=%s source=%s download=%s",
        enabled.name,
        version,
        source.label,
        download_url,
    )
    return ResolvedPlugin(
        name=enabled.name,
        source=source.label,
        declaration=declaration,
        version=version,
        download=download,
        download_url=download_url,
        extra_packages=merge_extra_packages(declaration.extra_packages, enabled.extra_packages),
        drivers=MappingProxyType(drivers),
        strategies=MappingProxyType(strategies),
    )


__all__ = [
    "ResolvedPlugin",
    "merge_extra_packages",
    "render_download_url",
    "resolve_plugin",
    "select_version",
]
