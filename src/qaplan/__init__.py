# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Plugin and source resolution engine for multi-tool code-quality runs."""

from __future__ import annotations

from importlib import metadata

from .config import Configuration, Cpu, EnabledPlugin, OperatingSystem, PluginDeclaration, load_configuration
from .errors import (
    ComposeError,
    IncompatibleVersionError,
    MissingDefaultSourceError,
    NoMatchingArtifactError,
    PluginCompositionError,
    QaplanError,
    SourceCompositionError,
    SourceResolutionError,
    UnknownPluginError,
    VersionNotAvailableError,
)
from .platform import HostPlatform, detect_host, select_download
from .resolution import ResolvedConfiguration, ResolvedPlugin, compose, resolve_plugin
from .sources import Library, SourceCatalog, default_source, resolve_source
from .versioning import CompatibilityVerdict, check_compatibility

try:
    __version__ = metadata.version("qaplan")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

__all__ = [
    "ComposeError",
    "CompatibilityVerdict",
    "Configuration",
    "Cpu",
    "EnabledPlugin",
    "HostPlatform",
    "IncompatibleVersionError",
    "Library",
    "MissingDefaultSourceError",
    "NoMatchingArtifactError",
    "OperatingSystem",
    "PluginCompositionError",
    "PluginDeclaration",
    "QaplanError",
    "ResolvedConfiguration",
    "ResolvedPlugin",
    "SourceCatalog",
    "SourceCompositionError",
    "SourceResolutionError",
    "UnknownPluginError",
    "VersionNotAvailableError",
    "__version__",
    "check_compatibility",
    "compose",
    "default_source",
    "detect_host",
    "load_configuration",
    "resolve_plugin",
    "resolve_source",
    "select_download",
]
