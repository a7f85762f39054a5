# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration data model and loaders."""

from __future__ import annotations

from .definitions import (
    DownloadMatrixEntry,
    DriverDeclaration,
    EnabledPlugin,
    ExtraPackage,
    InvocationDirectoryDef,
    PluginDeclaration,
    PluginEnvironment,
    PluginFetch,
    SourceDeclaration,
    TargetDef,
)
from .loader import CONFIG_FILENAME, load_configuration, parse_configuration
from .models import (
    ALL_WILDCARD,
    Configuration,
    Coverage,
    EnabledRuntimes,
    FileType,
    Ignore,
    Language,
    Override,
    PluginsConfig,
    Smells,
)
from .types import (
    Cpu,
    DownloadFileType,
    DriverBatchBy,
    DriverType,
    InvocationDirectoryType,
    IssueMode,
    OperatingSystem,
    OutputDestination,
    OutputFormat,
    Runtime,
    SuggestionMode,
    TargetType,
)

__all__ = [
    "ALL_WILDCARD",
    "CONFIG_FILENAME",
    "Configuration",
    "Coverage",
    "Cpu",
    "DownloadFileType",
    "DownloadMatrixEntry",
    "DriverBatchBy",
    "DriverDeclaration",
    "DriverType",
    "EnabledPlugin",
    "EnabledRuntimes",
    "ExtraPackage",
    "FileType",
    "Ignore",
    "InvocationDirectoryDef",
    "InvocationDirectoryType",
    "IssueMode",
    "Language",
    "OperatingSystem",
    "OutputDestination",
    "OutputFormat",
    "Override",
    "PluginDeclaration",
    "PluginEnvironment",
    "PluginFetch",
    "PluginsConfig",
    "Runtime",
    "Smells",
    "SourceDeclaration",
    "SuggestionMode",
    "TargetDef",
    "TargetType",
    "load_configuration",
    "parse_configuration",
]
