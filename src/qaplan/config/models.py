# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project configuration models consumed by the resolution engine."""

from __future__ import annotations

from collections.abc import Callable
from typing import Final, TypeVar

from pydantic import Field

from .definitions import EnabledPlugin, FrozenModel, SourceDeclaration
from .types import IssueMode, Runtime

ALL_WILDCARD: Final[str] = "ALL"

T = TypeVar("T")


class Ignore(FrozenModel):
    """Suppress issues matching the given selectors."""

    file_patterns: tuple[str, ...] = ()
    plugins: tuple[str, ...] = ()
    rules: tuple[str, ...] = ()
    levels: tuple[str, ...] = ()


class Override(FrozenModel):
    """Adjust the handling of issues matching the given selectors."""

    file_patterns: tuple[str, ...] = ()
    plugins: tuple[str, ...] = ()
    rules: tuple[str, ...] = ()
    levels: tuple[str, ...] = ()
    mode: IssueMode | None = None
    category: str | None = None


class FileType(FrozenModel):
    """Globs and interpreters identifying a named file type."""

    globs: tuple[str, ...] = ()
    interpreters: tuple[str, ...] = ()


class Coverage(FrozenModel):
    """Coverage report discovery settings."""

    paths: tuple[str, ...] = ()
    ignores: tuple[str, ...] = ()
    skip_missing_files: bool = False


class SmellCheck(FrozenModel):
    """Threshold for a single code smell check."""

    enabled: bool = True
    threshold: int | None = None


class Smells(FrozenModel):
    """Code smell policy."""

    mode: IssueMode | None = None
    boolean_logic: SmellCheck | None = None
    file_complexity: SmellCheck | None = None
    function_complexity: SmellCheck | None = None
    function_parameters: SmellCheck | None = None
    nested_control_flow: SmellCheck | None = None
    return_statements: SmellCheck | None = None
    identical_code: SmellCheck | None = None
    similar_code: SmellCheck | None = None


class Language(FrozenModel):
    """Per-language settings."""

    test_syntax_patterns: tuple[str, ...] = ()
    smells: Smells | None = None


class EnabledRuntimes(FrozenModel):
    """Runtime versions the project opts into."""

    enabled: dict[Runtime, str] = Field(default_factory=dict)


class DownloadsConfig(FrozenModel):
    """Cache policy handed through to the artifact fetcher."""

    cache_dir_name: str | None = None
    allow_prereleases: bool = False


class PluginsConfig(FrozenModel):
    """Project-wide plugin settings."""

    downloads: DownloadsConfig = Field(default_factory=DownloadsConfig)


class Configuration(FrozenModel):
    """Fully parsed project settings.

    ``source`` is the ordered list of source declarations and ``sources`` the
    mapping of named ones. Exactly one resolvable source must be named
    ``default``; the list is consulted before the mapping.
    """

    config_version: str | None = None
    cli_version: str | None = None
    project_id: str | None = None
    ignore: tuple[Ignore, ...] = ()
    overrides: tuple[Override, ...] = Field(default=(), alias="override")
    file_types: dict[str, FileType] = Field(default_factory=dict)
    test_patterns: tuple[str, ...] = ()
    coverage: Coverage = Field(default_factory=Coverage)
    runtimes: EnabledRuntimes = Field(default_factory=EnabledRuntimes)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
    sources: dict[str, SourceDeclaration] = Field(default_factory=dict)
    language: dict[str, Language] = Field(default_factory=dict)
    exclude_patterns: tuple[str, ...] = ()
    ignore_patterns: tuple[str, ...] = Field(default=(), exclude=True)
    plugin: tuple[EnabledPlugin, ...] = ()
    smells: Smells | None = None
    source: tuple[SourceDeclaration, ...] = ()

    def language_map(self, func: Callable[[Language], T]) -> dict[str, T]:
        """Return ``func`` applied to every language settings entry, keyed by language."""

        return {name: func(settings) for name, settings in self.language.items()}

    def debug_dump(self) -> str:
        """Return a pretty-printed dump used in diagnostics."""

        return self.model_dump_json(indent=2, by_alias=True, exclude_defaults=True)


__all__ = [
    "ALL_WILDCARD",
    "Configuration",
    "Coverage",
    "DownloadsConfig",
    "EnabledRuntimes",
    "FileType",
    "Ignore",
    "Language",
    "Override",
    "PluginsConfig",
    "SmellCheck",
    "Smells",
]
