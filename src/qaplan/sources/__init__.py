# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Source declarations, handles and the ordered source catalog."""

from __future__ import annotations

from .catalog import DEFAULT_SOURCE_NAME, SourceCatalog, default_source
from .library import CACHE_DIR_ENV, Library, default_cache_dir
from .models import LocalSource, RegistrySource, RepositorySource, Source
from .reader import DefinitionReader, TomlDefinitionReader
from .resolver import resolve_source

__all__ = [
    "CACHE_DIR_ENV",
    "DEFAULT_SOURCE_NAME",
    "DefinitionReader",
    "Library",
    "LocalSource",
    "RegistrySource",
    "RepositorySource",
    "Source",
    "SourceCatalog",
    "TomlDefinitionReader",
    "default_cache_dir",
    "default_source",
    "resolve_source",
]
