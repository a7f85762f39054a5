# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolved source handles.

A source is one of three closed variants. Each knows where its plugin
definitions live on disk once materialised; reading them is left to a
definition reader.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, TypeAlias

SourceKind: TypeAlias = Literal["local", "repository", "registry"]
RefKind: TypeAlias = Literal["tag", "branch"]


@dataclass(frozen=True, slots=True)
class LocalSource:
    """Definitions read directly from a project directory."""

    name: str | None
    root: Path
    kind: SourceKind = "local"

    @property
    def label(self) -> str:
        return self.name or str(self.root)


@dataclass(frozen=True, slots=True)
class RepositorySource:
    """Definitions published in a repository at a pinned tag or branch."""

    name: str | None
    repository: str
    ref: str
    ref_kind: RefKind
    root: Path
    kind: SourceKind = "repository"

    @property
    def label(self) -> str:
        return self.name or f"{self.repository}@{self.ref}"


@dataclass(frozen=True, slots=True)
class RegistrySource:
    """Definitions published under a registry name."""

    name: str | None
    registry: str
    root: Path
    kind: SourceKind = "registry"

    @property
    def label(self) -> str:
        return self.name or self.registry


Source: TypeAlias = LocalSource | RepositorySource | RegistrySource

__all__ = ["LocalSource", "RefKind", "RegistrySource", "RepositorySource", "Source", "SourceKind"]
