# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate source declarations into source handles without touching disk."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Final

from ..config.definitions import SourceDeclaration
from ..errors import SourceResolutionError
from .library import Library
from .models import LocalSource, RefKind, RegistrySource, RepositorySource, Source

REGISTRY_DIRNAME: Final[str] = "registry"
_SLUG_RE: Final[re.Pattern[str]] = re.compile(r"[^A-Za-z0-9._-]+")


def slugify(value: str) -> str:
    """Return ``value`` reduced to a filesystem-safe directory name."""

    slug = _SLUG_RE.sub("-", value.strip()).strip("-.")
    return slug or "source"


def _repository_ref(decl: SourceDeclaration) -> tuple[str, RefKind]:
    label = decl.display_name
    if decl.tag is not None and decl.branch is not None:
        raise SourceResolutionError(label, "repository sources accept either 'tag' or 'branch', not both")
    if decl.tag:
        return decl.tag, "tag"
    if decl.branch:
        return decl.branch, "branch"
    raise SourceResolutionError(label, "repository sources require a 'tag' or 'branch'")


def resolve_source(decl: SourceDeclaration, library: Library) -> Source:
    """Return the source handle described by ``decl``.

    Args:
        decl: Declaration taken from the project configuration.
        library: Storage locations used to place repository and registry sources.

    Returns:
        Source: Local, repository or registry handle.

    Raises:
        SourceResolutionError: If the declaration is structurally invalid.
    """

    label = decl.display_name
    kinds = [
        kind
        for kind, value in (
            ("directory", decl.directory),
            ("repository", decl.repository),
            ("registry", decl.registry),
        )
        if value is not None
    ]
    if not kinds:
        raise SourceResolutionError(label, "expected one of 'directory', 'repository' or 'registry'")
    if len(kinds) > 1:
        raise SourceResolutionError(label, f"declares more than one location: {', '.join(kinds)}")

    if decl.directory is not None:
        if not decl.directory.strip():
            raise SourceResolutionError(label, "'directory' must not be empty")
        if decl.tag is not None or decl.branch is not None:
            raise SourceResolutionError(label, "'tag' and 'branch' only apply to repository sources")
        directory = Path(decl.directory).expanduser()
        root = directory if directory.is_absolute() else library.root / directory
        return LocalSource(name=decl.name, root=root)

    if decl.repository is not None:
        if not decl.repository.strip():
            raise SourceResolutionError(label, "'repository' must not be empty")
        ref, ref_kind = _repository_ref(decl)
        root = library.sources_dir / slugify(decl.repository) / slugify(ref)
        return RepositorySource(
            name=decl.name,
            repository=decl.repository,
            ref=ref,
            ref_kind=ref_kind,
            root=root,
        )

    registry = decl.registry or ""
    if not registry.strip():
        raise SourceResolutionError(label, "'registry' must not be empty")
    if decl.tag is not None or decl.branch is not None:
        raise SourceResolutionError(label, "'tag' and 'branch' only apply to repository sources")
    return RegistrySource(
        name=decl.name,
        registry=registry,
        root=library.sources_dir / REGISTRY_DIRNAME / slugify(registry),
    )


__all__ = ["resolve_source", "slugify"]
