# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Ordered aggregation of the sources named by a project configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from ..config.definitions import PluginDeclaration, SourceDeclaration
from ..config.models import Configuration
from ..errors import MissingDefaultSourceError
from .library import Library
from .models import Source
from .reader import DefinitionReader, TomlDefinitionReader
from .resolver import resolve_source

LOGGER = logging.getLogger(__name__)

DEFAULT_SOURCE_NAME = "default"


def _keyed(key: str, decl: SourceDeclaration) -> SourceDeclaration:
    """Name an unnamed ``sources`` mapping entry after its key."""

    return decl if decl.name is not None else decl.model_copy(update={"name": key})


def default_source(config: Configuration, library: Library) -> Source:
    """Return the source named ``default``.

    The explicit ``source`` list is searched first and the first entry named
    ``default`` is returned without consulting the ``sources`` mapping. Only
    when the list has no such entry is ``sources["default"]`` used.

    Args:
        config: Project configuration.
        library: Storage locations used to place the source.

    Returns:
        Source: Resolved default source.

    Raises:
        MissingDefaultSourceError: If neither location names a default source.
        SourceResolutionError: If the default declaration is invalid.
    """

    for decl in config.source:
        if decl.name == DEFAULT_SOURCE_NAME:
            return resolve_source(decl, library)

    decl = config.sources.get(DEFAULT_SOURCE_NAME)
    if decl is None:
        raise MissingDefaultSourceError(config.debug_dump())
    return resolve_source(_keyed(DEFAULT_SOURCE_NAME, decl), library)


@dataclass(slots=True)
class SourceCatalog:
    """Sources in precedence order; earlier sources shadow later ones."""

    sources: tuple[Source, ...]
    reader: DefinitionReader = field(default_factory=TomlDefinitionReader, repr=False, compare=False)
    config: Configuration | None = field(default=None, repr=False, compare=False)
    library: Library | None = field(default=None, repr=False, compare=False)

    @classmethod
    def build(
        cls,
        config: Configuration,
        library: Library,
        *,
        reader: DefinitionReader | None = None,
    ) -> SourceCatalog:
        """Resolve every declared source into a catalog.

        Entries of the explicit ``source`` list come first in declaration
        order, followed by the values of the ``sources`` mapping. Unnamed
        mapping entries take their key as name.

        Args:
            config: Project configuration.
            library: Storage locations used to place sources.
            reader: Definition reader; defaults to :class:`TomlDefinitionReader`.

        Returns:
            SourceCatalog: Catalog holding every resolved source.

        Raises:
            SourceResolutionError: If any declaration is invalid.
        """

        resolved = [resolve_source(decl, library) for decl in config.source]
        resolved.extend(resolve_source(_keyed(key, decl), library) for key, decl in config.sources.items())
        LOGGER.debug("built source catalog: %s", ", ".join(source.label for source in resolved) or "<empty>")
        return cls(
            sources=tuple(resolved),
            reader=reader or TomlDefinitionReader(),
            config=config,
            library=library,
        )

    def __iter__(self) -> Iterator[Source]:
        return iter(self.sources)

    def __len__(self) -> int:
        return len(self.sources)

    def default_source(self) -> Source:
        """Return the configuration's ``default`` source (see :func:`default_source`)."""

        if self.config is None or self.library is None:
            raise MissingDefaultSourceError("<catalog built without a configuration>")
        return default_source(self.config, self.library)

    def load_definitions(self) -> None:
        """Read the definitions of every source so broken sources fail early.

        Raises:
            SourceResolutionError: If any source's definitions cannot be read.
        """

        for source in self.sources:
            self.reader.definitions(source)

    def locate_plugin(self, name: str) -> tuple[Source, PluginDeclaration] | None:
        """Return the first source defining ``name`` together with its declaration."""

        for source in self.sources:
            declaration = self.reader.definitions(source).get(name)
            if declaration is not None:
                LOGGER.debug("plugin %s found in source %s", name, source.label)
                return source, declaration
        LOGGER.debug("plugin %s not found in any source", name)
        return None

    def find_plugin(self, name: str) -> PluginDeclaration | None:
        """Return the declaration of ``name`` from the first source defining it."""

        located = self.locate_plugin(name)
        return located[1] if located is not None else None

    def plugin_names(self) -> tuple[str, ...]:
        """Return every plugin name visible through the catalog, in precedence order."""

        names: dict[str, None] = {}
        for source in self.sources:
            names.update(dict.fromkeys(self.reader.definitions(source)))
        return tuple(names)


__all__ = ["DEFAULT_SOURCE_NAME", "SourceCatalog", "default_source"]
