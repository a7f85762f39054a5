# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Local storage locations threaded through source construction."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

CACHE_DIR_ENV: Final[str] = "QAPLAN_CACHE_DIR"
SOURCES_DIRNAME: Final[str] = "sources"


def default_cache_dir(env: Mapping[str, str] | None = None) -> Path:
    """Return the cache directory, honouring ``QAPLAN_CACHE_DIR``."""

    environ = os.environ if env is None else env
    override = environ.get(CACHE_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".qaplan" / "cache"


@dataclass(frozen=True, slots=True)
class Library:
    """Working directory and cache locations used to place sources on disk."""

    root: Path
    cache_dir: Path

    @classmethod
    def for_root(cls, root: Path, *, env: Mapping[str, str] | None = None) -> Library:
        """Return a library anchored at ``root`` using the default cache directory."""

        return cls(root=root.resolve(), cache_dir=default_cache_dir(env))

    @property
    def sources_dir(self) -> Path:
        """Return the directory holding fetched repository and registry sources."""

        return self.cache_dir / SOURCES_DIRNAME


__all__ = ["CACHE_DIR_ENV", "Library", "default_cache_dir"]
