# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from textwrap import dedent

import pytest

from qaplan.sources.library import Library

PluginWriter = Callable[[Path, str, str], Path]


@pytest.fixture
def library(tmp_path: Path) -> Library:
    """Return a library rooted in a temporary project with an isolated cache."""

    root = tmp_path / "project"
    root.mkdir()
    return Library(root=root, cache_dir=tmp_path / "cache")


@pytest.fixture
def write_plugin() -> PluginWriter:
    """Return a helper writing ``plugins/linters/<name>/plugin.toml`` under a source root."""

    def _write(source_root: Path, name: str, body: str) -> Path:
        path = source_root / "plugins" / "linters" / name / "plugin.toml"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(body), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_config(library: Library) -> Callable[[str], Path]:
    """Return a helper writing ``qaplan.toml`` into the library root."""

    def _write(body: str) -> Path:
        path = library.root / "qaplan.toml"
        path.write_text(dedent(body), encoding="utf-8")
        return path

    return _write
