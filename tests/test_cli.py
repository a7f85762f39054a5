# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI tests driving the Typer application end to end."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

from qaplan.cli import app
from qaplan.sources.library import CACHE_DIR_ENV, Library

SHELLCHECK = """
[plugins.definitions.shellcheck]
latest_version = "0.10.0"

[[plugins.definitions.shellcheck.downloads]]
os = "linux"
cpu = "x86_64"
url = "https://example.test/shellcheck-${version}.tar.xz"
file_type = "tarxz"

[plugins.definitions.shellcheck.drivers.lint]
script = "shellcheck --format json1 ${target}"
"""

CONFIG = """
[sources.default]
directory = "qa-plugins"

[[source]]
name = "team"
directory = "team-plugins"

[[plugin]]
name = "shellcheck"
"""


@pytest.fixture
def project(
    library: Library,
    write_plugin: Callable[[Path, str, str], Path],
    write_config: Callable[[str], Path],
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    monkeypatch.setenv(CACHE_DIR_ENV, str(library.cache_dir))
    monkeypatch.setenv("COLUMNS", "240")
    write_plugin(library.root / "qa-plugins", "shellcheck", SHELLCHECK)
    return write_config(CONFIG)


def test_resolve_emits_json_plan(project: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["resolve", str(project), "--os", "linux", "--cpu", "amd64", "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["host"] == {"os": "linux", "cpu": "x86_64"}
    assert payload["default_source"] == "default"
    assert payload["sources"] == ["team", "default"]
    plugin = payload["plugins"][0]
    assert plugin["name"] == "shellcheck"
    assert plugin["version"] == "0.10.0"
    assert plugin["download_url"] == "https://example.test/shellcheck-0.10.0.tar.xz"
    assert plugin["drivers"]["lint"]["strategy"]["batch_by"] == "none"


def test_resolve_renders_table(project: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["resolve", str(project), "--os", "linux", "--cpu", "x86_64", "--no-emoji", "--no-color"],
    )

    assert result.exit_code == 0, result.output
    assert "shellcheck" in result.output
    assert "Resolved 1 plugin(s) for linux/x86_64" in result.output


def test_resolve_fails_without_matching_artifact(project: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["resolve", str(project), "--os", "windows", "--cpu", "x86_64", "--no-emoji"])

    assert result.exit_code == 1
    assert "shellcheck" in result.output


def test_resolve_rejects_unknown_host(project: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["resolve", str(project), "--os", "plan9", "--cpu", "x86_64"])

    assert result.exit_code != 0


def test_sources_lists_precedence_order(project: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["sources", str(project), "--no-emoji", "--no-color"])

    assert result.exit_code == 0, result.output
    assert result.output.index("team") < result.output.index("default")
    assert "(default)" in result.output


def test_missing_config_exits_with_error(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["sources", str(tmp_path / "missing.toml"), "--no-emoji"])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_check_version_reports_incompatibility(write_config: Callable[[str], Path]) -> None:
    path = write_config('cli_version = "99.0.0"\n')
    runner = CliRunner()

    result = runner.invoke(app, ["check-version", str(path), "--no-emoji"])

    assert result.exit_code == 1


def test_check_version_accepts_unpinned_config(write_config: Callable[[str], Path]) -> None:
    path = write_config("project_id = \"demo\"\n")
    runner = CliRunner()

    result = runner.invoke(app, ["check-version", str(path), "--no-emoji"])

    assert result.exit_code == 0, result.output
