# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for resolving enabled plugins against the source catalog."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import pytest

from qaplan.config.definitions import (
    DownloadMatrixEntry,
    DriverDeclaration,
    EnabledPlugin,
    ExtraPackage,
    PluginDeclaration,
)
from qaplan.config.types import Cpu, DriverBatchBy, OperatingSystem
from qaplan.errors import NoMatchingArtifactError, UnknownPluginError, VersionNotAvailableError
from qaplan.resolution.plugins import merge_extra_packages, render_download_url, resolve_plugin
from qaplan.sources.catalog import SourceCatalog
from qaplan.sources.models import LocalSource, Source


class StaticReader:
    """Definition reader serving in-memory declarations keyed by source label."""

    def __init__(self, definitions: Mapping[str, Mapping[str, PluginDeclaration]]) -> None:
        self._definitions = definitions

    def definitions(self, source: Source) -> Mapping[str, PluginDeclaration]:
        return self._definitions.get(source.label, {})


def _catalog(**per_source: list[PluginDeclaration]) -> SourceCatalog:
    sources = tuple(LocalSource(name=name, root=Path(name)) for name in per_source)
    reader = StaticReader({name: {decl.name: decl for decl in decls} for name, decls in per_source.items()})
    return SourceCatalog(sources=sources, reader=reader)


SHELLCHECK = PluginDeclaration(
    name="shellcheck",
    latest_version="0.10.0",
    known_good_version="0.9.0",
    versions=("0.8.0", "0.9.0", "0.10.0"),
    downloads=(
        DownloadMatrixEntry(
            os="linux",
            cpu="x86_64",
            url="https://example.test/shellcheck-v${version}.${os}.${cpu}.tar.xz",
            file_type="tarxz",
        ),
        DownloadMatrixEntry(os="any", cpu="any", url="https://example.test/shellcheck-${version}"),
    ),
    extra_packages=(ExtraPackage(name="base"),),
    drivers={
        "lint": DriverDeclaration(script="shellcheck --format=sarif ${target}"),
        "format": DriverDeclaration(driver_type="formatter", script="shfmt -w ${target}", batch=False),
    },
)


def test_resolves_declared_plugin_for_host() -> None:
    catalog = _catalog(default=[SHELLCHECK])

    resolved = resolve_plugin(EnabledPlugin(name="shellcheck"), catalog, OperatingSystem.LINUX, Cpu.X86_64)

    assert resolved.name == "shellcheck"
    assert resolved.source == "default"
    assert resolved.version == "0.9.0"
    assert resolved.download is not None
    assert resolved.download.key == (OperatingSystem.LINUX, Cpu.X86_64)
    assert resolved.download_url == "https://example.test/shellcheck-v0.9.0.linux.x86_64.tar.xz"
    assert set(resolved.drivers) == {"lint", "format"}
    assert resolved.drivers["lint"] == SHELLCHECK.drivers["lint"]
    assert resolved.strategies["lint"].batch_by is DriverBatchBy.NONE
    assert resolved.strategies["format"].batch_by is DriverBatchBy.FILE


def test_unknown_plugin() -> None:
    with pytest.raises(UnknownPluginError) as excinfo:
        resolve_plugin(EnabledPlugin(name="ghost"), _catalog(default=[SHELLCHECK]), OperatingSystem.LINUX, Cpu.X86_64)

    assert excinfo.value.plugin == "ghost"


def test_version_pin_must_be_available() -> None:
    enabled = EnabledPlugin(name="shellcheck", version="0.7.0")

    with pytest.raises(VersionNotAvailableError) as excinfo:
        resolve_plugin(enabled, _catalog(default=[SHELLCHECK]), OperatingSystem.LINUX, Cpu.X86_64)

    assert excinfo.value.requested == "0.7.0"
    assert excinfo.value.available == ("0.8.0", "0.9.0", "0.10.0")


def test_version_pin_is_applied() -> None:
    enabled = EnabledPlugin(name="shellcheck", version="0.8.0")

    resolved = resolve_plugin(enabled, _catalog(default=[SHELLCHECK]), OperatingSystem.MACOS, Cpu.AARCH64)

    assert resolved.version == "0.8.0"
    assert resolved.download_url == "https://example.test/shellcheck-0.8.0"


def test_single_version_declaration_requires_exact_pin() -> None:
    declaration = PluginDeclaration(name="hadolint", latest_version="2.12.0")
    catalog = _catalog(default=[declaration])

    assert resolve_plugin(EnabledPlugin(name="hadolint", version="2.12.0"), catalog, OperatingSystem.LINUX, Cpu.X86_64)
    with pytest.raises(VersionNotAvailableError):
        resolve_plugin(EnabledPlugin(name="hadolint", version="2.11.0"), catalog, OperatingSystem.LINUX, Cpu.X86_64)


def test_unversioned_declaration_passes_pin_through() -> None:
    declaration = PluginDeclaration(name="eslint", runtime="node", package="eslint")

    resolved = resolve_plugin(
        EnabledPlugin(name="eslint", version="9.1.0"),
        _catalog(default=[declaration]),
        OperatingSystem.LINUX,
        Cpu.X86_64,
    )

    assert resolved.version == "9.1.0"
    assert resolved.download is None
    assert resolved.download_url is None


def test_no_matching_artifact_propagates_unchanged() -> None:
    declaration = PluginDeclaration(
        name="winonly",
        downloads=(DownloadMatrixEntry(os="windows", cpu="x86_64", url="https://example.test/win.zip"),),
    )

    with pytest.raises(NoMatchingArtifactError) as excinfo:
        resolve_plugin(EnabledPlugin(name="winonly"), _catalog(default=[declaration]), OperatingSystem.LINUX, Cpu.X86_64)

    assert excinfo.value.plugin == "winonly"


def test_extra_packages_are_additive() -> None:
    enabled = EnabledPlugin(
        name="shellcheck",
        extra_packages=(ExtraPackage(name="plugin-a", version="1.0"), ExtraPackage(name="base")),
    )

    resolved = resolve_plugin(enabled, _catalog(default=[SHELLCHECK]), OperatingSystem.LINUX, Cpu.X86_64)

    assert resolved.extra_packages == (ExtraPackage(name="base"), ExtraPackage(name="plugin-a", version="1.0"))


def test_earlier_source_shadows_later_one() -> None:
    shadow = SHELLCHECK.model_copy(update={"description": "shadow"})
    catalog = _catalog(project=[shadow], default=[SHELLCHECK])

    resolved = resolve_plugin(EnabledPlugin(name="shellcheck"), catalog, OperatingSystem.LINUX, Cpu.X86_64)

    assert resolved.source == "project"
    assert resolved.declaration.description == "shadow"


def test_merge_extra_packages_keeps_declared_first() -> None:
    declared = (ExtraPackage(name="a"),)
    enabled = (ExtraPackage(name="b"), ExtraPackage(name="a", version="2"))

    assert merge_extra_packages(declared, enabled) == (
        ExtraPackage(name="a"),
        ExtraPackage(name="b"),
        ExtraPackage(name="a", version="2"),
    )


def test_render_download_url_without_version() -> None:
    url = render_download_url("https://x/${version}/${os}", version=None, host_os=OperatingSystem.LINUX, host_cpu=Cpu.X86_64)

    assert url == "https://x/${version}/linux"
