# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Plugin, driver and source declaration models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

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
    normalize_os,
)

DEFAULT_MAX_BATCH = 64


class FrozenModel(BaseModel):
    """Immutable base model rejecting unknown keys."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class SourceDeclaration(FrozenModel):
    """Where plugin definitions live: a directory, a repository ref or a registry."""

    name: str | None = None
    directory: str | None = None
    repository: str | None = None
    tag: str | None = None
    branch: str | None = None
    registry: str | None = None

    @property
    def display_name(self) -> str:
        """Return a label identifying the declaration in diagnostics."""

        if self.name:
            return self.name
        if self.directory is not None:
            return self.directory
        return self.repository or self.registry or "<unnamed>"


class ExtraPackage(FrozenModel):
    """Additional package installed alongside a plugin."""

    name: str
    version: str | None = None


class PluginEnvironment(FrozenModel):
    """Environment variable made available to every driver of a plugin."""

    name: str
    value: tuple[str, ...] = ()


class PluginFetch(FrozenModel):
    """Auxiliary file fetched into the plugin's install directory."""

    url: str
    path: str


class DownloadMatrixEntry(FrozenModel):
    """One ``(os, cpu)`` row of a plugin's download matrix."""

    os: OperatingSystem = OperatingSystem.ANY
    cpu: Cpu = Cpu.ANY
    url: str
    file_type: DownloadFileType = DownloadFileType.EXECUTABLE
    package_files: tuple[str, ...] = ()
    binary_name: str | None = None
    strip_components: int = 0

    @field_validator("os", mode="before")
    @classmethod
    def _normalise_os(cls, value: object) -> object:
        return normalize_os(value) if isinstance(value, str) else value

    @field_validator("cpu", mode="before")
    @classmethod
    def _normalise_cpu(cls, value: object) -> object:
        return Cpu.from_raw(value) if isinstance(value, str) else value

    @property
    def key(self) -> tuple[OperatingSystem, Cpu]:
        """Return the ``(os, cpu)`` pair identifying the row."""

        return self.os, self.cpu

    @property
    def is_concrete(self) -> bool:
        """Return ``True`` when neither axis is a wildcard."""

        return not (self.os.is_wildcard or self.cpu.is_wildcard)


class TargetDef(FrozenModel):
    """Rule selecting the argument passed to a driver."""

    type: TargetType = TargetType.FILE
    path: str | None = None


class InvocationDirectoryDef(FrozenModel):
    """Rule selecting the working directory of a driver invocation."""

    type: InvocationDirectoryType = InvocationDirectoryType.ROOT
    path: str | None = None


class DriverDeclaration(FrozenModel):
    """How one capability of a plugin is invoked."""

    driver_type: DriverType = DriverType.LINTER
    script: str
    batch: bool = True
    batch_by: DriverBatchBy | None = None
    max_batch: int = Field(default=DEFAULT_MAX_BATCH, ge=1)
    target: TargetDef = Field(default_factory=TargetDef)
    invocation_directory: InvocationDirectoryDef = Field(default_factory=InvocationDirectoryDef)
    output: OutputDestination = OutputDestination.STDOUT
    output_format: OutputFormat = OutputFormat.SARIF
    suggested: SuggestionMode = SuggestionMode.NEVER
    issue_mode: IssueMode = IssueMode.BLOCK
    success_codes: tuple[int, ...] = (0,)
    error_codes: tuple[int, ...] = ()
    cache_results: bool = False


class PluginDeclaration(FrozenModel):
    """Static description of a plugin as published by a source."""

    name: str
    description: str | None = None
    runtime: Runtime | None = None
    package: str | None = None
    latest_version: str | None = None
    known_good_version: str | None = None
    versions: tuple[str, ...] = ()
    downloads: tuple[DownloadMatrixEntry, ...] = ()
    environment: tuple[PluginEnvironment, ...] = ()
    fetch: tuple[PluginFetch, ...] = ()
    extra_packages: tuple[ExtraPackage, ...] = ()
    drivers: dict[str, DriverDeclaration] = Field(default_factory=dict)
    config_files: tuple[str, ...] = ()
    file_types: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _check_download_matrix(self) -> PluginDeclaration:
        seen: set[tuple[OperatingSystem, Cpu]] = set()
        for entry in self.downloads:
            if not entry.is_concrete:
                continue
            if entry.key in seen:
                raise ValueError(
                    f"plugin '{self.name}' declares more than one download for {entry.os.value}/{entry.cpu.value}",
                )
            seen.add(entry.key)
        return self

    def available_versions(self) -> tuple[str, ...]:
        """Return every version the declaration offers, without duplicates."""

        candidates = (*self.versions, self.known_good_version, self.latest_version)
        return tuple(dict.fromkeys(version for version in candidates if version))

    def default_version(self) -> str | None:
        """Return the version used when the enabled plugin carries no pin."""

        if self.known_good_version:
            return self.known_good_version
        if self.latest_version:
            return self.latest_version
        return self.versions[-1] if self.versions else None


class EnabledPlugin(FrozenModel):
    """A user's opt-in to a plugin published by one of the sources."""

    name: str
    version: str | None = None
    extra_packages: tuple[ExtraPackage, ...] = ()
    prefix: str | None = None
    mode: IssueMode | None = None
    package_file: str | None = None


__all__ = [
    "DEFAULT_MAX_BATCH",
    "DownloadMatrixEntry",
    "DriverDeclaration",
    "EnabledPlugin",
    "ExtraPackage",
    "FrozenModel",
    "InvocationDirectoryDef",
    "PluginDeclaration",
    "PluginEnvironment",
    "PluginFetch",
    "SourceDeclaration",
    "TargetDef",
]
