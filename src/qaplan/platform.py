# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Host identification and download matrix matching."""

from __future__ import annotations

import platform
from collections.abc import Sequence
from dataclasses import dataclass

from .config.definitions import DownloadMatrixEntry
from .config.types import Cpu, OperatingSystem, normalize_os
from .errors import NoMatchingArtifactError, UnsupportedHostError


@dataclass(frozen=True, slots=True)
class HostPlatform:
    """Operating system and CPU architecture a plan is resolved for."""

    os: OperatingSystem
    cpu: Cpu

    def __str__(self) -> str:
        return f"{self.os.value}/{self.cpu.value}"


def detect_host() -> HostPlatform:
    """Return the platform of the running interpreter.

    Raises:
        UnsupportedHostError: If the system or machine is not recognised.
    """

    system = platform.system()
    machine = platform.machine()
    try:
        host_os = normalize_os(system)
        host_cpu = Cpu.from_raw(machine)
    except ValueError as exc:
        raise UnsupportedHostError(system, machine) from exc
    if host_os.is_wildcard or host_cpu.is_wildcard:
        raise UnsupportedHostError(system, machine)
    return HostPlatform(os=host_os, cpu=host_cpu)


def _match_tiers(host_os: OperatingSystem, host_cpu: Cpu) -> tuple[tuple[OperatingSystem, Cpu], ...]:
    """Return the matrix keys to try for a host, most specific first."""

    return (
        (host_os, host_cpu),
        (host_os, Cpu.ANY),
        (OperatingSystem.ANY, host_cpu),
        (OperatingSystem.ANY, Cpu.ANY),
    )


def select_download(
    matrix: Sequence[DownloadMatrixEntry],
    host_os: OperatingSystem,
    host_cpu: Cpu,
    *,
    plugin: str,
) -> DownloadMatrixEntry:
    """Return the matrix row that serves ``host_os``/``host_cpu``.

    Tiers are tried in order: exact OS and CPU, exact OS with any CPU, any OS
    with exact CPU, then any/any. Within a tier the first declared row wins.

    Args:
        matrix: Download rows declared by the plugin.
        host_os: Operating system of the target host.
        host_cpu: CPU architecture of the target host.
        plugin: Plugin name used when reporting a failure.

    Returns:
        DownloadMatrixEntry: The selected row.

    Raises:
        NoMatchingArtifactError: If no tier matches.
    """

    for key in _match_tiers(host_os, host_cpu):
        for entry in matrix:
            if entry.key == key:
                return entry
    raise NoMatchingArtifactError(
        plugin,
        os=host_os.value,
        cpu=host_cpu.value,
        available=[(entry.os.value, entry.cpu.value) for entry in matrix],
    )


__all__ = ["HostPlatform", "detect_host", "select_download"]
