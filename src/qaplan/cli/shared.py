# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, host options)."""

from __future__ import annotations

from dataclasses import dataclass

import typer
from rich.console import Console

from ..config.types import Cpu, OperatingSystem, normalize_os
from ..logging import fail as core_fail
from ..logging import ok as core_ok
from ..logging import warn as core_warn
from ..platform import HostPlatform, detect_host


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    console: Console
    use_emoji: bool
    use_color: bool

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences."""

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences."""

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        """Log a success message honouring emoji preferences."""

        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)


def build_cli_logger(*, emoji: bool, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` bound to a dedicated Rich console."""

    console = Console(no_color=no_color, highlight=False, soft_wrap=True)
    return CLILogger(console=console, use_emoji=emoji, use_color=not no_color)


def resolve_host(os_name: str | None, cpu_name: str | None) -> HostPlatform:
    """Return the host selected by ``--os``/``--cpu``, detecting missing parts.

    Raises:
        typer.BadParameter: If either value names no known platform or is a wildcard.
    """

    detected: HostPlatform | None = None
    if os_name is None or cpu_name is None:
        detected = detect_host()
    try:
        host_os = normalize_os(os_name) if os_name is not None else detected.os  # type: ignore[union-attr]
    except ValueError as exc:
        raise typer.BadParameter(f"unknown operating system '{os_name}'", param_hint="--os") from exc
    try:
        host_cpu = Cpu.from_raw(cpu_name) if cpu_name is not None else detected.cpu  # type: ignore[union-attr]
    except ValueError as exc:
        raise typer.BadParameter(f"unknown CPU architecture '{cpu_name}'", param_hint="--cpu") from exc
    if host_os is OperatingSystem.ANY or host_cpu is Cpu.ANY:
        raise typer.BadParameter("the host platform must be concrete, not 'any'")
    return HostPlatform(os=host_os, cpu=host_cpu)


__all__ = ["CLIError", "CLILogger", "build_cli_logger", "resolve_host"]
