# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Enumerations shared by configuration and plugin definition models."""

from __future__ import annotations

from enum import Enum
from typing import Final


class OperatingSystem(str, Enum):
    """Operating systems addressable by a download matrix row."""

    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"
    ANY = "any"

    @property
    def is_wildcard(self) -> bool:
        """Return ``True`` for the ``any`` wildcard."""

        return self is OperatingSystem.ANY


class Cpu(str, Enum):
    """CPU architectures addressable by a download matrix row."""

    X86_64 = "x86_64"
    AARCH64 = "aarch64"
    ANY = "any"

    @property
    def is_wildcard(self) -> bool:
        """Return ``True`` for the ``any`` wildcard."""

        return self is Cpu.ANY

    @classmethod
    def from_raw(cls, raw: str) -> Cpu:
        """Return the member for ``raw`` honouring common architecture aliases.

        Args:
            raw: Architecture token such as ``"arm64"`` or ``"x86_64"``.

        Returns:
            Cpu: Matching enum member.

        Raises:
            ValueError: If ``raw`` names no known architecture.
        """

        token = raw.strip().lower()
        return cls(CPU_ALIASES.get(token, token))


CPU_ALIASES: Final[dict[str, str]] = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "arm64": "aarch64",
}

OS_ALIASES: Final[dict[str, str]] = {
    "darwin": "macos",
    "osx": "macos",
    "win32": "windows",
}


def normalize_os(raw: str) -> OperatingSystem:
    """Return the :class:`OperatingSystem` for ``raw`` honouring aliases."""

    token = raw.strip().lower()
    return OperatingSystem(OS_ALIASES.get(token, token))


class DownloadFileType(str, Enum):
    """Packaging formats a downloadable artifact may use."""

    EXECUTABLE = "executable"
    TARGZ = "targz"
    TARXZ = "tarxz"
    ZIP = "zip"
    GZ = "gz"


class Runtime(str, Enum):
    """Language runtimes a plugin may be installed into."""

    GO = "go"
    JAVA = "java"
    NODE = "node"
    PHP = "php"
    PYTHON = "python"
    RUBY = "ruby"
    RUST = "rust"


class DriverType(str, Enum):
    """Capability a driver provides."""

    LINTER = "linter"
    FORMATTER = "formatter"
    VALIDATOR = "validator"


class DriverBatchBy(str, Enum):
    """How targets are grouped into driver invocations.

    ``FILE`` runs one invocation per target, ``DIRECTORY`` one per invocation
    directory, ``PROJECT`` a single invocation from the project root, and
    ``NONE`` passes targets without grouping, chunked by ``max_batch``.
    """

    FILE = "file"
    DIRECTORY = "directory"
    PROJECT = "project"
    NONE = "none"


class TargetType(str, Enum):
    """Rule selecting what a driver receives as its target argument."""

    FILE = "file"
    PARENT = "parent"
    LITERAL = "literal"
    PARENT_WITH = "parent_with"


class InvocationDirectoryType(str, Enum):
    """Rule selecting the working directory of a driver invocation."""

    ROOT = "root"
    TARGET_DIRECTORY = "target_directory"
    ROOT_OR_PARENT_WITH = "root_or_parent_with"


class OutputDestination(str, Enum):
    """Where a driver writes its report."""

    STDOUT = "stdout"
    STDERR = "stderr"
    TMPFILE = "tmpfile"


class OutputFormat(str, Enum):
    """Report formats understood by the output parsers."""

    SARIF = "sarif"
    JSON = "json"
    REGEX = "regex"
    TEXT = "text"


class SuggestionMode(str, Enum):
    """When a plugin is suggested for a project."""

    CONFIG = "config"
    TARGETS = "targets"
    ALWAYS = "always"
    NEVER = "never"


class IssueMode(str, Enum):
    """How issues produced by a plugin are surfaced."""

    BLOCK = "block"
    COMMENT = "comment"
    MONITOR = "monitor"
    DISABLED = "disabled"


__all__ = [
    "CPU_ALIASES",
    "Cpu",
    "DownloadFileType",
    "DriverBatchBy",
    "DriverType",
    "InvocationDirectoryType",
    "IssueMode",
    "OS_ALIASES",
    "OperatingSystem",
    "OutputDestination",
    "OutputFormat",
    "Runtime",
    "SuggestionMode",
    "TargetType",
    "normalize_os",
]
