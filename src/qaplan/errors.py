# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised while resolving a project configuration."""

from __future__ import annotations

from collections.abc import Iterable


class QaplanError(RuntimeError):
    """Base class for every error raised by the resolution engine."""


class InvalidVersionError(QaplanError):
    """Raised when a version string cannot be parsed."""

    def __init__(self, value: str, *, field: str) -> None:
        """Create the error for the unparsable ``value``.

        Args:
            value: Raw version text supplied by the caller.
            field: Name of the setting that carried the value.
        """

        super().__init__(f"{field}: '{value}' is not a valid semantic version")
        self.value = value
        self.field = field


class UnsupportedHostError(QaplanError):
    """Raised when the executing host cannot be mapped onto a known platform."""

    def __init__(self, system: str, machine: str) -> None:
        super().__init__(f"Unsupported host platform: system={system!r} machine={machine!r}")
        self.system = system
        self.machine = machine


class ConfigLoadError(QaplanError):
    """Raised when a configuration document cannot be read or validated."""


class SourceError(QaplanError):
    """Base class for failures building the source catalog."""


class SourceResolutionError(SourceError):
    """Raised when a source declaration is structurally invalid or unreadable."""

    def __init__(self, source: str, reason: str) -> None:
        """Create the error for ``source``.

        Args:
            source: Display name of the offending source declaration.
            reason: Human-readable explanation of the failure.
        """

        super().__init__(f"Source '{source}': {reason}")
        self.source = source
        self.reason = reason


class MissingDefaultSourceError(SourceError):
    """Raised when neither the source list nor the source mapping names ``default``."""

    def __init__(self, config_dump: str) -> None:
        super().__init__(f"Could not find `sources.default` key in project config: {config_dump}")
        self.config_dump = config_dump


class PluginResolutionError(QaplanError):
    """Base class for failures resolving a single enabled plugin."""

    def __init__(self, plugin: str, message: str) -> None:
        super().__init__(message)
        self.plugin = plugin


class UnknownPluginError(PluginResolutionError):
    """Raised when no catalog source defines the requested plugin."""

    def __init__(self, plugin: str) -> None:
        super().__init__(plugin, f"Unknown plugin '{plugin}': no configured source defines it")


class VersionNotAvailableError(PluginResolutionError):
    """Raised when a pinned plugin version is not offered by its declaration."""

    def __init__(self, plugin: str, requested: str, available: Iterable[str]) -> None:
        """Create the error for an unavailable pin.

        Args:
            plugin: Name of the plugin being resolved.
            requested: Version pinned by the enabled plugin entry.
            available: Versions the plugin declaration offers.
        """

        self.requested = requested
        self.available: tuple[str, ...] = tuple(available)
        offered = ", ".join(self.available) or "none"
        super().__init__(
            plugin,
            f"Plugin '{plugin}' has no version '{requested}' (available: {offered})",
        )


class NoMatchingArtifactError(PluginResolutionError):
    """Raised when no download matrix row matches the host platform."""

    def __init__(
        self,
        plugin: str,
        *,
        os: str,
        cpu: str,
        available: Iterable[tuple[str, str]],
    ) -> None:
        """Create the error naming the host and every matrix key.

        Args:
            plugin: Name of the plugin being resolved.
            os: Host operating system value.
            cpu: Host CPU architecture value.
            available: ``(os, cpu)`` pairs present in the plugin's matrix.
        """

        self.os = os
        self.cpu = cpu
        self.available: tuple[tuple[str, str], ...] = tuple(available)
        pairs = ", ".join(f"{entry_os}/{entry_cpu}" for entry_os, entry_cpu in self.available) or "none"
        super().__init__(
            plugin,
            f"Plugin '{plugin}' has no download for {os}/{cpu} (available: {pairs})",
        )


class ComposeError(QaplanError):
    """Base class for failures surfaced by configuration composition."""


class IncompatibleVersionError(ComposeError):
    """Raised when the running version cannot honour the declared ``cli_version``."""

    def __init__(self, declared: str, running: str) -> None:
        super().__init__(
            f"qaplan v{running} is incompatible with the cli_version from the project config "
            f"({declared}). Please update qaplan.",
        )
        self.declared = declared
        self.running = running


class SourceCompositionError(ComposeError):
    """Raised when the source catalog cannot be built during composition."""

    def __init__(self, cause: SourceError) -> None:
        super().__init__(str(cause))
        self.cause = cause


class PluginCompositionError(ComposeError):
    """Raised when an enabled plugin fails to resolve during composition."""

    def __init__(self, plugin_name: str, cause: QaplanError) -> None:
        """Create the error attaching the enclosing plugin name.

        Args:
            plugin_name: Name of the enabled plugin entry that failed.
            cause: Underlying resolution error.
        """

        super().__init__(f"Failed to resolve plugin '{plugin_name}': {cause}")
        self.plugin_name = plugin_name
        self.cause = cause


__all__ = [
    "ComposeError",
    "ConfigLoadError",
    "IncompatibleVersionError",
    "InvalidVersionError",
    "MissingDefaultSourceError",
    "NoMatchingArtifactError",
    "PluginCompositionError",
    "PluginResolutionError",
    "QaplanError",
    "SourceCompositionError",
    "SourceError",
    "SourceResolutionError",
    "UnknownPluginError",
    "UnsupportedHostError",
    "VersionNotAvailableError",
]
