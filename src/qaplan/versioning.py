# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Compatibility gate between a config's ``cli_version`` and the running binary."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from semver import Version

from .errors import IncompatibleVersionError, InvalidVersionError

LOGGER = logging.getLogger(__name__)

VersionInput = Version | str


def parse_version(value: VersionInput, *, field: str = "version") -> Version:
    """Return ``value`` as a semantic version.

    Only full ``MAJOR.MINOR.PATCH`` versions with optional pre-release and
    build metadata are accepted.

    Args:
        value: Version instance or raw version text.
        field: Setting name used in error messages.

    Returns:
        Version: Parsed version.

    Raises:
        InvalidVersionError: If ``value`` is not a valid semantic version.
    """

    if isinstance(value, Version):
        return value
    try:
        return Version.parse(value)
    except (TypeError, ValueError) as exc:
        raise InvalidVersionError(str(value), field=field) from exc


@dataclass(frozen=True, slots=True)
class CompatibilityVerdict:
    """Outcome of comparing a declared CLI version against the running one."""

    compatible: bool
    declared: Version | None
    running: Version
    reason: str

    @property
    def message(self) -> str:
        """Return a human-readable rendering of the verdict."""

        if self.declared is None:
            return f"qaplan v{self.running}: no cli_version declared"
        state = "compatible" if self.compatible else "incompatible"
        return f"qaplan v{self.running} is {state} with cli_version {self.declared} ({self.reason})"


def check_compatibility(declared: VersionInput | None, running: VersionInput) -> CompatibilityVerdict:
    """Compare ``declared`` against ``running`` and return the verdict.

    Major versions are a hard boundary in both directions. On the ``0.x``
    track a config written for a newer minor than the running one is rejected,
    while a newer running minor is accepted. Pre-release and build metadata do
    not take part in the comparison.

    Args:
        declared: ``cli_version`` from the project config, if any.
        running: Version of the executing tool.

    Returns:
        CompatibilityVerdict: Verdict carrying both versions for diagnostics.
    """

    running_version = parse_version(running, field="running_version")
    if declared is None:
        return CompatibilityVerdict(True, None, running_version, "no constraint declared")
    declared_version = parse_version(declared, field="cli_version")
    if declared_version.major != running_version.major:
        return CompatibilityVerdict(False, declared_version, running_version, "major version differs")
    if declared_version.major == 0 and declared_version.minor > running_version.minor:
        return CompatibilityVerdict(
            False,
            declared_version,
            running_version,
            "pre-1.0 config requires a newer minor version",
        )
    return CompatibilityVerdict(True, declared_version, running_version, "same major version")


def enforce_compatibility(verdict: CompatibilityVerdict, *, development: bool = False) -> None:
    """Apply the side-effect policy for ``verdict``.

    Args:
        verdict: Result of :func:`check_compatibility`.
        development: ``True`` for development builds, which only warn about an
            incompatible ``cli_version``.

    Raises:
        IncompatibleVersionError: If the verdict is incompatible in a release build.
    """

    if verdict.compatible:
        return
    if development:
        LOGGER.warning(
            "qaplan v%s is incompatible with the cli_version from the project config (%s). "
            "Proceeding because qaplan is a development build.",
            verdict.running,
            verdict.declared,
        )
        return
    raise IncompatibleVersionError(str(verdict.declared), str(verdict.running))


__all__ = [
    "CompatibilityVerdict",
    "check_compatibility",
    "enforce_compatibility",
    "parse_version",
]
