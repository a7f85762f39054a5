# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the cli_version compatibility gate."""

from __future__ import annotations

import logging

import pytest
from semver import Version

from qaplan.errors import IncompatibleVersionError, InvalidVersionError
from qaplan.versioning import check_compatibility, enforce_compatibility, parse_version


@pytest.mark.parametrize(
    ("declared", "running", "compatible"),
    [
        ("0.9.0", "0.8.0", False),
        ("0.8.0", "0.9.0", True),
        ("1.3.0", "2.0.0", False),
        ("2.0.0", "1.3.0", False),
        ("1.0.0", "1.9.9", True),
        ("1.9.0", "1.0.0", True),
        ("0.8.3", "0.8.0", True),
    ],
)
def test_check_compatibility_boundaries(declared: str, running: str, compatible: bool) -> None:
    verdict = check_compatibility(declared, running)

    assert verdict.compatible is compatible
    assert verdict.declared == Version.parse(declared)
    assert verdict.running == Version.parse(running)


def test_missing_declared_version_is_always_compatible() -> None:
    verdict = check_compatibility(None, "0.1.0")

    assert verdict.compatible
    assert verdict.declared is None
    assert "no cli_version declared" in verdict.message


def test_invalid_declared_version_raises() -> None:
    with pytest.raises(InvalidVersionError) as excinfo:
        check_compatibility("not-a-version", "1.0.0")

    assert excinfo.value.field == "cli_version"


def test_enforce_raises_in_release_context() -> None:
    verdict = check_compatibility("0.9.0", "0.8.0")

    with pytest.raises(IncompatibleVersionError) as excinfo:
        enforce_compatibility(verdict, development=False)

    assert excinfo.value.declared == "0.9.0"
    assert excinfo.value.running == "0.8.0"
    assert "0.9.0" in str(excinfo.value)
    assert "0.8.0" in str(excinfo.value)


def test_enforce_downgrades_to_warning_in_development(caplog: pytest.LogCaptureFixture) -> None:
    verdict = check_compatibility("2.0.0", "1.0.0")

    with caplog.at_level(logging.WARNING, logger="qaplan.versioning"):
        enforce_compatibility(verdict, development=True)

    assert "development build" in caplog.text


def test_enforce_defaults_to_release_for_build_metadata() -> None:
    verdict = check_compatibility("2.0.0", "1.4.0+build.5")

    with pytest.raises(IncompatibleVersionError):
        enforce_compatibility(verdict)


@pytest.mark.parametrize("value", ["1.0.0-x.7.z.92", "1.0.0-alpha.beta", "1.0.0-rc.1+sha.5114f85"])
def test_semantic_prerelease_versions_are_accepted(value: str) -> None:
    verdict = check_compatibility(value, "1.2.0")

    assert verdict.compatible
    assert verdict.declared == parse_version(value)


@pytest.mark.parametrize("value", ["1", "1.2", "1.0.0.dev1"])
def test_non_semantic_versions_are_rejected(value: str) -> None:
    with pytest.raises(InvalidVersionError, match="not a valid semantic version"):
        check_compatibility(value, "1.2.0")
