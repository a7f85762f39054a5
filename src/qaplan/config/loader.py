# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read project configuration documents from TOML."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from ..errors import ConfigLoadError
from .models import Configuration

CONFIG_FILENAME: Final[str] = "qaplan.toml"


def read_toml(path: Path) -> dict[str, Any]:
    """Return the TOML document stored at ``path``.

    Args:
        path: File to read.

    Returns:
        dict[str, Any]: Parsed document.

    Raises:
        ConfigLoadError: If the file is missing or is not valid TOML.
    """

    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except FileNotFoundError as exc:
        raise ConfigLoadError(f"Configuration file not found: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigLoadError(f"{path}: invalid TOML: {exc}") from exc


def parse_configuration(data: Mapping[str, Any], *, origin: str = "<memory>") -> Configuration:
    """Validate ``data`` into a :class:`Configuration`.

    Args:
        data: Raw mapping, usually a parsed TOML document.
        origin: Description of where ``data`` came from, used in errors.

    Returns:
        Configuration: Immutable validated configuration.

    Raises:
        ConfigLoadError: If ``data`` does not satisfy the model.
    """

    try:
        return Configuration.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigLoadError(f"{origin}: invalid configuration:\n{exc}") from exc


def load_configuration(path: Path) -> Configuration:
    """Read and validate the project configuration at ``path``.

    ``path`` may name the file itself or a directory containing ``qaplan.toml``.
    """

    target = path / CONFIG_FILENAME if path.is_dir() else path
    return parse_configuration(read_toml(target), origin=str(target))


__all__ = ["CONFIG_FILENAME", "load_configuration", "parse_configuration", "read_toml"]
