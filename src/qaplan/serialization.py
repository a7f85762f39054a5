# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for converting resolved plans to serializable data."""

from __future__ import annotations

from typing import Any

from .resolution.composer import ResolvedConfiguration
from .resolution.plugins import ResolvedPlugin
from .resolution.strategies import InvocationStrategy


def serialize_strategy(strategy: InvocationStrategy) -> dict[str, object]:
    """Convert an invocation strategy into a JSON-friendly mapping."""

    return {
        "batch_by": strategy.batch_by.value,
        "max_batch": strategy.max_batch,
        "target": strategy.target.model_dump(mode="json"),
        "invocation_directory": strategy.invocation_directory.model_dump(mode="json"),
        "runtime": strategy.runtime.value if strategy.runtime is not None else None,
        "prefix": strategy.prefix,
    }


def serialize_plugin(plugin: ResolvedPlugin) -> dict[str, Any]:
    """Serialize a resolved plugin including its drivers and strategies."""

    return {
        "name": plugin.name,
        "source": plugin.source,
        "version": plugin.version,
        "download": plugin.download.model_dump(mode="json") if plugin.download is not None else None,
        "download_url": plugin.download_url,
        "extra_packages": [package.model_dump(mode="json") for package in plugin.extra_packages],
        "drivers": {
            name: {
                **driver.model_dump(mode="json"),
                "strategy": serialize_strategy(plugin.strategies[name]),
            }
            for name, driver in plugin.drivers.items()
        },
    }


def serialize_resolved(resolved: ResolvedConfiguration) -> dict[str, Any]:
    """Serialize a resolved configuration without its policy payload."""

    return {
        "host": {"os": resolved.host.os.value, "cpu": resolved.host.cpu.value},
        "default_source": resolved.default_source,
        "sources": list(resolved.source_names),
        "plugins": [serialize_plugin(plugin) for plugin in resolved.plugins],
    }


__all__ = ["serialize_plugin", "serialize_resolved", "serialize_strategy"]
