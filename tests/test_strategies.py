# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for deriving driver invocation strategies."""

from __future__ import annotations

import pytest

from qaplan.config.definitions import DriverDeclaration, EnabledPlugin, PluginDeclaration
from qaplan.config.types import DriverBatchBy, Runtime
from qaplan.resolution.strategies import batching_mode, invocation_strategy


@pytest.mark.parametrize(
    ("driver", "expected"),
    [
        ({"batch_by": "directory", "batch": False}, DriverBatchBy.DIRECTORY),
        ({"target": {"type": "literal", "path": "."}}, DriverBatchBy.PROJECT),
        ({"batch": False}, DriverBatchBy.FILE),
        ({"invocation_directory": {"type": "root_or_parent_with", "path": "go.mod"}}, DriverBatchBy.DIRECTORY),
        ({}, DriverBatchBy.NONE),
    ],
)
def test_batching_mode(driver: dict[str, object], expected: DriverBatchBy) -> None:
    declaration = DriverDeclaration.model_validate({"script": "tool ${target}", **driver})

    assert batching_mode(declaration) is expected


def test_invocation_strategy_carries_runtime_and_prefix() -> None:
    driver = DriverDeclaration(script="ruff check ${target}", max_batch=20)
    plugin = PluginDeclaration(name="ruff", runtime=Runtime.PYTHON, drivers={"lint": driver})
    enabled = EnabledPlugin(name="ruff", prefix="backend")

    strategy = invocation_strategy(driver, plugin, enabled)

    assert strategy.batch_by is DriverBatchBy.NONE
    assert strategy.max_batch == 20
    assert strategy.runtime is Runtime.PYTHON
    assert strategy.prefix == "backend"
    assert not strategy.single_invocation


def test_per_file_strategy_uses_single_target_batches() -> None:
    driver = DriverDeclaration(script="fmt ${target}", batch=False, max_batch=50)

    strategy = invocation_strategy(driver, PluginDeclaration(name="fmt"), EnabledPlugin(name="fmt"))

    assert strategy.batch_by is DriverBatchBy.FILE
    assert strategy.max_batch == 1


def test_project_strategy_is_single_invocation() -> None:
    driver = DriverDeclaration(script="tsc --noEmit", target={"type": "literal", "path": "."})

    strategy = invocation_strategy(driver, PluginDeclaration(name="tsc"), EnabledPlugin(name="tsc"))

    assert strategy.single_invocation
