# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Invocation strategies derived from driver declarations."""

from __future__ import annotations

from dataclasses import dataclass

from ..config.definitions import DriverDeclaration, EnabledPlugin, InvocationDirectoryDef, PluginDeclaration, TargetDef
from ..config.types import DriverBatchBy, InvocationDirectoryType, Runtime, TargetType


@dataclass(frozen=True, slots=True)
class InvocationStrategy:
    """How the execution layer should spread work across driver invocations."""

    batch_by: DriverBatchBy
    max_batch: int
    target: TargetDef
    invocation_directory: InvocationDirectoryDef
    runtime: Runtime | None
    prefix: str | None

    @property
    def single_invocation(self) -> bool:
        """Return ``True`` when the driver runs once for the whole project."""

        return self.batch_by is DriverBatchBy.PROJECT


def batching_mode(driver: DriverDeclaration) -> DriverBatchBy:
    """Return the batching mode for ``driver``.

    An explicit ``batch_by`` always wins. Otherwise a literal target runs once
    per project, an unbatched driver once per file, a driver whose invocation
    directory depends on the target once per directory, and everything else
    receives targets in ``max_batch`` sized chunks.
    """

    if driver.batch_by is not None:
        return driver.batch_by
    if driver.target.type is TargetType.LITERAL:
        return DriverBatchBy.PROJECT
    if not driver.batch:
        return DriverBatchBy.FILE
    if driver.invocation_directory.type is not InvocationDirectoryType.ROOT:
        return DriverBatchBy.DIRECTORY
    return DriverBatchBy.NONE


def invocation_strategy(
    driver: DriverDeclaration,
    declaration: PluginDeclaration,
    enabled: EnabledPlugin,
) -> InvocationStrategy:
    """Return the invocation strategy of ``driver`` within its plugin.

    Args:
        driver: Driver being planned.
        declaration: Plugin declaration owning ``driver``.
        enabled: The project's opt-in entry for the plugin.

    Returns:
        InvocationStrategy: Strategy handed to the execution layer.
    """

    mode = batching_mode(driver)
    return InvocationStrategy(
        batch_by=mode,
        max_batch=1 if mode is DriverBatchBy.FILE else driver.max_batch,
        target=driver.target,
        invocation_directory=driver.invocation_directory,
        runtime=declaration.runtime,
        prefix=enabled.prefix,
    )


__all__ = ["InvocationStrategy", "batching_mode", "invocation_strategy"]
