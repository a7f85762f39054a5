# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Plugin resolution and configuration composition."""

from __future__ import annotations

from .composer import ResolvedConfiguration, compose
from .plugins import ResolvedPlugin, resolve_plugin
from .strategies import InvocationStrategy, batching_mode, invocation_strategy

__all__ = [
    "InvocationStrategy",
    "ResolvedConfiguration",
    "ResolvedPlugin",
    "batching_mode",
    "compose",
    "invocation_strategy",
    "resolve_plugin",
]
