# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models, discovery and merging."""

from __future__ import annotations

from .loaders import (
    ConfigFragment,
    dir_configs,
    find_up,
    merge_settings,
    read_config,
    render_settings,
    source_paths,
)
from .models import (
    DEFAULT_SETTINGS,
    BlankLinesRule,
    ConfigError,
    EofNewlineRule,
    FilesSettings,
    IndentationRule,
    RulesSettings,
    Settings,
    WhitespaceRule,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "BlankLinesRule",
    "ConfigError",
    "ConfigFragment",
    "EofNewlineRule",
    "FilesSettings",
    "IndentationRule",
    "RulesSettings",
    "Settings",
    "WhitespaceRule",
    "dir_configs",
    "find_up",
    "merge_settings",
    "read_config",
    "render_settings",
    "source_paths",
]
