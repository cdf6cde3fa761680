# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Task layer shared by the CLI and embedding callers."""

from __future__ import annotations

from .commands import (
    ExitCode,
    check_sources,
    check_status,
    find_sources,
    fix_sources,
    fix_status,
    pipe,
    print_version,
    show_config,
    version_string,
)
from .context import TaskContext, TaskExit, TaskOptions, raise_task_exit, system_exit
from .roots import load_configs, prepare_roots, search_roots

__all__ = [
    "ExitCode",
    "TaskContext",
    "TaskExit",
    "TaskOptions",
    "check_sources",
    "check_status",
    "find_sources",
    "fix_sources",
    "fix_status",
    "load_configs",
    "pipe",
    "prepare_roots",
    "print_version",
    "raise_task_exit",
    "search_roots",
    "show_config",
    "system_exit",
    "version_string",
]
