# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Constants shared by configuration discovery and file walking."""

from __future__ import annotations

from typing import Final

CONFIG_FILE_NAME: Final[str] = ".tidystyle.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "tidystyle"

# Upper bound on the number of ancestor directories searched for configuration.
MAX_CONFIG_DEPTH: Final[int] = 25

ALWAYS_IGNORE: Final[tuple[str, ...]] = (
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    ".venv",
    "venv",
    "dist",
    "build",
    "__pycache__",
    ".mypy_cache",
    ".pytest_cache",
    ".tox",
    ".cache",
)

DEFAULT_EXTENSIONS: Final[tuple[str, ...]] = (
    "py",
    "pyi",
    "toml",
    "cfg",
    "ini",
    "md",
    "rst",
    "txt",
    "yaml",
    "yml",
)

__all__ = [
    "ALWAYS_IGNORE",
    "CONFIG_FILE_NAME",
    "DEFAULT_EXTENSIONS",
    "MAX_CONFIG_DEPTH",
    "PYPROJECT_FILE_NAME",
    "PYPROJECT_SECTION_KEY",
    "PYPROJECT_TOOL_KEY",
]
