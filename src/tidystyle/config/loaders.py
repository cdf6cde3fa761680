# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Discover configuration fragments on disk and merge them into settings."""

from __future__ import annotations

import json
import tomllib
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from ..constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_SECTION_KEY, PYPROJECT_TOOL_KEY
from .models import ConfigError, Settings


@dataclass(frozen=True, slots=True)
class ConfigFragment:
    """Settings declared by a single configuration file."""

    source: Path
    data: Mapping[str, Any]


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def read_config(path: Path) -> ConfigFragment:
    """Parse the TOML configuration stored at ``path``.

    ``pyproject.toml`` files contribute only their ``[tool.tidystyle]`` table.

    Args:
        path: Location of the configuration file.

    Returns:
        ConfigFragment: Parsed fragment tagged with its source path.

    Raises:
        ConfigError: If the document cannot be read or is not a table.
    """

    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Unable to read configuration at {path}: {exc}") from exc
    if path.name == PYPROJECT_FILE_NAME:
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        section = tool_section.get(PYPROJECT_SECTION_KEY) if isinstance(tool_section, Mapping) else None
        data = section if isinstance(section, MutableMapping) else {}
    if not isinstance(data, MutableMapping):
        raise ConfigError(f"Configuration at {path} must be a table")
    return ConfigFragment(source=path, data=MappingProxyType(dict(data)))


def dir_configs(directory: Path) -> list[ConfigFragment]:
    """Return the fragments declared directly inside ``directory``.

    ``pyproject.toml`` is read before ``.tidystyle.toml`` so the dedicated file
    takes precedence when both are present.
    """

    fragments: list[ConfigFragment] = []
    pyproject = directory / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        fragment = read_config(pyproject)
        if fragment.data:
            fragments.append(fragment)
    dedicated = directory / CONFIG_FILE_NAME
    if dedicated.is_file():
        fragments.append(read_config(dedicated))
    return fragments


def find_up(path: Path, max_depth: int) -> list[ConfigFragment]:
    """Collect fragments from ``path`` and its ancestors.

    Args:
        path: File or directory where the search starts. Files start from their
            parent directory.
        max_depth: Maximum number of directories inspected.

    Returns:
        list[ConfigFragment]: Fragments ordered from the outermost ancestor to
        the starting directory.
    """

    directory = path if path.is_dir() or not path.exists() else path.parent
    found: list[list[ConfigFragment]] = []
    for depth, candidate in enumerate((directory, *directory.parents)):
        if depth >= max_depth:
            break
        if candidate.is_dir():
            found.append(dir_configs(candidate))
    return [fragment for fragments in reversed(found) for fragment in fragments]


def merge_settings(base: Settings, *fragments: ConfigFragment) -> Settings:
    """Merge ``fragments`` onto ``base`` with later fragments taking precedence.

    Nested tables merge key by key; any other value replaces the earlier one.

    Raises:
        ConfigError: If the merged document fails validation.
    """

    if not fragments:
        return base
    merged: dict[str, Any] = base.model_dump()
    for fragment in fragments:
        merged = _deep_merge(merged, fragment.data)
    try:
        return Settings.model_validate(merged)
    except ValidationError as exc:
        sources = ", ".join(str(fragment.source) for fragment in fragments)
        raise ConfigError(f"Invalid configuration from {sources}: {exc}") from exc


def source_paths(fragment: ConfigFragment) -> list[str]:
    """Return the file paths which contributed to ``fragment``."""

    return [str(fragment.source)]


def render_settings(settings: Settings) -> str:
    """Return a stable JSON rendering of ``settings``."""

    return json.dumps(settings.model_dump(mode="json"), indent=2, sort_keys=True)


__all__ = [
    "ConfigFragment",
    "dir_configs",
    "find_up",
    "merge_settings",
    "read_config",
    "render_settings",
    "source_paths",
]
