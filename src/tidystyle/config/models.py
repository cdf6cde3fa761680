# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the tidystyle checker."""

from __future__ import annotations

import re
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import ALWAYS_IGNORE, DEFAULT_EXTENSIONS


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class _Section(BaseModel):
    """Base model shared by every configuration section."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class FilesSettings(_Section):
    """Describe which files beneath a search root are treated as sources."""

    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    pattern: str | None = None
    ignore: list[str] = Field(default_factory=lambda: list(ALWAYS_IGNORE))

    @field_validator("extensions")
    @classmethod
    def _strip_dots(cls, value: list[str]) -> list[str]:
        return [ext.lstrip(".") for ext in value]

    @field_validator("pattern")
    @classmethod
    def _compile_check(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                re.compile(value)
            except re.error as exc:
                raise ValueError(f"invalid files.pattern regex: {exc}") from exc
        return value


class WhitespaceRule(_Section):
    """Trailing whitespace handling."""

    enabled: bool = True
    trailing: bool = True


class IndentationRule(_Section):
    """Leading indentation handling."""

    enabled: bool = True
    expand_tabs: bool = True
    tab_width: int = Field(default=4, ge=1, le=16)


class BlankLinesRule(_Section):
    """Blank line handling."""

    enabled: bool = True
    max_consecutive: int = Field(default=2, ge=0)
    trim_leading: bool = True


class EofNewlineRule(_Section):
    """Require exactly one newline at the end of non-empty files."""

    enabled: bool = True


class RulesSettings(_Section):
    """Group the individual rule sections."""

    whitespace: WhitespaceRule = Field(default_factory=WhitespaceRule)
    indentation: IndentationRule = Field(default_factory=IndentationRule)
    blank_lines: BlankLinesRule = Field(default_factory=BlankLinesRule)
    eof_newline: EofNewlineRule = Field(default_factory=EofNewlineRule)


class Settings(_Section):
    """Effective configuration applied to a search root."""

    files: FilesSettings = Field(default_factory=FilesSettings)
    rules: RulesSettings = Field(default_factory=RulesSettings)


DEFAULT_SETTINGS: Final[Settings] = Settings()

__all__ = [
    "DEFAULT_SETTINGS",
    "BlankLinesRule",
    "ConfigError",
    "EofNewlineRule",
    "FilesSettings",
    "IndentationRule",
    "RulesSettings",
    "Settings",
    "WhitespaceRule",
]
