# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Whitespace formatting rules applied to source text."""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from .config import Settings

Reformatter = Callable[[str, Settings], str]
LineRule = Callable[[list[str], Settings], list[str]]


def _expand_indentation(lines: list[str], settings: Settings) -> list[str]:
    rule = settings.rules.indentation
    if not rule.expand_tabs:
        return lines
    expanded: list[str] = []
    for line in lines:
        body = line.lstrip(" \t")
        indent = line[: len(line) - len(body)]
        expanded.append(indent.expandtabs(rule.tab_width) + body)
    return expanded


def _strip_trailing(lines: list[str], settings: Settings) -> list[str]:
    if not settings.rules.whitespace.trailing:
        return lines
    return [line.rstrip(" \t\f\v") for line in lines]


def _collapse_blank_lines(lines: list[str], settings: Settings) -> list[str]:
    rule = settings.rules.blank_lines
    result: list[str] = []
    run = 0
    for line in lines:
        if line.strip():
            run = 0
            result.append(line)
            continue
        if rule.trim_leading and not result:
            continue
        run += 1
        if run <= rule.max_consecutive:
            result.append(line)
    return result


def _is_enabled(name: str, settings: Settings) -> bool:
    return bool(getattr(settings.rules, name).enabled)


# Order matters: indentation must settle before trailing blanks are judged.
LINE_RULES: Final[tuple[tuple[str, LineRule], ...]] = (
    ("indentation", _expand_indentation),
    ("whitespace", _strip_trailing),
    ("blank_lines", _collapse_blank_lines),
)


def reformat(text: str, settings: Settings) -> str:
    """Return ``text`` with every enabled rule applied.

    Args:
        text: Original source text using ``\\n`` line endings.
        settings: Effective configuration for the file.

    Returns:
        str: Revised text. Equal to ``text`` when the source is already
        formatted correctly.
    """

    ends_with_newline = text.endswith("\n")
    lines = text.split("\n")
    if ends_with_newline:
        lines.pop()
    for name, rule in LINE_RULES:
        if _is_enabled(name, settings):
            lines = rule(lines, settings)

    if not _is_enabled("eof_newline", settings):
        revised = "\n".join(lines)
        return revised + "\n" if ends_with_newline and lines else revised

    while lines and not lines[-1].strip():
        lines.pop()
    return "\n".join(lines) + "\n" if lines else ""


__all__ = ["LINE_RULES", "Reformatter", "reformat"]
