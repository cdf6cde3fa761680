# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Unified diff helpers used to report formatting errors."""

from __future__ import annotations

import difflib
import re
from collections.abc import Iterator
from typing import Final

from .cli.shared import colorize as colorize_text

_HUNK_RE: Final = re.compile(r"^@@ -\d+(?:,(\d+))? \+\d+(?:,(\d+))? @@")

# Roles assigned by ``_classify`` mapped to the ANSI colour used by ``colorize``.
_ROLE_COLOURS: Final[dict[str, str]] = {
    "header": "bold",
    "hunk": "cyan",
    "added": "green",
    "removed": "red",
}


def unified_diff(path: str, original: str, revised: str) -> str:
    """Return a unified diff between ``original`` and ``revised`` for ``path``."""

    lines = difflib.unified_diff(
        original.splitlines(keepends=True),
        revised.splitlines(keepends=True),
        fromfile=f"a/{path}",
        tofile=f"b/{path}",
    )
    rendered: list[str] = []
    for line in lines:
        if not line.endswith("\n"):
            line += "\n\\ No newline at end of file\n"
        rendered.append(line)
    return "".join(rendered)


def _classify(lines: list[str]) -> Iterator[tuple[str, str | None]]:
    """Yield each line of a unified diff with its role.

    Lines inside a hunk are classified by their marker until the line counts
    announced by the ``@@`` header are used up, so a body line such as
    ``--- note`` is a removal rather than a file header.
    """

    old_left = new_left = 0
    for line in lines:
        if old_left > 0 or new_left > 0:
            if line.startswith("-"):
                old_left -= 1
                yield line, "removed"
            elif line.startswith("+"):
                new_left -= 1
                yield line, "added"
            elif line.startswith(" "):
                old_left -= 1
                new_left -= 1
                yield line, None
            else:
                yield line, None
            continue
        match = _HUNK_RE.match(line)
        if match:
            old_left = int(match.group(1) or 1)
            new_left = int(match.group(2) or 1)
            yield line, "hunk"
        elif line.startswith(("--- ", "+++ ")):
            yield line, "header"
        else:
            yield line, None


def count_changes(diff: str) -> int:
    """Return the number of added and removed lines in ``diff``."""

    return sum(1 for _, role in _classify(diff.split("\n")) if role in {"added", "removed"})


def colorize(diff: str) -> str:
    """Colour the headers, hunks and changed lines of ``diff``."""

    styled: list[str] = []
    for line, role in _classify(diff.split("\n")):
        code = _ROLE_COLOURS.get(role) if role else None
        styled.append(colorize_text(line, code, True) if code and line else line)
    return "\n".join(styled)


__all__ = ["colorize", "count_changes", "unified_diff"]
