# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path

import pytest

from tidystyle.cli.shared import CLILogger, build_cli_logger
from tidystyle.tasks import TaskContext, TaskOptions, raise_task_exit

CLEAN_SOURCE = "def main():\n    return 1\n"
MESSY_SOURCE = "def main():  \n\treturn 1\n\n\n\n"


@pytest.fixture
def logger() -> CLILogger:
    """Return a logger with debug output enabled and no decorations."""
    return build_cli_logger(emoji=False, debug=True, no_color=True)


@pytest.fixture
def make_context(logger: CLILogger) -> Callable[..., TaskContext]:
    """Return a factory building task contexts with a catchable exit strategy."""

    def factory(**options: object) -> TaskContext:
        return TaskContext(options=TaskOptions(jobs=2, **options), logger=logger, exit=raise_task_exit)

    return factory


@pytest.fixture
def write_tree() -> Callable[[Path, Mapping[str, str | bytes]], Path]:
    """Return a helper writing ``{relative path: content}`` beneath a root."""

    def writer(root: Path, files: Mapping[str, str | bytes]) -> Path:
        for relative, content in files.items():
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(content, encoding="utf-8")
        return root

    return writer
