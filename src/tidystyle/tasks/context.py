# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Options and injectable services shared by every task."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import NoReturn

from ..cli.shared import CLIError, CLILogger
from ..engine import Reformatter, reformat

ExitStrategy = Callable[[int], NoReturn]


class TaskExit(CLIError):
    """Raised by :func:`raise_task_exit` instead of terminating the process."""

    def __init__(self, code: int) -> None:
        super().__init__(f"Task exited with code {code}", exit_code=code)


def raise_task_exit(code: int) -> NoReturn:
    """Exit strategy raising a catchable :class:`TaskExit`."""

    raise TaskExit(code)


def system_exit(code: int) -> NoReturn:
    """Exit strategy terminating the interpreter."""

    sys.exit(code)


@dataclass(frozen=True, slots=True)
class TaskOptions:
    """Global flags consumed by the task layer.

    Attributes:
        verbose: Emit debug logging and the human readable summary.
        report: Emit the human readable summary without debug logging.
        no_color: Disable colourised diffs.
        stats: Optional file receiving exported stats.
        jobs: Maximum number of concurrent workers.
    """

    verbose: bool = False
    report: bool = False
    no_color: bool = False
    stats: str | None = None
    jobs: int | None = None


@dataclass(frozen=True, slots=True)
class TaskContext:
    """Bundle of options and collaborators handed to each task."""

    options: TaskOptions
    logger: CLILogger
    exit: ExitStrategy = system_exit
    reformatter: Reformatter = reformat


__all__ = [
    "ExitStrategy",
    "TaskContext",
    "TaskExit",
    "TaskOptions",
    "raise_task_exit",
    "system_exit",
]
