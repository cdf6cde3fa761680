# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Bridge Typer invocations to the task layer."""

from __future__ import annotations

from typing import NoReturn

import typer

from ..tasks.context import TaskContext, TaskOptions
from .shared import build_cli_logger


def typer_exit(code: int) -> NoReturn:
    """Exit strategy handing the status code back to Typer."""

    raise typer.Exit(code=int(code))


def build_task_context(options: TaskOptions, *, emoji: bool = True) -> TaskContext:
    """Return a task context whose exit strategy raises :class:`typer.Exit`."""

    logger = build_cli_logger(emoji=emoji, debug=options.verbose, no_color=options.no_color)
    return TaskContext(options=options, logger=logger, exit=typer_exit)


def task_context(ctx: typer.Context) -> TaskContext:
    """Return the task context stored by the application callback.

    Falls back to default options when a command runs without the callback,
    for example when invoked directly in tests.
    """

    found = ctx.find_object(TaskContext)
    if found is None:
        found = build_task_context(TaskOptions())
        ctx.obj = found
    return found


__all__ = ["build_task_context", "task_context", "typer_exit"]
