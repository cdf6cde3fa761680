# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command formatting standard input."""

from __future__ import annotations

import typer

from ...tasks import pipe
from ..context import task_context


def pipe_command(ctx: typer.Context) -> None:
    """Read from stdin and write the formatted result to stdout."""

    pipe(task_context(ctx))


def register(app: typer.Typer) -> None:
    """Register the ``pipe`` command on ``app``."""

    app.command(name="pipe")(pipe_command)


__all__ = ["pipe_command", "register"]
