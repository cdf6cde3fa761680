# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command checking files for formatting errors."""

from __future__ import annotations

from typing import Annotated

import typer

from ...tasks import check_sources
from ..context import task_context


def check_command(
    ctx: typer.Context,
    paths: Annotated[list[str] | None, typer.Argument(metavar="[PATHS]...", show_default=False)] = None,
) -> None:
    """Check source files for formatting errors. Prints a diff of all malformed
    lines found and exits with an error if any files have format errors.
    """

    check_sources(paths or [], task_context(ctx))


def register(app: typer.Typer) -> None:
    """Register the ``check`` command on ``app``."""

    app.command(name="check")(check_command)


__all__ = ["check_command", "register"]
