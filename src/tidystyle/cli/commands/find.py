# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command listing the files that would be checked."""

from __future__ import annotations

from typing import Annotated

import typer

from ...tasks import find_sources
from ..context import task_context


def find_command(
    ctx: typer.Context,
    paths: Annotated[list[str] | None, typer.Argument(metavar="[PATHS]...", show_default=False)] = None,
) -> None:
    """Search for files which would be checked for errors. Prints the relative
    path to each file.
    """

    find_sources(paths or [], task_context(ctx))


def register(app: typer.Typer) -> None:
    """Register the ``find`` command on ``app``."""

    app.command(name="find")(find_command)


__all__ = ["find_command", "register"]
