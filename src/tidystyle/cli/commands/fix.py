# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command fixing formatting errors in place."""

from __future__ import annotations

from typing import Annotated

import typer

from ...tasks import fix_sources
from ..context import task_context


def fix_command(
    ctx: typer.Context,
    paths: Annotated[list[str] | None, typer.Argument(metavar="[PATHS]...", show_default=False)] = None,
) -> None:
    """Edit source files in place to correct formatting errors."""

    fix_sources(paths or [], task_context(ctx))


def register(app: typer.Typer) -> None:
    """Register the ``fix`` command on ``app``."""

    app.command(name="fix")(fix_command)


__all__ = ["fix_command", "register"]
