# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command printing the tool version."""

from __future__ import annotations

from typing import Annotated

import typer

from ...tasks import print_version
from ..context import task_context

# Extra arguments are accepted so the command can reject them with status 1.
EXTRA_ARGS_SETTINGS = {"ignore_unknown_options": True, "allow_extra_args": True}


def version_command(
    ctx: typer.Context,
    args: Annotated[list[str] | None, typer.Argument(hidden=True)] = None,
) -> None:
    """Print the tidystyle version."""

    print_version(args or [], task_context(ctx))


def register(app: typer.Typer) -> None:
    """Register the ``version`` command on ``app``."""

    app.command(name="version", context_settings=EXTRA_ARGS_SETTINGS)(version_command)


__all__ = ["EXTRA_ARGS_SETTINGS", "register", "version_command"]
