# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command showing the merged configuration."""

from __future__ import annotations

from typing import Annotated

import typer

from ...tasks import show_config
from ..context import task_context
from .version import EXTRA_ARGS_SETTINGS


def config_command(
    ctx: typer.Context,
    paths: Annotated[list[str] | None, typer.Argument(metavar="[PATH]", show_default=False)] = None,
) -> None:
    """Show the merged configuration which would be used to format the file or
    directory at PATH. Uses the current directory if one is not given.
    """

    show_config(paths or [], task_context(ctx))


def register(app: typer.Typer) -> None:
    """Register the ``config`` command on ``app``."""

    app.command(name="config", context_settings=EXTRA_ARGS_SETTINGS)(config_command)


__all__ = ["config_command", "register"]
