# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and global options."""

from __future__ import annotations

from typing import Annotated

import typer

from ..tasks.context import TaskOptions
from .commands import register_commands
from .context import build_task_context

app = typer.Typer(
    name="tidystyle",
    help="Check and fix whitespace style in source files.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Print detailed debugging output.")] = False,
    report: Annotated[bool, typer.Option("--report", help="Print a summary report after processing.")] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable ANSI colours in diffs and messages.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in messages.")] = False,
    stats: Annotated[
        str | None,
        typer.Option("--stats", metavar="FILE", help="Write stats to FILE (.edn or .tsv)."),
    ] = None,
    jobs: Annotated[
        int | None,
        typer.Option("--jobs", "-j", min=1, help="Number of concurrent workers (defaults to CPU count)."),
    ] = None,
) -> None:
    """Check and fix whitespace style in source files."""

    options = TaskOptions(verbose=verbose, report=report, no_color=no_color, stats=stats, jobs=jobs)
    ctx.obj = build_task_context(options, emoji=not no_emoji)


register_commands(app)

__all__ = ["app", "main"]
