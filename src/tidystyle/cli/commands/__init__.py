# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command registry."""

from __future__ import annotations

import typer

from . import check, config, find, fix, pipe, version

__all__ = ["register_commands"]


def register_commands(app: typer.Typer) -> None:
    """Register the built-in commands on ``app``."""

    version.register(app)
    config.register(app)
    find.register(app)
    check.register(app)
    fix.register(app)
    pipe.register(app)
