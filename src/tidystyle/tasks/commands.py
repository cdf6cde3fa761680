# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementations of the tidystyle commands."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import TextIO

from .. import __version__
from ..config import ConfigError, Settings, render_settings
from ..diff import colorize, count_changes, unified_diff
from ..engine import Reformatter
from ..models import AggregateResult, FileOutcome, OutcomeKind
from ..reporting import report_stats
from ..walker import FileHandler, FileWalker
from .context import TaskContext
from .roots import load_configs, prepare_roots, search_roots


class ExitCode(IntEnum):
    """Process exit statuses reported by the commands."""

    OK = 0
    INVALID_ARGUMENTS = 1
    INCORRECT = 2
    PROCESSING_FAILED = 3


def version_string() -> str:
    """Return the project version string."""

    return f"tidystyle {__version__}"


def check_status(results: AggregateResult) -> ExitCode:
    """Return the exit status for a ``check`` walk.

    Processing failures take priority over formatting errors.
    """

    if results.failures:
        return ExitCode.PROCESSING_FAILED
    if results.count(OutcomeKind.INCORRECT):
        return ExitCode.INCORRECT
    return ExitCode.OK


def fix_status(results: AggregateResult) -> ExitCode:
    """Return the exit status for a ``fix`` walk; fixed files are not failures."""

    return ExitCode.PROCESSING_FAILED if results.failures else ExitCode.OK


def _load_settings(ctx: TaskContext, label: str, location: Path) -> Settings:
    try:
        return load_configs(label, location, logger=ctx.logger)
    except ConfigError as exc:
        ctx.logger.fail(f"Configuration invalid: {exc}")
        ctx.exit(ExitCode.INVALID_ARGUMENTS)


def _walk_files(handler: FileHandler, paths: Sequence[str], ctx: TaskContext) -> AggregateResult:
    jobs = ctx.options.jobs
    try:
        roots = prepare_roots(paths, logger=ctx.logger, jobs=jobs)
        return FileWalker(logger=ctx.logger, jobs=jobs).walk(handler, roots)
    except ConfigError as exc:
        ctx.logger.fail(f"Configuration invalid: {exc}")
        ctx.exit(ExitCode.INVALID_ARGUMENTS)


# Version ---------------------------------------------------------------------


def print_version(args: Sequence[str], ctx: TaskContext) -> str:
    """Implementation of the ``version`` command."""

    if args:
        ctx.logger.fail("tidystyle version command takes no arguments")
        ctx.exit(ExitCode.INVALID_ARGUMENTS)
    version = version_string()
    ctx.logger.echo(version)
    return version


# Config ----------------------------------------------------------------------


def show_config(paths: Sequence[str], ctx: TaskContext) -> Settings:
    """Implementation of the ``config`` command.

    Prints the merged settings that apply to the given path, or to the current
    directory when none is given.
    """

    if len(paths) > 1:
        ctx.logger.fail("tidystyle config command takes at most one argument")
        ctx.exit(ExitCode.INVALID_ARGUMENTS)
    root = search_roots(paths)[0]
    settings = _load_settings(ctx, str(root), root.resolve())
    ctx.logger.echo(render_settings(settings))
    return settings


# Find ------------------------------------------------------------------------


def find_source(settings: Settings, path: str, file: Path) -> FileOutcome:
    """Report a single source file without reading it."""

    return FileOutcome(kind=OutcomeKind.FOUND, info=path)


def find_sources(paths: Sequence[str], ctx: TaskContext) -> AggregateResult:
    """Implementation of the ``find`` command; always succeeds."""

    results = _walk_files(find_source, paths, ctx)
    ctx.logger.debug(f"Searched {results.total} files in {results.elapsed:.2f} ms")
    ctx.logger.debug(" ".join(f"{kind.value}={count}" for kind, count in results.counts.items()))
    return results


# Check -----------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class CheckSource:
    """Handler comparing a file with its reformatted text."""

    reformatter: Reformatter
    color: bool = True

    def __call__(self, settings: Settings, path: str, file: Path) -> FileOutcome:
        original = file.read_text(encoding="utf-8")
        revised = self.reformatter(original, settings)
        if original == revised:
            return FileOutcome(kind=OutcomeKind.CORRECT, debug=f"Source file {path} is formatted correctly")
        diff = unified_diff(path, original, revised)
        return FileOutcome(
            kind=OutcomeKind.INCORRECT,
            debug=f"Source file {path} is formatted incorrectly",
            info=colorize(diff) if self.color else diff,
            diff_lines=count_changes(diff),
        )


def check_sources(paths: Sequence[str], ctx: TaskContext) -> AggregateResult:
    """Implementation of the ``check`` command.

    Exits with status 3 when any file could not be processed, otherwise with
    status 2 when any file is formatted incorrectly.
    """

    handler = CheckSource(reformatter=ctx.reformatter, color=not ctx.options.no_color)
    results = _walk_files(handler, paths, ctx)
    report_stats(results, ctx.options, logger=ctx.logger)
    status = check_status(results)
    if status is ExitCode.PROCESSING_FAILED:
        ctx.logger.fail(f"Failed to process {len(results.failures)} files")
        ctx.exit(status)
    if status is ExitCode.INCORRECT:
        ctx.logger.fail(f"{results.count(OutcomeKind.INCORRECT)} files formatted incorrectly")
        ctx.exit(status)
    ctx.logger.debug(f"All {results.count(OutcomeKind.CORRECT)} files formatted correctly")
    return results


# Fix -------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FixSource:
    """Handler rewriting files whose formatting differs in place."""

    reformatter: Reformatter

    def __call__(self, settings: Settings, path: str, file: Path) -> FileOutcome:
        original = file.read_text(encoding="utf-8")
        revised = self.reformatter(original, settings)
        if original == revised:
            return FileOutcome(kind=OutcomeKind.CORRECT, debug=f"Source file {path} is formatted correctly")
        file.write_text(revised, encoding="utf-8")
        return FileOutcome(kind=OutcomeKind.FIXED, info=f"Reformatting source file {path}")


def fix_sources(paths: Sequence[str], ctx: TaskContext) -> AggregateResult:
    """Implementation of the ``fix`` command.

    Exits with status 3 when any file could not be processed. Rewriting files
    is not a failure.
    """

    results = _walk_files(FixSource(reformatter=ctx.reformatter), paths, ctx)
    report_stats(results, ctx.options, logger=ctx.logger)
    status = fix_status(results)
    if status is ExitCode.PROCESSING_FAILED:
        ctx.logger.fail(f"Failed to process {len(results.failures)} files")
        ctx.exit(status)
    fixed = results.count(OutcomeKind.FIXED)
    if fixed:
        ctx.logger.ok(f"Corrected formatting of {fixed} files")
    else:
        ctx.logger.debug(f"All {results.count(OutcomeKind.CORRECT)} files formatted correctly")
    return results


# Pipe ------------------------------------------------------------------------


def pipe(ctx: TaskContext, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> str:
    """Implementation of the ``pipe`` command.

    Reads all of ``stdin``, formats it with the settings for the current
    directory and writes the result to ``stdout``.
    """

    cwd = Path.cwd()
    settings = _load_settings(ctx, str(cwd), cwd)
    source = (stdin or sys.stdin).read()
    revised = ctx.reformatter(source, settings)
    out = stdout or sys.stdout
    out.write(revised)
    out.flush()
    return revised


__all__ = [
    "CheckSource",
    "ExitCode",
    "FixSource",
    "check_sources",
    "check_status",
    "find_source",
    "find_sources",
    "fix_sources",
    "fix_status",
    "pipe",
    "print_version",
    "show_config",
    "version_string",
]
