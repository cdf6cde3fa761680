# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Walk search roots and dispatch a handler for every eligible source file."""

from __future__ import annotations

import os
import re
import time
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from fnmatch import fnmatch
from pathlib import Path

from .cli.shared import CLILogger
from .config import Settings, dir_configs, merge_settings, source_paths
from .models import AggregateResult, FileOutcome, ResultAggregator

FileHandler = Callable[[Settings, str, Path], FileOutcome]


@dataclass(frozen=True, slots=True)
class PreparedRoot:
    """A search root paired with its resolved settings.

    Attributes:
        settings: Effective configuration for files beneath the root.
        root: Location exactly as supplied by the caller.
        canonical: Absolute, symlink-free form of ``root``.
    """

    settings: Settings
    root: Path
    canonical: Path


@dataclass(frozen=True, slots=True)
class SourceFile:
    """A file scheduled for handling."""

    display: str
    path: Path
    settings: Settings


def is_ignored(settings: Settings, name: str) -> bool:
    """Return ``True`` when ``name`` matches one of the ignore patterns."""

    return any(fnmatch(name, pattern) for pattern in settings.files.ignore)


def is_source_file(settings: Settings, relative: Path) -> bool:
    """Return ``True`` when ``relative`` should be handled under ``settings``."""

    files = settings.files
    if relative.suffix.lstrip(".") in files.extensions:
        return True
    return files.pattern is not None and re.search(files.pattern, relative.as_posix()) is not None


class FileWalker:
    """Enumerate source files and run a handler for each on a thread pool."""

    def __init__(self, *, logger: CLILogger, jobs: int | None = None) -> None:
        """Create a walker.

        Args:
            logger: Logger receiving per-file output.
            jobs: Maximum number of handlers running at once. Defaults to the
                CPU count.
        """

        self._logger = logger
        self._jobs = max(1, jobs or os.cpu_count() or 1)

    def walk(self, handler: FileHandler, roots: Iterable[PreparedRoot]) -> AggregateResult:
        """Apply ``handler`` to every eligible file beneath ``roots``.

        Each canonical file is handled at most once. A handler that raises is
        recorded as a failure and does not stop its siblings.

        Args:
            handler: Callable producing a :class:`FileOutcome` for one file.
            roots: Prepared search roots.

        Returns:
            AggregateResult: Tally of outcomes and failures for the walk.
        """

        start = time.perf_counter()
        aggregator = ResultAggregator()
        seen: set[Path] = set()
        pending: list[tuple[str, Future[FileOutcome]]] = []
        with ThreadPoolExecutor(max_workers=self._jobs) as executor:
            for prepared in roots:
                for source in self._iter_sources(prepared, aggregator):
                    if source.path in seen:
                        continue
                    seen.add(source.path)
                    future = executor.submit(handler, source.settings, source.display, source.path)
                    pending.append((source.display, future))
            for display, future in pending:
                try:
                    outcome = future.result()
                except Exception as exc:
                    self._fail(aggregator, display, exc)
                    continue
                aggregator.record(outcome)
                self._emit(outcome)
        elapsed = (time.perf_counter() - start) * 1000.0
        return aggregator.finish(elapsed)

    def _iter_sources(self, prepared: PreparedRoot, aggregator: ResultAggregator) -> Iterator[SourceFile]:
        canonical = prepared.canonical
        if canonical.is_file():
            if is_ignored(prepared.settings, canonical.name):
                self._logger.debug(f"Skipping ignored file root {prepared.root}")
                return
            yield SourceFile(display=str(prepared.root), path=canonical, settings=prepared.settings)
        elif canonical.is_dir():
            yield from self._walk_directory(canonical, prepared.root, prepared.settings, aggregator)
        else:
            self._fail(aggregator, str(prepared.root), FileNotFoundError(f"No such file or directory: {prepared.root}"))

    def _walk_directory(
        self,
        directory: Path,
        display: Path,
        settings: Settings,
        aggregator: ResultAggregator,
        relative: Path = Path(),
    ) -> Iterator[SourceFile]:
        try:
            entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
        except OSError as exc:
            self._fail(aggregator, str(display), exc)
            return
        for entry in entries:
            if is_ignored(settings, entry.name):
                continue
            child_relative = relative / entry.name
            if entry.is_dir():
                if entry.is_symlink():
                    continue
                child_settings = self._nested_settings(entry, display / entry.name, settings)
                yield from self._walk_directory(
                    entry,
                    display / entry.name,
                    child_settings,
                    aggregator,
                    child_relative,
                )
            elif entry.is_file() and is_source_file(settings, child_relative):
                yield SourceFile(display=str(display / entry.name), path=entry.resolve(), settings=settings)

    def _nested_settings(self, directory: Path, display: Path, settings: Settings) -> Settings:
        fragments = dir_configs(directory)
        if not fragments:
            return settings
        paths = ", ".join(path for fragment in fragments for path in source_paths(fragment))
        self._logger.debug(f"Merging configuration for {display} from {paths}")
        return merge_settings(settings, *fragments)

    def _emit(self, outcome: FileOutcome) -> None:
        if outcome.debug:
            self._logger.debug(outcome.debug)
        if outcome.info:
            self._logger.echo(outcome.info, nl=not outcome.info.endswith("\n"))

    def _fail(self, aggregator: ResultAggregator, display: str, error: BaseException) -> None:
        failure = aggregator.record_failure(display, error)
        self._logger.fail(f"Error while processing file {failure.describe()}")


__all__ = ["FileHandler", "FileWalker", "PreparedRoot", "SourceFile", "is_ignored", "is_source_file"]
