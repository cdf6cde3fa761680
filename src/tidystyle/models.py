# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-file outcomes and the aggregate produced by a file walk."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OutcomeKind(str, Enum):
    """Enumerate the categories a processed file can fall into.

    The walker never produces ``ERROR``: files whose handler raises become
    :class:`FileFailure` entries and stay out of ``AggregateResult.counts``.
    The member is available to handlers that classify a file as erroneous
    without raising.
    """

    CORRECT = "correct"
    INCORRECT = "incorrect"
    FIXED = "fixed"
    FOUND = "found"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class FileOutcome:
    """Result of applying a handler to one file.

    Attributes:
        kind: Category assigned to the file.
        debug: Optional message shown only in verbose mode.
        info: Optional payload echoed to standard output (a diff or a path).
        diff_lines: Optional count of changed lines for incorrect files.
    """

    kind: OutcomeKind
    debug: str | None = None
    info: str | None = None
    diff_lines: int | None = None


@dataclass(frozen=True, slots=True)
class FileFailure:
    """A file whose handler raised instead of producing an outcome."""

    path: str
    error: BaseException

    def describe(self) -> str:
        """Return a one-line description of the failure."""

        return f"{self.path}: {type(self.error).__name__}: {self.error}"


@dataclass(frozen=True, slots=True)
class AggregateResult:
    """Combined tally of a walk.

    ``counts`` only covers files that produced an outcome; files whose handler
    raised are listed in ``failures`` instead.
    """

    counts: Mapping[OutcomeKind, int] = field(default_factory=lambda: MappingProxyType({}))
    failures: tuple[FileFailure, ...] = ()
    elapsed: float = 0.0
    diff_lines: int = 0

    @property
    def total(self) -> int:
        """Return the number of files that produced an outcome."""

        return sum(self.counts.values())

    def count(self, kind: OutcomeKind) -> int:
        """Return the number of files recorded with ``kind``."""

        return self.counts.get(kind, 0)


class ResultAggregator:
    """Accumulate outcomes and failures as a walk progresses."""

    def __init__(self) -> None:
        self._counts: dict[OutcomeKind, int] = {}
        self._failures: list[FileFailure] = []
        self._diff_lines = 0

    def record(self, outcome: FileOutcome) -> None:
        """Tally ``outcome`` under its kind."""

        self._counts[outcome.kind] = self._counts.get(outcome.kind, 0) + 1
        if outcome.diff_lines:
            self._diff_lines += outcome.diff_lines

    def record_failure(self, path: str, error: BaseException) -> FileFailure:
        """Record that processing ``path`` raised ``error``."""

        failure = FileFailure(path=path, error=error)
        self._failures.append(failure)
        return failure

    @property
    def dispatched(self) -> int:
        """Return how many files have been recorded so far."""

        return sum(self._counts.values()) + len(self._failures)

    def finish(self, elapsed: float) -> AggregateResult:
        """Freeze the collected data into an :class:`AggregateResult`.

        Args:
            elapsed: Wall-clock duration of the walk in milliseconds.
        """

        return AggregateResult(
            counts=MappingProxyType(dict(self._counts)),
            failures=tuple(self._failures),
            elapsed=elapsed,
            diff_lines=self._diff_lines,
        )


class StatsReport(BaseModel):
    """Serializable summary derived from an :class:`AggregateResult`."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    files: dict[str, int]
    total: int
    elapsed: float
    diff_lines: int | None = Field(default=None, alias="diff-lines")

    @classmethod
    def from_result(cls, result: AggregateResult) -> StatsReport:
        """Build the report for ``result``; ``diff-lines`` only when positive."""

        return cls(
            files={kind.value: count for kind, count in result.counts.items()},
            total=result.total,
            elapsed=result.elapsed,
            diff_lines=result.diff_lines if result.diff_lines > 0 else None,
        )

    def to_mapping(self) -> dict[str, Any]:
        """Return the report keyed by its export field names."""

        return self.model_dump(by_alias=True, exclude_none=True)


__all__ = [
    "AggregateResult",
    "FileFailure",
    "FileOutcome",
    "OutcomeKind",
    "ResultAggregator",
    "StatsReport",
]
