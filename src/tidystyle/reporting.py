# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Summaries and stats exports for completed walks."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Final, Protocol

import edn_format

from .cli.shared import CLILogger
from .models import AggregateResult, StatsReport

StatsEncoder = Callable[[StatsReport], str]

_MS_PER_SECOND: Final[int] = 1000
_MS_PER_MINUTE: Final[int] = 60 * _MS_PER_SECOND


class ReportOptions(Protocol):
    """Presentation flags consumed by :func:`report_stats`."""

    @property
    def verbose(self) -> bool: ...

    @property
    def report(self) -> bool: ...

    @property
    def stats(self) -> str | None: ...


def duration_str(elapsed: float) -> str:
    """Format a duration in milliseconds for human consumption.

    Args:
        elapsed: Duration in milliseconds.

    Returns:
        str: ``"12.34 ms"`` below 100 ms, ``"123 ms"`` below one second,
        ``"1.23 sec"`` below one minute and ``"M:SS"`` beyond that.
    """

    if elapsed < 100:
        return f"{elapsed:.2f} ms"
    if elapsed < _MS_PER_SECOND:
        return f"{int(elapsed)} ms"
    if elapsed < _MS_PER_MINUTE:
        return f"{elapsed / _MS_PER_SECOND:.2f} sec"
    minutes, seconds = divmod(int(elapsed // _MS_PER_SECOND), 60)
    return f"{minutes}:{seconds:02d}"


def _edn_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {edn_format.Keyword(str(key)): _edn_value(item) for key, item in value.items()}
    return value


def encode_edn(stats: StatsReport) -> str:
    """Encode ``stats`` as a single EDN map literal."""

    return edn_format.dumps(_edn_value(stats.to_mapping()))


def encode_tsv(stats: StatsReport) -> str:
    """Encode ``stats`` as ``key<TAB>value`` records with flattened file counts."""

    fields = stats.to_mapping()
    files = fields.pop("files")
    records = {f"files/{kind}": count for kind, count in files.items()}
    records.update(fields)
    return "".join(f"{key}\t{value}\n" for key, value in records.items())


STATS_ENCODERS: Final[dict[str, StatsEncoder]] = {
    "edn": encode_edn,
    "tsv": encode_tsv,
}


def write_stats(file_name: str, stats: StatsReport, *, logger: CLILogger) -> bool:
    """Write ``stats`` to ``file_name`` using the encoder for its extension.

    Args:
        file_name: Destination path; its extension selects the encoding.
        stats: Report to serialise.
        logger: Logger used to warn about unsupported extensions.

    Returns:
        bool: ``True`` when a file was written.
    """

    ext = file_name.rsplit(".", 1)[-1]
    encoder = STATS_ENCODERS.get(ext)
    if encoder is None:
        logger.warn(f"Unknown stats file extension '{ext}' - ignoring!")
        return False
    Path(file_name).write_text(encoder(stats), encoding="utf-8")
    return True


def report_stats(result: AggregateResult, options: ReportOptions, *, logger: CLILogger) -> StatsReport:
    """Summarise ``result`` for the user and export stats when requested.

    The EDN summary line is always written to the diagnostic stream; the human
    readable breakdown is printed only in report or verbose mode.

    Returns:
        StatsReport: The report built for ``result``.
    """

    stats = StatsReport.from_result(result)
    logger.log(encode_edn(stats))
    if options.report or options.verbose:
        logger.echo(f"Checked {stats.total} files in {duration_str(stats.elapsed)}")
        for kind, file_count in sorted(stats.files.items(), key=lambda item: -item[1]):
            logger.echo(f"{file_count:6d} {kind}")
        if stats.diff_lines:
            logger.echo(f"Resulting diff has {stats.diff_lines} lines")
    if options.stats:
        write_stats(options.stats, stats, logger=logger)
    return stats


__all__ = [
    "STATS_ENCODERS",
    "ReportOptions",
    "StatsEncoder",
    "duration_str",
    "encode_edn",
    "encode_tsv",
    "report_stats",
    "write_stats",
]
