# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for duration formatting, summaries and stats exports."""

from __future__ import annotations

import re
from pathlib import Path

import edn_format
import pytest

from tidystyle.cli.shared import CLILogger
from tidystyle.models import AggregateResult, OutcomeKind, StatsReport
from tidystyle.reporting import duration_str, encode_edn, encode_tsv, report_stats, write_stats
from tidystyle.tasks import TaskOptions


@pytest.fixture
def stats() -> StatsReport:
    result = AggregateResult(
        counts={OutcomeKind.CORRECT: 4, OutcomeKind.INCORRECT: 2},
        elapsed=250.5,
        diff_lines=6,
    )
    return StatsReport.from_result(result)


@pytest.mark.parametrize(
    ("elapsed", "expected"),
    [
        (0.5, "0.50 ms"),
        (99.9, "99.90 ms"),
        (100, "100 ms"),
        (999, "999 ms"),
        (999.9, "999 ms"),
        (1000, "1.00 sec"),
        (59999, "60.00 sec"),
        (60000, "1:00"),
        (125000, "2:05"),
        (3_600_000, "60:00"),
    ],
)
def test_duration_str_ranges(elapsed: float, expected: str) -> None:
    assert duration_str(elapsed) == expected


def test_duration_below_hundred_has_two_decimals() -> None:
    assert re.fullmatch(r"\d+\.\d{2} ms", duration_str(99.9))


def test_edn_export_round_trips(stats: StatsReport) -> None:
    decoded = edn_format.loads(encode_edn(stats))

    files = decoded[edn_format.Keyword("files")]
    assert files[edn_format.Keyword("correct")] == 4
    assert files[edn_format.Keyword("incorrect")] == 2
    assert decoded[edn_format.Keyword("total")] == 6
    assert decoded[edn_format.Keyword("elapsed")] == pytest.approx(250.5)
    assert decoded[edn_format.Keyword("diff-lines")] == 6


def test_tsv_export_flattens_file_counts(stats: StatsReport) -> None:
    lines = encode_tsv(stats).splitlines()
    records = dict(line.split("\t") for line in lines)

    assert len(records) == len(lines) == 5
    assert records == {
        "files/correct": "4",
        "files/incorrect": "2",
        "total": "6",
        "elapsed": "250.5",
        "diff-lines": "6",
    }


@pytest.mark.parametrize("name", ["stats.edn", "stats.tsv"])
def test_write_stats_writes_supported_extensions(
    tmp_path: Path,
    stats: StatsReport,
    logger: CLILogger,
    name: str,
) -> None:
    target = tmp_path / name

    assert write_stats(str(target), stats, logger=logger)
    assert target.read_text(encoding="utf-8")


def test_write_stats_ignores_unknown_extension(
    tmp_path: Path,
    stats: StatsReport,
    logger: CLILogger,
    capsys: pytest.CaptureFixture[str],
) -> None:
    target = tmp_path / "stats.xyz"

    assert not write_stats(str(target), stats, logger=logger)
    assert not target.exists()
    assert "Unknown stats file extension 'xyz'" in capsys.readouterr().err


def test_report_stats_prints_summary_sorted_by_count(logger: CLILogger, capsys: pytest.CaptureFixture[str]) -> None:
    result = AggregateResult(
        counts={OutcomeKind.CORRECT: 1, OutcomeKind.INCORRECT: 3},
        elapsed=1500.0,
        diff_lines=9,
    )

    report_stats(result, TaskOptions(report=True), logger=logger)

    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "Checked 4 files in 1.50 sec",
        "     3 incorrect",
        "     1 correct",
        "Resulting diff has 9 lines",
    ]
    assert ":total 4" in captured.err


def test_report_stats_is_quiet_without_report_flag(logger: CLILogger, capsys: pytest.CaptureFixture[str]) -> None:
    result = AggregateResult(counts={OutcomeKind.CORRECT: 2}, elapsed=3.0)

    stats = report_stats(result, TaskOptions(), logger=logger)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert len(captured.err.strip().splitlines()) == 1
    assert stats.diff_lines is None


def test_report_stats_exports_when_configured(tmp_path: Path, logger: CLILogger) -> None:
    target = tmp_path / "out.tsv"
    result = AggregateResult(counts={OutcomeKind.FOUND: 2}, elapsed=3.0)

    report_stats(result, TaskOptions(stats=str(target)), logger=logger)

    assert "files/found\t2" in target.read_text(encoding="utf-8").splitlines()
