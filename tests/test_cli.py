# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI tests driving the Typer application."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from pathlib import Path

import edn_format
from typer.testing import CliRunner

from tests.conftest import CLEAN_SOURCE, MESSY_SOURCE
from tidystyle.cli.app import app

TreeWriter = Callable[[Path, Mapping[str, str | bytes]], Path]


def test_version_command_prints_version() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert result.stdout.startswith("tidystyle ")


def test_version_command_rejects_arguments() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["version", "extra"])

    assert result.exit_code == 1
    assert "takes no arguments" in result.stderr


def test_config_command_outputs_json(tmp_path: Path, write_tree: TreeWriter) -> None:
    runner = CliRunner()
    write_tree(tmp_path, {".tidystyle.toml": "[files]\nextensions = [\"py\"]\n"})

    result = runner.invoke(app, ["config", str(tmp_path)])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["files"]["extensions"] == ["py"]
    assert payload["rules"]["blank_lines"]["max_consecutive"] == 2


def test_config_command_rejects_two_paths() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["config", "a", "b"])

    assert result.exit_code == 1
    assert "at most one argument" in result.stderr


def test_check_command_exit_codes(tmp_path: Path, write_tree: TreeWriter) -> None:
    runner = CliRunner()
    write_tree(tmp_path, {"clean/a.py": CLEAN_SOURCE, "messy/b.py": MESSY_SOURCE})

    clean = runner.invoke(app, ["check", str(tmp_path / "clean")])
    messy = runner.invoke(app, ["--no-color", "check", str(tmp_path / "messy")])
    missing = runner.invoke(app, ["check", str(tmp_path / "absent")])

    assert clean.exit_code == 0
    assert messy.exit_code == 2
    assert "-\treturn 1" in messy.stdout
    assert missing.exit_code == 3


def test_check_report_and_stats_export(tmp_path: Path, write_tree: TreeWriter) -> None:
    runner = CliRunner()
    write_tree(tmp_path, {"src/a.py": CLEAN_SOURCE, "src/b.py": MESSY_SOURCE})
    stats_file = tmp_path / "stats.edn"

    result = runner.invoke(
        app,
        ["--report", "--no-color", "--stats", str(stats_file), "check", str(tmp_path / "src")],
    )

    assert result.exit_code == 2
    assert "Checked 2 files in " in result.stdout
    stats = edn_format.loads(stats_file.read_text(encoding="utf-8"))
    assert stats[edn_format.Keyword("total")] == 2
    assert stats[edn_format.Keyword("files")][edn_format.Keyword("incorrect")] == 1
    assert stats[edn_format.Keyword("diff-lines")] > 0


def test_fix_command_rewrites_files(tmp_path: Path, write_tree: TreeWriter) -> None:
    runner = CliRunner()
    write_tree(tmp_path, {"b.py": MESSY_SOURCE})

    result = runner.invoke(app, ["--jobs", "1", "fix", str(tmp_path)])

    assert result.exit_code == 0
    assert (tmp_path / "b.py").read_text(encoding="utf-8") == CLEAN_SOURCE


def test_find_command_lists_files(tmp_path: Path, write_tree: TreeWriter) -> None:
    runner = CliRunner()
    write_tree(tmp_path, {"a.py": "", "b.dat": ""})

    result = runner.invoke(app, ["find", str(tmp_path)])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [str(tmp_path / "a.py")]


def test_pipe_command_formats_stdin(tmp_path: Path, monkeypatch) -> None:
    runner = CliRunner()
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["pipe"], input=MESSY_SOURCE)

    assert result.exit_code == 0
    assert result.stdout == CLEAN_SOURCE
