# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the whitespace formatting rules."""

from __future__ import annotations

from pathlib import Path

import pytest

from tidystyle.config import DEFAULT_SETTINGS, ConfigFragment, Settings, merge_settings
from tidystyle.engine import reformat


def _settings(rules: dict[str, dict[str, object]]) -> Settings:
    return merge_settings(DEFAULT_SETTINGS, ConfigFragment(source=Path("test.toml"), data={"rules": rules}))


def test_correct_source_is_unchanged() -> None:
    source = "def main():\n    return 1\n\n\nprint(main())\n"

    assert reformat(source, DEFAULT_SETTINGS) == source


def test_trailing_whitespace_is_stripped() -> None:
    assert reformat("x = 1   \ny = 2\t\n", DEFAULT_SETTINGS) == "x = 1\ny = 2\n"


def test_leading_tabs_are_expanded() -> None:
    settings = _settings({"indentation": {"tab_width": 2}})

    assert reformat("if x:\n\tpass\n", settings) == "if x:\n  pass\n"


def test_tabs_inside_lines_are_kept() -> None:
    assert reformat("a\tb\n", DEFAULT_SETTINGS) == "a\tb\n"


def test_blank_line_runs_are_collapsed() -> None:
    settings = _settings({"blank_lines": {"max_consecutive": 1}})

    assert reformat("a\n\n\n\nb\n", settings) == "a\n\nb\n"


def test_leading_blank_lines_are_trimmed() -> None:
    assert reformat("\n\nimport os\n", DEFAULT_SETTINGS) == "import os\n"


def test_eof_newline_is_normalised() -> None:
    assert reformat("x = 1", DEFAULT_SETTINGS) == "x = 1\n"
    assert reformat("x = 1\n\n\n", DEFAULT_SETTINGS) == "x = 1\n"
    assert reformat("", DEFAULT_SETTINGS) == ""


def test_disabled_rules_leave_text_alone() -> None:
    settings = _settings(
        {
            "whitespace": {"enabled": False},
            "indentation": {"enabled": False},
            "blank_lines": {"enabled": False},
            "eof_newline": {"enabled": False},
        },
    )
    source = "\n\tx = 1  \n\n\n\n"

    assert reformat(source, settings) == source


@pytest.mark.parametrize(
    "source",
    [
        "x = 1  \n\n\n\n\ty = 2",
        "\n\n\t\tdeep\t \n",
        "a\n \n \n \nb",
    ],
)
def test_reformat_is_idempotent(source: str) -> None:
    once = reformat(source, DEFAULT_SETTINGS)

    assert reformat(once, DEFAULT_SETTINGS) == once
