# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

import typer
from rich.console import Console
from rich.text import Text

from ..console import detect_tty, get_console_manager

ANSI: Final[dict[str, str]] = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "cyan": "\033[36;1m",
    "red": "\033[31;1m",
    "green": "\033[32;1m",
    "yellow": "\033[33;1m",
}


def colorize(text: str, code: str, enable: bool) -> str:
    """Wrap ``text`` in the ANSI sequence named ``code`` when writing to a terminal."""

    if not enable or not detect_tty():
        return text
    return f"{ANSI.get(code, '')}{text}{ANSI['reset']}"


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI presentation flags.

    Diagnostics are written to standard error so command output on standard
    output stays machine-consumable.
    """

    console: Console
    use_emoji: bool
    use_color: bool = True
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences."""

        self._status("❌ ", message, "red")

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences."""

        self._status("⚠️ ", message, "yellow")

    def ok(self, message: str) -> None:
        """Log a success message honouring emoji preferences."""

        self._status("✅ ", message, "green")

    def echo(self, message: str, *, nl: bool = True) -> None:
        """Write ``message`` to stdout using Typer's echo helper.

        Args:
            message: Text written to standard output.
            nl: Whether a trailing newline is appended.
        """

        typer.echo(message, nl=nl)

    def log(self, message: str) -> None:
        """Write ``message`` verbatim to the diagnostic stream."""

        self.console.print(message, markup=False, emoji=False, highlight=False)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        Args:
            message: Debug payload rendered with simple ``key=value`` highlighting.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            text.append(match.group(1), style="bold magenta")
            text.append("=", style="dim")
            text.append(match.group(2), style="bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)

    def _status(self, prefix: str, message: str, style: str) -> None:
        text = Text(f"{prefix if self.use_emoji else ''}{message}")
        if self._color():
            text.stylize(style)
        self.console.print(text)

    def _color(self) -> bool:
        return self.use_color and detect_tty()


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided presentation flags.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger bound to a Rich console writing to standard error.
    """

    console = get_console_manager().get(color=not no_color, emoji=emoji, stderr=True)
    return CLILogger(console=console, use_emoji=emoji, use_color=not no_color, debug_enabled=debug)


__all__ = ["ANSI", "CLIError", "CLILogger", "build_cli_logger", "colorize"]
