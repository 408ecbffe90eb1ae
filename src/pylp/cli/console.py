# pylp:header:start
#
#   project      : pylp
#   file         : console.py
#   file_relpath : src/pylp/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""Console abstraction for user-facing program output.

This module provides a `ClickConsole` class that separates CLI output from
internal logging. Processed lines go to STDOUT via `emit`; help, traces and
error reports go to STDERR.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """Minimal interface for a console used by the CLI.

    The purpose is to decouple program output from the logging subsystem.
    """

    def emit(self, text: str) -> None:
        """Write one processed line to stdout, verbatim."""
        ...

    def diag(self, text: str) -> None:
        """Write one diagnostic line to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in diagnostics.
        out (TextIO | None): Stream for processed lines. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for diagnostics. Defaults to `sys.stderr`.
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def emit(self, text: str) -> None:
        """Write a processed line to stdout and flush.

        ``color=True`` keeps Click from stripping ANSI sequences: data lines
        are written exactly as the pipeline produced them.
        """
        click.echo(text, file=self.out, color=True)

    def diag(self, text: str) -> None:
        """Write a diagnostic line (trace output) to stderr."""
        click.echo(text, file=self.err, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

